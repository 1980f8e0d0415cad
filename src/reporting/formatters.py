# src/reporting/formatters.py

"""Render a QualityReport as console text, markdown or CSV."""

import csv
import io
from abc import ABC, abstractmethod
from datetime import datetime

from rich.console import Console
from rich.table import Table

from src.config.settings import Settings
from src.models.quality_issue import IssueType, QualityIssue, Severity
from src.models.quality_report import QualityReport

SUPPORTED_FORMATS: list[str] = ["console", "markdown", "csv"]

_SEVERITY_ICONS: dict[Severity, str] = {
    Severity.CRITICAL: "🔴",
    Severity.WARNING: "🟡",
    Severity.INFO: "🔵",
}
_NO_SEVERITY_ICON = "⚪"


def _status_text(report: QualityReport) -> str:
    return "ACCEPTABLE" if report.is_quality_acceptable() else "NEEDS ATTENTION"


def _type_icon(issues: list[QualityIssue]) -> str:
    """Icon for a type bucket, taken from its first issue's severity."""
    if not issues:
        return _NO_SEVERITY_ICON
    return _SEVERITY_ICONS[issues[0].severity]


def _types_by_count(
    report: QualityReport,
) -> list[tuple[IssueType, list[QualityIssue]]]:
    """Type buckets ordered by descending size (stable on ties)."""
    return sorted(
        report.issues_by_type.items(),
        key=lambda item: len(item[1]),
        reverse=True,
    )


class ReportFormatter(ABC):
    """Turns a report into text. Implementations must not mutate it."""

    file_extension: str = "txt"

    @abstractmethod
    def format(self, report: QualityReport) -> str:
        """Return the rendered report."""


class ConsoleReportFormatter(ReportFormatter):
    """Terminal-friendly layout rendered through Rich tables."""

    file_extension = "txt"

    def __init__(self, width: int | None = None) -> None:
        self.width = width or Settings.CONSOLE_WIDTH

    def format(self, report: QualityReport) -> str:
        buffer = io.StringIO()
        console = Console(
            file=buffer,
            width=self.width,
            no_color=True,
            markup=False,
            highlight=False,
            emoji=False,
        )

        console.rule(characters="=")
        console.print("📊 E-COMMERCE PRODUCT QUALITY ANALYSIS REPORT")
        console.rule(characters="=")
        console.print()

        summary = Table(
            title="📋 EXECUTIVE SUMMARY",
            show_header=False,
            title_justify="left",
        )
        summary.add_column("Metric")
        summary.add_column("Value", justify="right")
        summary.add_row("📦 Total Products Analyzed", str(report.total_products))
        summary.add_row("🚨 Total Issues Found", str(report.total_issues))
        summary.add_row(
            "📈 Overall Quality Score", f"{report.quality_score:.1f}%"
        )
        summary.add_row("📊 Issue Rate", f"{report.issue_percentage():.2f}%")
        summary.add_row("✅ Quality Status", _status_text(report))
        console.print(summary)
        console.print()

        severity_stats = report.severity_statistics()
        severity_table = Table(
            title="⚡ ISSUES BY SEVERITY", title_justify="left",
        )
        severity_table.add_column("Severity")
        severity_table.add_column("Issues", justify="right")
        severity_table.add_column("Share", justify="right")
        for severity in Severity.by_priority():
            stats = severity_stats.get(severity)
            if stats is None or stats.count == 0:
                continue
            severity_table.add_row(
                f"{_SEVERITY_ICONS[severity]} {severity.display_name}",
                str(stats.count),
                f"{stats.percentage:.1f}%",
            )
        console.print(severity_table)
        console.print()

        console.print("📝 ISSUES BY TYPE")
        type_stats = report.issue_type_statistics()
        for issue_type, issues in _types_by_count(report):
            stats = type_stats[issue_type]
            console.print(f"{_type_icon(issues)} {issue_type.display_name}")
            console.print(
                f"   Count: {stats.count}"
                f" ({stats.percentage:.2f}% of products)"
            )
            console.print(
                "   Description: "
                f"{report.rule_descriptions.get(issue_type, '')}"
            )
            console.print()

        if report.sample_issues:
            console.print(
                f"🔍 SAMPLE ISSUES (Max {Settings.SAMPLE_SIZE} per type)"
            )
            for issue_type, samples in report.sample_issues.items():
                if not samples:
                    continue
                console.print(f"📌 {issue_type.display_name}:")
                for index, issue in enumerate(samples, 1):
                    console.print(f"   {index}. Product: {issue.product_id}")
                    console.print(f"      Issue: {issue.description}")
                    if issue.suggested_action:
                        console.print(
                            f"      Action: {issue.suggested_action}"
                        )
                console.print()

        console.rule(characters="=")
        console.print(
            f"Report generated on: {datetime.now():%Y-%m-%d %H:%M:%S}"
        )
        return buffer.getvalue()


class MarkdownReportFormatter(ReportFormatter):
    """Markdown suitable for wikis and pull-request comments."""

    file_extension = "md"

    def format(self, report: QualityReport) -> str:
        status = (
            "✅ Acceptable"
            if report.is_quality_acceptable()
            else "❌ Needs Attention"
        )
        lines = [
            "# 📊 E-commerce Product Quality Analysis Report",
            "",
            "## Executive Summary",
            "",
            "| Metric | Value |",
            "|--------|-------|",
            f"| 📦 Total Products | {report.total_products} |",
            f"| 🚨 Total Issues | {report.total_issues} |",
            f"| 📈 Quality Score | {report.quality_score:.1f}% |",
            f"| 📊 Issue Rate | {report.issue_percentage():.2f}% |",
            f"| ✅ Status | {status} |",
            "",
            "## Issues by Severity",
            "",
            "| Severity | Count | Percentage |",
            "|----------|-------|------------|",
        ]

        severity_stats = report.severity_statistics()
        for severity in Severity.by_priority():
            stats = severity_stats.get(severity)
            if stats is None or stats.count == 0:
                continue
            lines.append(
                f"| {_SEVERITY_ICONS[severity]} {severity.display_name}"
                f" | {stats.count} | {stats.percentage:.1f}% |"
            )
        lines += ["", "## Issues by Type", ""]

        type_stats = report.issue_type_statistics()
        for issue_type, issues in _types_by_count(report):
            stats = type_stats[issue_type]
            lines += [
                f"### {_type_icon(issues)} {issue_type.display_name}",
                "",
                f"- **Count:** {stats.count}"
                f" ({stats.percentage:.2f}% of products)",
                "- **Description:** "
                f"{report.rule_descriptions.get(issue_type, '')}",
                "",
            ]
            samples = report.sample_issues.get(issue_type, [])
            if not samples:
                continue
            lines += ["**Sample Issues:**", ""]
            for index, issue in enumerate(samples, 1):
                lines.append(f"{index}. **Product:** `{issue.product_id}`")
                lines.append(f"   - **Issue:** {issue.description}")
                if issue.suggested_action:
                    lines.append(
                        f"   - **Suggested Action:** {issue.suggested_action}"
                    )
                lines.append("")

        lines += [
            "---",
            f"*Report generated on: {datetime.now():%Y-%m-%d %H:%M:%S}*",
        ]
        return "\n".join(lines) + "\n"


class CsvReportFormatter(ReportFormatter):
    """Three CSV blocks: summary, per-type counts, one row per issue."""

    file_extension = "csv"

    def format(self, report: QualityReport) -> str:
        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator="\n")

        status = (
            "Acceptable" if report.is_quality_acceptable() else "Needs Attention"
        )
        writer.writerow(["Report Section", "Metric", "Value"])
        writer.writerow(["Summary", "Total Products", report.total_products])
        writer.writerow(["Summary", "Total Issues", report.total_issues])
        writer.writerow(
            ["Summary", "Quality Score", f"{report.quality_score:.1f}"]
        )
        writer.writerow(
            ["Summary", "Issue Rate", f"{report.issue_percentage():.2f}"]
        )
        writer.writerow(["Summary", "Quality Status", status])
        writer.writerow([])

        writer.writerow(["Issue Type", "Count", "Percentage", "Description"])
        type_stats = report.issue_type_statistics()
        for issue_type, _ in _types_by_count(report):
            stats = type_stats[issue_type]
            writer.writerow([
                issue_type.display_name,
                stats.count,
                f"{stats.percentage:.2f}",
                report.rule_descriptions.get(issue_type, ""),
            ])
        writer.writerow([])

        writer.writerow([
            "Product ID",
            "Issue Type",
            "Severity",
            "Description",
            "Actual Value",
            "Expected Value",
            "Suggested Action",
        ])
        for issue in report.all_issues():
            writer.writerow([
                issue.product_id,
                issue.issue_type.display_name,
                issue.severity.display_name,
                issue.description,
                "" if issue.actual_value is None else issue.actual_value,
                issue.expected_value or "",
                issue.suggested_action or "",
            ])
        return buffer.getvalue()


_FORMAT_ALIASES: dict[str, type[ReportFormatter]] = {
    "console": ConsoleReportFormatter,
    "text": ConsoleReportFormatter,
    "txt": ConsoleReportFormatter,
    "markdown": MarkdownReportFormatter,
    "md": MarkdownReportFormatter,
    "csv": CsvReportFormatter,
}


def create_formatter(name: str) -> ReportFormatter:
    """Return a formatter for *name* (case-insensitive).

    Raises:
        ValueError: for an unsupported format name.
    """
    formatter_cls = _FORMAT_ALIASES.get(name.strip().lower())
    if formatter_cls is None:
        msg = (
            f"Unsupported format: {name}. "
            f"Supported formats: {', '.join(SUPPORTED_FORMATS)}"
        )
        raise ValueError(msg)
    return formatter_cls()
