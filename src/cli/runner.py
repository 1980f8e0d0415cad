# src/cli/runner.py

"""Headless analysis runner: load, analyze, filter, render."""

import logging
from pathlib import Path

from rich.console import Console
from rich.table import Table

from src.config.settings import Settings
from src.filters.product_validator import ProductValidator
from src.filters.severity_filter import SeverityFilter
from src.models.quality_report import QualityReport
from src.rules.base_rule import QualityRule
from src.rules.registry import (
    critical_rules,
    default_rules,
    rules_matching_type,
)
from src.services.quality_analyzer import AnalysisError, QualityAnalyzer
from src.storage.csv_repository import CsvProductRepository, ProductLoadError
from src.storage.report_writer import ReportWriter

logger = logging.getLogger("catalog_audit.cli")

# Stderr console for status messages so stdout stays clean for reports
_err = Console(stderr=True)


def select_rules(
    severity: str | None, type_filter: str | None,
) -> list[QualityRule]:
    """Pick the rule set for a run.

    ``critical`` severity selects the critical-only rules; otherwise a
    type fragment narrows the default rules. A fragment matching no
    rule falls back to the full default set with a warning.
    """
    if severity is not None and severity.strip().lower() == "critical":
        return critical_rules()

    if type_filter:
        rules = rules_matching_type(type_filter)
        if rules:
            return rules
        logger.warning(
            "Issue type filter '%s' matched no rules, using all rules",
            type_filter,
        )
        _err.print(
            f"[yellow]⚠️  No rule matches type '{type_filter}',"
            " running all rules[/yellow]"
        )

    return default_rules()


def print_summary(report: QualityReport) -> None:
    """Print a short run summary with the top three issue types."""
    status = (
        "[green]✅ Acceptable[/green]"
        if report.is_quality_acceptable()
        else "[red]❌ Needs Attention[/red]"
    )
    table = Table(
        title="📊 ANALYSIS SUMMARY",
        show_header=False,
        title_style="bold cyan",
    )
    table.add_column("Metric", style="bold")
    table.add_column("Value", justify="right")
    table.add_row("Products analyzed", str(report.total_products))
    table.add_row("Issues found", str(report.total_issues))
    table.add_row("Quality score", f"{report.quality_score:.1f}%")
    table.add_row("Status", status)
    _err.print(table)

    if report.total_issues == 0:
        return

    top = sorted(
        report.issue_type_statistics().items(),
        key=lambda item: item[1].count,
        reverse=True,
    )[:3]
    _err.print("Top issues by count:")
    for issue_type, stats in top:
        _err.print(
            f"  • {issue_type.display_name}: {stats.count}"
            f" ({stats.percentage:.1f}%)"
        )


async def run_analysis(
    csv_file: str,
    output_format: str = Settings.DEFAULT_FORMAT,
    severity: str | None = None,
    type_filter: str | None = None,
    output_file: str | None = None,
) -> int:
    """Run one analysis and return an exit code (0=ok, 1=fail)."""
    _err.print("[bold]🚀 Starting E-commerce Product Quality Analysis[/bold]")
    _err.print(
        f"[dim]input={csv_file}  format={output_format}"
        f"  severity={severity or 'all'}[/dim]"
    )

    try:
        loaded = CsvProductRepository(csv_file).load_all_products()
    except ProductLoadError as exc:
        logger.error("Failed to load products: %s", exc)
        _err.print(f"[red]❌ Failed to load products: {exc}[/red]")
        return 1

    if loaded.error_count:
        _err.print(
            f"[yellow]⚠️  {loaded.error_count} rows could not be parsed"
            " (see log for details)[/yellow]"
        )

    products, dropped = ProductValidator.validate(loaded.products)
    if dropped:
        _err.print(f"[yellow]⚠️  {dropped} invalid products dropped[/yellow]")

    if not products:
        _err.print("[red]❌ No products found in the CSV file[/red]")
        return 1

    _err.print(f"[green]✓ Loaded {len(products)} products[/green]")

    analyzer = QualityAnalyzer(select_rules(severity, type_filter))
    try:
        issues, failures = await analyzer.analyze_with_failures(products)
        report = analyzer.generate_report(products, issues)
    except AnalysisError as exc:
        logger.error("Analysis failed: %s", exc, exc_info=True)
        _err.print(f"[red]❌ Analysis failed: {exc}[/red]")
        return 1

    if failures:
        _err.print(
            f"[yellow]⚠️  {failures} rule evaluations"
            " failed (see log)[/yellow]"
        )

    # Unknown names log a warning and leave the report unfiltered
    report = SeverityFilter.apply(report, severity)

    writer = ReportWriter()
    if output_file is not None:
        if not writer.save_report(report, Path(output_file), output_format):
            _err.print(f"[red]❌ Failed to save report to {output_file}[/red]")
            return 1
        _err.print(f"[green]✅ Report saved to {output_file}[/green]")
    else:
        writer.display_report(report, output_format)

    _err.print()
    print_summary(report)
    return 0
