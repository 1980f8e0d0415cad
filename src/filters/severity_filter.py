# src/filters/severity_filter.py

"""Post-aggregation report filtering by severity."""

import logging

from src.config.settings import Settings
from src.models.quality_issue import IssueType, QualityIssue, Severity
from src.models.quality_report import QualityReport

logger = logging.getLogger("catalog_audit.filters")


class SeverityFilter:
    """Project a report onto the issues of a single severity."""

    @staticmethod
    def parse_severity(name: str | None) -> Severity | None:
        """Map a user-supplied name to a :class:`Severity`.

        ``None``, blank and ``"all"`` mean no filter. Unknown names are
        logged as a warning and also mean no filter.
        """
        if name is None or not name.strip():
            return None
        key = name.strip().upper()
        if key == "ALL":
            return None
        try:
            return Severity[key]
        except KeyError:
            logger.warning(
                "Invalid severity filter '%s', showing all issues", name
            )
            return None

    @staticmethod
    def filter_report(
        report: QualityReport, severity: Severity,
    ) -> QualityReport:
        """Return a new report holding only *severity* issues.

        Types left with no issues are dropped; samples and
        ``total_issues`` are recomputed; ``total_products``,
        ``quality_score`` and ``rule_descriptions`` pass through.
        """
        issues_by_type: dict[IssueType, list[QualityIssue]] = {}
        for issue_type, issues in report.issues_by_type.items():
            kept = [i for i in issues if i.severity is severity]
            if kept:
                issues_by_type[issue_type] = kept

        filtered = QualityReport(
            total_products=report.total_products,
            total_issues=sum(len(v) for v in issues_by_type.values()),
            issues_by_type=issues_by_type,
            issues_by_severity={
                severity: list(report.issues_by_severity.get(severity, []))
            },
            sample_issues={
                issue_type: issues[:Settings.SAMPLE_SIZE]
                for issue_type, issues in issues_by_type.items()
            },
            quality_score=report.quality_score,
            rule_descriptions=dict(report.rule_descriptions),
        )

        removed = report.total_issues - filtered.total_issues
        if removed:
            logger.info(
                "Severity filter '%s' removed %d issues",
                severity.display_name,
                removed,
            )
        return filtered

    @staticmethod
    def apply(
        report: QualityReport, severity_name: str | None,
    ) -> QualityReport:
        """Parse *severity_name* and filter, or return *report* unchanged."""
        severity = SeverityFilter.parse_severity(severity_name)
        if severity is None:
            return report
        return SeverityFilter.filter_report(report, severity)
