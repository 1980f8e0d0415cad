# src/models/quality_report.py

"""Aggregate result of a single analysis run."""

from dataclasses import dataclass, field

from src.config.settings import Settings
from src.models.quality_issue import (
    IssueStatistic,
    IssueType,
    QualityIssue,
    Severity,
)


@dataclass(frozen=True)
class QualityReport:
    """Grouped issues, samples and headline score for one run.

    ``issues_by_type`` and ``issues_by_severity`` keep discovery order
    inside each bucket. Reports are never changed in place; the severity
    filter builds a new instance.
    """

    total_products: int
    total_issues: int
    issues_by_type: dict[IssueType, list[QualityIssue]] = field(
        default_factory=lambda: dict[IssueType, list[QualityIssue]]()
    )
    issues_by_severity: dict[Severity, list[QualityIssue]] = field(
        default_factory=lambda: dict[Severity, list[QualityIssue]]()
    )
    sample_issues: dict[IssueType, list[QualityIssue]] = field(
        default_factory=lambda: dict[IssueType, list[QualityIssue]]()
    )
    quality_score: float = 100.0
    rule_descriptions: dict[IssueType, str] = field(
        default_factory=lambda: dict[IssueType, str]()
    )

    def issue_percentage(self) -> float:
        """Issues per product, as a percentage (may exceed 100)."""
        if self.total_products > 0:
            return self.total_issues / self.total_products * 100
        return 0.0

    def issue_type_statistics(self) -> dict[IssueType, IssueStatistic]:
        """Count per type, with percentage of products analysed."""
        return {
            issue_type: IssueStatistic(
                count=len(issues),
                percentage=(
                    len(issues) / self.total_products * 100
                    if self.total_products > 0
                    else 0.0
                ),
            )
            for issue_type, issues in self.issues_by_type.items()
        }

    def severity_statistics(self) -> dict[Severity, IssueStatistic]:
        """Count per severity, with percentage of all issues."""
        return {
            severity: IssueStatistic(
                count=len(issues),
                percentage=(
                    len(issues) / self.total_issues * 100
                    if self.total_issues > 0
                    else 0.0
                ),
            )
            for severity, issues in self.issues_by_severity.items()
        }

    def critical_count(self) -> int:
        """Number of critical issues in this report."""
        return len(self.issues_by_severity.get(Severity.CRITICAL, []))

    def is_quality_acceptable(self) -> bool:
        """Critical rate under 5% of products and score of at least 80."""
        critical_rate = (
            self.critical_count() / self.total_products * 100
            if self.total_products > 0
            else 0.0
        )
        return (
            critical_rate < Settings.ACCEPTABLE_CRITICAL_RATE
            and self.quality_score >= Settings.ACCEPTABLE_QUALITY_SCORE
        )

    def all_issues(self) -> list[QualityIssue]:
        """Flatten ``issues_by_type`` in map order."""
        return [
            issue
            for issues in self.issues_by_type.values()
            for issue in issues
        ]
