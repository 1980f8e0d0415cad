# src/services/quality_analyzer.py

"""Runs the quality rules over a catalog and aggregates the findings."""

import asyncio
import logging
from collections.abc import Sequence

from src.config.settings import Settings
from src.models.product import Product
from src.models.quality_issue import IssueType, QualityIssue, Severity
from src.models.quality_report import QualityReport
from src.rules.base_rule import QualityRule
from src.rules.registry import critical_rules, default_rules

logger = logging.getLogger("catalog_audit.analyzer")


class AnalysisError(Exception):
    """Unrecoverable analysis fault; the run is aborted without a report."""


def calculate_quality_score(total_products: int, total_issues: int) -> float:
    """Map issue density onto a 0-100 score (100 = no issues).

    A product with several issues counts several times, so the rate can
    pass 100%; only the final score is clamped at 0.
    """
    if total_products == 0:
        return 100.0
    issue_rate = total_issues / total_products
    return max(0.0, 100.0 - issue_rate * 100.0)


def _chunked(
    products: Sequence[Product], size: int,
) -> list[Sequence[Product]]:
    """Split *products* into consecutive slices of at most *size*."""
    return [
        products[start:start + size]
        for start in range(0, len(products), size)
    ]


class QualityAnalyzer:
    """Applies a rule set to products and builds a :class:`QualityReport`.

    Rules are stateless, so chunks of products are evaluated in worker
    threads. ``asyncio.gather`` returns chunk results in submission
    order, which keeps the merged issue list in product order.
    """

    def __init__(
        self,
        rules: Sequence[QualityRule] | None = None,
        chunk_size: int | None = None,
    ) -> None:
        self.rules: list[QualityRule] = (
            list(rules) if rules is not None else default_rules()
        )
        self.chunk_size: int = (
            chunk_size if chunk_size is not None
            else Settings.ANALYSIS_CHUNK_SIZE
        )
        if self.chunk_size < 1:
            msg = f"chunk_size must be positive, got {self.chunk_size}"
            raise ValueError(msg)
        self.failed_evaluations: int = 0

    # ── Factories ────────────────────────────────────────

    @classmethod
    def with_custom_rules(
        cls, rules: Sequence[QualityRule],
    ) -> "QualityAnalyzer":
        """Build an analyzer over an explicit rule list."""
        return cls(rules)

    @classmethod
    def critical_issues_only(cls) -> "QualityAnalyzer":
        """Build an analyzer limited to rules declared critical."""
        return cls(critical_rules())

    # ── Evaluation ───────────────────────────────────────

    def _analyze_chunk(
        self, chunk: Sequence[Product],
    ) -> tuple[list[QualityIssue], int]:
        """Run every rule over *chunk*; return issues and fault count."""
        issues: list[QualityIssue] = []
        failures = 0
        for product in chunk:
            for rule in self.rules:
                try:
                    issue = rule.analyze(product)
                except Exception as exc:
                    failures += 1
                    logger.warning(
                        "Error analyzing product %s with rule %s: %s",
                        product.id,
                        rule.issue_type.name,
                        exc,
                    )
                    logger.debug(
                        "Traceback for product %s, rule %s",
                        product.id,
                        rule.issue_type.name,
                        exc_info=True,
                    )
                    continue
                if issue is not None:
                    issues.append(issue)
        return issues, failures

    async def analyze_with_failures(
        self, products: Sequence[Product],
    ) -> tuple[list[QualityIssue], int]:
        """Evaluate every rule against every product.

        Output order is product order outer, rule order inner. A rule
        that raises on one product contributes nothing for that pair
        and the run continues; such faults are counted in the second
        element of the result, so concurrent runs never share a count.

        Raises:
            AnalysisError: if the analyzer has no rules configured.
        """
        if not self.rules:
            msg = "Cannot analyze products without at least one rule"
            raise AnalysisError(msg)

        logger.info(
            "Starting quality analysis for %d products with %d rules",
            len(products),
            len(self.rules),
        )

        chunks = _chunked(products, self.chunk_size)
        results = await asyncio.gather(
            *(asyncio.to_thread(self._analyze_chunk, c) for c in chunks)
        )

        issues: list[QualityIssue] = []
        failures = 0
        for chunk_issues, chunk_failures in results:
            issues.extend(chunk_issues)
            failures += chunk_failures

        if failures:
            logger.warning(
                "%d rule evaluation(s) failed and were skipped", failures
            )
        logger.info(
            "Analysis complete. Found %d quality issues across %d chunk(s)",
            len(issues),
            len(chunks),
        )
        return issues, failures

    async def analyze_products(
        self, products: Sequence[Product],
    ) -> list[QualityIssue]:
        """Evaluate every rule against every product and return the issues.

        ``failed_evaluations`` is set to the fault count of this call.
        Concurrent callers sharing one analyzer should use
        :meth:`analyze_with_failures` instead.
        """
        issues, failures = await self.analyze_with_failures(products)
        self.failed_evaluations = failures
        return issues

    # ── Aggregation ──────────────────────────────────────

    def generate_report(
        self,
        products: Sequence[Product],
        issues: Sequence[QualityIssue],
    ) -> QualityReport:
        """Group *issues* into a report. Pure and deterministic.

        Raises:
            AnalysisError: if the grouped counts disagree with the input.
        """
        issues_by_type: dict[IssueType, list[QualityIssue]] = {}
        issues_by_severity: dict[Severity, list[QualityIssue]] = {}
        for issue in issues:
            issues_by_type.setdefault(issue.issue_type, []).append(issue)
            issues_by_severity.setdefault(issue.severity, []).append(issue)

        report = QualityReport(
            total_products=len(products),
            total_issues=len(issues),
            issues_by_type=issues_by_type,
            issues_by_severity=issues_by_severity,
            sample_issues={
                issue_type: bucket[:Settings.SAMPLE_SIZE]
                for issue_type, bucket in issues_by_type.items()
            },
            quality_score=calculate_quality_score(
                len(products), len(issues)
            ),
            rule_descriptions={
                rule.issue_type: rule.description() for rule in self.rules
            },
        )
        _check_invariants(report)
        return report

    async def analyze_and_report(
        self, products: Sequence[Product],
    ) -> QualityReport:
        """Analyze *products* and aggregate the result in one call."""
        issues = await self.analyze_products(products)
        return self.generate_report(products, issues)


def _check_invariants(report: QualityReport) -> None:
    """Verify both groupings account for every issue exactly once."""
    by_type = sum(len(v) for v in report.issues_by_type.values())
    by_severity = sum(len(v) for v in report.issues_by_severity.values())
    if by_type != report.total_issues or by_severity != report.total_issues:
        msg = (
            f"Report totals disagree: total={report.total_issues},"
            f" by_type={by_type}, by_severity={by_severity}"
        )
        raise AnalysisError(msg)
