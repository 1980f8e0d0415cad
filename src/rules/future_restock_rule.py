# src/rules/future_restock_rule.py

"""Rule: the last restock date cannot lie in the future."""

from collections.abc import Callable
from datetime import date

from src.models.product import Product
from src.models.quality_issue import IssueType, QualityIssue, Severity
from src.rules.base_rule import QualityRule


class FutureRestockDateRule(QualityRule):
    """Flag restock dates later than today.

    "Today" is read from *today_provider* on every call, so a long
    run that crosses midnight uses the date current at evaluation time.
    """

    issue_type = IssueType.FUTURE_RESTOCK_DATE
    default_severity = Severity.INFO

    def __init__(
        self, today_provider: Callable[[], date] = date.today,
    ) -> None:
        self._today = today_provider

    def analyze(self, product: Product) -> QualityIssue | None:
        if product.last_restock_date <= self._today():
            return None

        restock = product.last_restock_date.isoformat()
        return self._create_issue(
            product,
            description=f"Restock date is in the future ({restock})",
            actual_value=f"Restock Date: {restock}",
            expected_value="Restock date should be today or in the past",
            suggested_action=(
                "Verify restock date accuracy or update if data entry error"
            ),
        )

    def description(self) -> str:
        return "Detects products with restock dates set in the future"
