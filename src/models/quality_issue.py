# src/models/quality_issue.py

"""Issue taxonomy: issue types, severities and the issue record itself."""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class IssueType(Enum):
    """Business rule violations the analyzer can detect.

    Each member carries a short display name and a one-line business
    description used by the report renderers.
    """

    COST_HIGHER_THAN_PRICE = (
        "Cost > Price",
        "Products where production cost exceeds selling price",
    )
    RATING_REVIEW_MISMATCH = (
        "Rating/Review Mismatch",
        "Products with inconsistent rating and review count data",
    )
    INACTIVE_WITH_DISCOUNT = (
        "Inactive with Discount",
        "Inactive products that still have active discounts",
    )
    OUT_OF_STOCK = (
        "Out of Stock",
        "Products with zero stock quantity",
    )
    FUTURE_RESTOCK_DATE = (
        "Future Restock Date",
        "Products with restock dates in the future",
    )
    DEAD_STOCK = (
        "Dead Stock",
        "Products with inventory but no sales activity in 180+ days",
    )

    def __init__(self, display_name: str, business_description: str) -> None:
        self.display_name = display_name
        self.business_description = business_description


class Severity(Enum):
    """Priority tier of an issue; lower ``priority`` sorts first."""

    CRITICAL = ("Critical", 1)  # Immediate financial impact
    WARNING = ("Warning", 2)    # Operational issues
    INFO = ("Info", 3)          # Optimisation opportunities

    def __init__(self, display_name: str, priority: int) -> None:
        self.display_name = display_name
        self.priority = priority

    @classmethod
    def by_priority(cls) -> list["Severity"]:
        """Return all severities, most urgent first."""
        return sorted(cls, key=lambda s: s.priority)


@dataclass(frozen=True)
class QualityIssue:
    """One violation of one rule by one product."""

    product_id: str
    issue_type: IssueType
    severity: Severity
    description: str
    actual_value: Any = None
    expected_value: str | None = None
    suggested_action: str | None = None

    def to_detailed_string(self) -> str:
        """Render the issue as an indented multi-line block."""
        lines = [
            f"{self.severity.display_name}: {self.issue_type.display_name}",
            f"  Product: {self.product_id}",
            f"  Issue: {self.description}",
        ]
        if self.actual_value is not None:
            lines.append(f"  Actual: {self.actual_value}")
        if self.expected_value is not None:
            lines.append(f"  Expected: {self.expected_value}")
        if self.suggested_action is not None:
            lines.append(f"  Suggested Action: {self.suggested_action}")
        return "\n".join(lines) + "\n"


@dataclass(frozen=True)
class IssueStatistic:
    """Count and percentage for one bucket of issues."""

    count: int
    percentage: float
