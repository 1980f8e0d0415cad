# src/rules/base_rule.py

"""Abstract base class for all product quality rules."""

from abc import ABC, abstractmethod
from typing import Any

from src.models.product import Product
from src.models.quality_issue import IssueType, QualityIssue, Severity


class QualityRule(ABC):
    """A single independent check that inspects one product.

    Subclasses declare the :class:`IssueType` they own and the
    severity used when they do not pick one per product. ``analyze``
    must be a pure function of its argument: it returns a new
    :class:`QualityIssue` when the product violates the rule and
    ``None`` otherwise.
    """

    issue_type: IssueType
    default_severity: Severity

    @abstractmethod
    def analyze(self, product: Product) -> QualityIssue | None:
        """Check *product* and return an issue, or None if it passes."""

    @abstractmethod
    def description(self) -> str:
        """Return a fixed, human-readable summary of what is checked."""

    def _create_issue(
        self,
        product: Product,
        description: str,
        actual_value: Any = None,
        expected_value: str | None = None,
        suggested_action: str | None = None,
        severity: Severity | None = None,
    ) -> QualityIssue:
        """Build an issue stamped with this rule's type and severity."""
        return QualityIssue(
            product_id=product.id,
            issue_type=self.issue_type,
            severity=severity or self.default_severity,
            description=description,
            actual_value=actual_value,
            expected_value=expected_value,
            suggested_action=suggested_action,
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.issue_type.name})"
