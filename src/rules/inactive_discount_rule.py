# src/rules/inactive_discount_rule.py

"""Rule: inactive products must not carry a discount."""

from src.models.product import Product
from src.models.quality_issue import IssueType, QualityIssue, Severity
from src.rules.base_rule import QualityRule


class InactiveDiscountRule(QualityRule):
    """Flag inactive products that still have a discount configured."""

    issue_type = IssueType.INACTIVE_WITH_DISCOUNT
    default_severity = Severity.CRITICAL

    def analyze(self, product: Product) -> QualityIssue | None:
        if product.is_active or product.discount <= 0:
            return None

        return self._create_issue(
            product,
            description=(
                f"Inactive product still has discount of {product.discount}%"
            ),
            actual_value=(
                f"Active: {str(product.is_active).lower()},"
                f" Discount: {product.discount}%"
            ),
            expected_value="Inactive products should have 0% discount",
            suggested_action=(
                "Remove discount or reactivate product"
                " if discount is intentional"
            ),
        )

    def description(self) -> str:
        return "Identifies inactive products that still have active discounts"
