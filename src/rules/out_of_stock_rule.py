# src/rules/out_of_stock_rule.py

"""Rule: products with no stock on hand."""

from src.models.product import Product
from src.models.quality_issue import IssueType, QualityIssue, Severity
from src.rules.base_rule import QualityRule


class OutOfStockRule(QualityRule):
    """Flag zero-stock products.

    Active products are a warning (lost sales); inactive ones are only
    informational since nobody can order them anyway.
    """

    issue_type = IssueType.OUT_OF_STOCK
    default_severity = Severity.WARNING

    def analyze(self, product: Product) -> QualityIssue | None:
        if product.stock_quantity != 0:
            return None

        if product.is_active:
            severity = Severity.WARNING
            action = "Restock immediately or mark as inactive if discontinuing"
        else:
            severity = Severity.INFO
            action = "Consider discontinuing if permanently out of stock"

        return self._create_issue(
            product,
            description=(
                "Product is out of stock"
                f" (quantity: {product.stock_quantity})"
            ),
            actual_value=f"Stock: {product.stock_quantity}",
            expected_value="Stock > 0 for active products",
            suggested_action=action,
            severity=severity,
        )

    def description(self) -> str:
        return "Identifies products that are completely out of stock"
