# src/rules/dead_stock_rule.py

"""Rule: inventory that has never sold."""

from src.config.settings import Settings
from src.models.product import Product
from src.models.quality_issue import IssueType, QualityIssue, Severity
from src.rules.base_rule import QualityRule

_LARGE_STOCK = 100   # Above this, dead stock is a warning
_MEDIUM_STOCK = 50   # Above this, pricing review is suggested


class DeadStockRule(QualityRule):
    """Flag products with stock on hand and zero recorded sales.

    The export has no last-sale date, so ``sales_count == 0`` stands in
    for "no sale within ``days_since_last_sale`` days". A product with
    a single sale years ago is therefore never flagged.
    """

    issue_type = IssueType.DEAD_STOCK
    default_severity = Severity.INFO

    def __init__(self, days_since_last_sale: int | None = None) -> None:
        self.days_since_last_sale = (
            days_since_last_sale
            if days_since_last_sale is not None
            else Settings.DEAD_STOCK_DAYS
        )

    def analyze(self, product: Product) -> QualityIssue | None:
        if not product.is_potential_dead_stock(self.days_since_last_sale):
            return None

        stock = product.stock_quantity
        if stock > _LARGE_STOCK:
            severity = Severity.WARNING
            action = "Consider promotion or liquidation"
        elif stock > _MEDIUM_STOCK:
            severity = Severity.INFO
            action = "Review pricing or marketing strategy"
        else:
            severity = Severity.INFO
            action = "Monitor and consider promotional activities"

        return self._create_issue(
            product,
            description=f"Product has stock ({stock}) but no recorded sales",
            actual_value=f"Stock: {stock}, Sales: {product.sales_count}",
            expected_value="Products with stock should have sales > 0",
            suggested_action=action,
            severity=severity,
        )

    def description(self) -> str:
        return (
            "Identifies products with inventory but no sales activity"
            " (potential dead stock)"
        )
