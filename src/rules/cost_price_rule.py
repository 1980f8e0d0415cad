# src/rules/cost_price_rule.py

"""Rule: production cost must not exceed the selling price."""

from src.models.product import Product
from src.models.quality_issue import IssueType, QualityIssue, Severity
from src.rules.base_rule import QualityRule


class CostPriceRule(QualityRule):
    """Flag products that lose money on every sale."""

    issue_type = IssueType.COST_HIGHER_THAN_PRICE
    default_severity = Severity.CRITICAL

    def analyze(self, product: Product) -> QualityIssue | None:
        """Fire when ``cost > price``; report the loss per unit."""
        if product.cost <= product.price:
            return None

        loss_per_unit = product.cost - product.price
        return self._create_issue(
            product,
            description=(
                f"Cost ({product.cost}) exceeds price ({product.price})"
                f" - Loss: {loss_per_unit} per unit"
            ),
            actual_value=f"Cost: {product.cost}, Price: {product.price}",
            expected_value="Cost ≤ Price",
            suggested_action=(
                f"Increase price to at least {product.cost}"
                " or reduce production cost"
            ),
        )

    def description(self) -> str:
        """Return the rule summary."""
        return (
            "Identifies products where production cost exceeds selling"
            " price, indicating potential losses"
        )
