# src/rules/rating_review_rule.py

"""Rule: ratings and review counts must agree."""

from src.models.product import Product
from src.models.quality_issue import IssueType, QualityIssue, Severity
from src.rules.base_rule import QualityRule


class RatingReviewConsistencyRule(QualityRule):
    """Flag a rating without reviews, or reviews without a rating."""

    issue_type = IssueType.RATING_REVIEW_MISMATCH
    default_severity = Severity.WARNING

    def analyze(self, product: Product) -> QualityIssue | None:
        """Fire on either direction of the rating/review mismatch."""
        actual = (
            f"Rating: {product.rating}, Reviews: {product.review_count}"
        )
        if product.rating > 0 and product.review_count == 0:
            return self._create_issue(
                product,
                description=(
                    f"Product has rating ({product.rating}) but no reviews"
                ),
                actual_value=actual,
                expected_value="Rating > 0 should have Reviews > 0",
                suggested_action=(
                    "Verify rating data or add missing review records"
                ),
            )
        if product.rating == 0 and product.review_count > 0:
            return self._create_issue(
                product,
                description=(
                    f"Product has reviews ({product.review_count})"
                    " but no rating"
                ),
                actual_value=actual,
                expected_value="Reviews > 0 should have Rating > 0",
                suggested_action="Recalculate rating from existing reviews",
            )
        return None

    def description(self) -> str:
        """Return the rule summary."""
        return (
            "Detects inconsistencies between product ratings"
            " and review counts"
        )
