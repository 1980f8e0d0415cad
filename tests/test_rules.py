# tests/test_rules.py

"""Tests for the six built-in quality rules."""

import unittest
from datetime import date

from src.models.product import Product
from src.models.quality_issue import IssueType, Severity
from src.rules.cost_price_rule import CostPriceRule
from src.rules.dead_stock_rule import DeadStockRule
from src.rules.future_restock_rule import FutureRestockDateRule
from src.rules.inactive_discount_rule import InactiveDiscountRule
from src.rules.out_of_stock_rule import OutOfStockRule
from src.rules.rating_review_rule import RatingReviewConsistencyRule

TODAY = date(2025, 6, 1)


def _p(**overrides: object) -> Product:
    """Create a Product that passes every rule unless overridden."""
    fields: dict[str, object] = {
        "id": "PRD10001",
        "name": "Desk Lamp",
        "category": "Home",
        "sub_category": "Lighting",
        "brand": "Lumen",
        "price": 10.0,
        "cost": 5.0,
        "stock_quantity": 5,
        "warehouse_location": "BKK-01",
        "supplier": "Acme Co",
        "last_restock_date": date(2025, 1, 1),
        "sales_count": 1,
        "rating": 0.0,
        "review_count": 0,
    }
    fields.update(overrides)
    return Product(**fields)  # type: ignore[arg-type]


class TestCostPriceRule(unittest.TestCase):
    """CostPriceRule tests."""

    def setUp(self) -> None:
        self.rule = CostPriceRule()

    def test_declares_type_and_severity(self) -> None:
        """The rule owns COST_HIGHER_THAN_PRICE and defaults to critical."""
        self.assertIs(self.rule.issue_type, IssueType.COST_HIGHER_THAN_PRICE)
        self.assertIs(self.rule.default_severity, Severity.CRITICAL)

    def test_fires_when_cost_exceeds_price(self) -> None:
        """Loss per unit is rendered without rounding."""
        issue = self.rule.analyze(_p(price=100.0, cost=150.0))
        assert issue is not None
        self.assertIs(issue.severity, Severity.CRITICAL)
        self.assertEqual(issue.product_id, "PRD10001")
        self.assertEqual(
            issue.description,
            "Cost (150.0) exceeds price (100.0) - Loss: 50.0 per unit",
        )
        self.assertEqual(issue.actual_value, "Cost: 150.0, Price: 100.0")
        self.assertIn("150.0", issue.suggested_action or "")

    def test_equal_cost_and_price_passes(self) -> None:
        """Breaking even is not a violation."""
        self.assertIsNone(self.rule.analyze(_p(price=10.0, cost=10.0)))

    def test_profitable_passes(self) -> None:
        self.assertIsNone(self.rule.analyze(_p()))


class TestRatingReviewConsistencyRule(unittest.TestCase):
    """RatingReviewConsistencyRule tests."""

    def setUp(self) -> None:
        self.rule = RatingReviewConsistencyRule()

    def test_rating_without_reviews(self) -> None:
        """A rating with zero reviews is a warning."""
        issue = self.rule.analyze(_p(rating=4.5, review_count=0))
        assert issue is not None
        self.assertIs(issue.severity, Severity.WARNING)
        self.assertEqual(
            issue.description, "Product has rating (4.5) but no reviews"
        )

    def test_reviews_without_rating(self) -> None:
        """Reviews with a zero rating is a warning."""
        issue = self.rule.analyze(_p(rating=0.0, review_count=12))
        assert issue is not None
        self.assertEqual(
            issue.description, "Product has reviews (12) but no rating"
        )
        self.assertEqual(
            issue.suggested_action, "Recalculate rating from existing reviews"
        )

    def test_consistent_data_passes(self) -> None:
        """Both present or both absent is fine."""
        self.assertIsNone(self.rule.analyze(_p(rating=4.0, review_count=3)))
        self.assertIsNone(self.rule.analyze(_p(rating=0.0, review_count=0)))


class TestInactiveDiscountRule(unittest.TestCase):
    """InactiveDiscountRule tests."""

    def setUp(self) -> None:
        self.rule = InactiveDiscountRule()

    def test_inactive_with_discount(self) -> None:
        """Inactive products with a discount are critical."""
        issue = self.rule.analyze(_p(is_active=False, discount=20.0))
        assert issue is not None
        self.assertIs(issue.severity, Severity.CRITICAL)
        self.assertEqual(
            issue.description, "Inactive product still has discount of 20.0%"
        )

    def test_active_with_discount_passes(self) -> None:
        self.assertIsNone(self.rule.analyze(_p(discount=20.0)))

    def test_inactive_without_discount_passes(self) -> None:
        self.assertIsNone(self.rule.analyze(_p(is_active=False)))


class TestOutOfStockRule(unittest.TestCase):
    """OutOfStockRule tests."""

    def setUp(self) -> None:
        self.rule = OutOfStockRule()

    def test_active_out_of_stock_is_warning(self) -> None:
        issue = self.rule.analyze(_p(stock_quantity=0))
        assert issue is not None
        self.assertIs(issue.severity, Severity.WARNING)
        self.assertIn("Restock immediately", issue.suggested_action or "")

    def test_inactive_out_of_stock_is_info(self) -> None:
        """Inactive products drop to info severity."""
        issue = self.rule.analyze(_p(stock_quantity=0, is_active=False))
        assert issue is not None
        self.assertIs(issue.severity, Severity.INFO)
        self.assertIn("discontinuing", issue.suggested_action or "")

    def test_default_severity_is_warning(self) -> None:
        self.assertIs(self.rule.default_severity, Severity.WARNING)

    def test_in_stock_passes(self) -> None:
        self.assertIsNone(self.rule.analyze(_p(stock_quantity=1)))


class TestFutureRestockDateRule(unittest.TestCase):
    """FutureRestockDateRule tests."""

    def setUp(self) -> None:
        self.rule = FutureRestockDateRule(today_provider=lambda: TODAY)

    def test_future_date_is_info(self) -> None:
        issue = self.rule.analyze(_p(last_restock_date=date(2025, 6, 2)))
        assert issue is not None
        self.assertIs(issue.severity, Severity.INFO)
        self.assertEqual(
            issue.description, "Restock date is in the future (2025-06-02)"
        )

    def test_today_passes(self) -> None:
        """A restock dated today is not in the future."""
        self.assertIsNone(self.rule.analyze(_p(last_restock_date=TODAY)))

    def test_past_passes(self) -> None:
        self.assertIsNone(
            self.rule.analyze(_p(last_restock_date=date(2020, 1, 1)))
        )

    def test_today_read_on_every_call(self) -> None:
        """The clock is consulted at evaluation time, not construction."""
        days = iter([date(2025, 1, 1), date(2025, 12, 31)])
        rule = FutureRestockDateRule(today_provider=lambda: next(days))
        product = _p(last_restock_date=date(2025, 6, 1))
        self.assertIsNotNone(rule.analyze(product))
        self.assertIsNone(rule.analyze(product))

    def test_defaults_to_system_date(self) -> None:
        """Without a provider, far-future dates are flagged."""
        rule = FutureRestockDateRule()
        self.assertIsNotNone(
            rule.analyze(_p(last_restock_date=date(9999, 1, 1)))
        )


class TestDeadStockRule(unittest.TestCase):
    """DeadStockRule tests."""

    def setUp(self) -> None:
        self.rule = DeadStockRule()

    def test_large_dead_stock_is_warning(self) -> None:
        issue = self.rule.analyze(_p(stock_quantity=200, sales_count=0))
        assert issue is not None
        self.assertIs(issue.severity, Severity.WARNING)
        self.assertEqual(
            issue.suggested_action, "Consider promotion or liquidation"
        )

    def test_exactly_hundred_is_info(self) -> None:
        """The warning threshold is strictly above 100 units."""
        issue = self.rule.analyze(_p(stock_quantity=100, sales_count=0))
        assert issue is not None
        self.assertIs(issue.severity, Severity.INFO)
        self.assertEqual(
            issue.suggested_action, "Review pricing or marketing strategy"
        )

    def test_small_dead_stock_is_info(self) -> None:
        issue = self.rule.analyze(_p(stock_quantity=10, sales_count=0))
        assert issue is not None
        self.assertIs(issue.severity, Severity.INFO)
        self.assertEqual(
            issue.suggested_action,
            "Monitor and consider promotional activities",
        )

    def test_any_sale_passes(self) -> None:
        """One recorded sale is enough, however old."""
        self.assertIsNone(
            self.rule.analyze(_p(stock_quantity=500, sales_count=1))
        )

    def test_no_stock_passes(self) -> None:
        self.assertIsNone(
            self.rule.analyze(_p(stock_quantity=0, sales_count=0))
        )

    def test_threshold_is_configurable(self) -> None:
        """The day window is stored but defaults to 180."""
        self.assertEqual(self.rule.days_since_last_sale, 180)
        self.assertEqual(DeadStockRule(90).days_since_last_sale, 90)


class TestRuleDescriptions(unittest.TestCase):
    """Static rule descriptions."""

    def test_descriptions_are_fixed(self) -> None:
        """description() is non-empty and independent of input."""
        rules = [
            CostPriceRule(),
            RatingReviewConsistencyRule(),
            InactiveDiscountRule(),
            OutOfStockRule(),
            FutureRestockDateRule(),
            DeadStockRule(),
        ]
        for rule in rules:
            with self.subTest(rule=repr(rule)):
                self.assertTrue(rule.description())
                self.assertEqual(rule.description(), rule.description())


if __name__ == "__main__":
    unittest.main()
