# tests/test_quality_issue.py

"""Tests for the issue taxonomy."""

import unittest

from src.models.quality_issue import IssueType, QualityIssue, Severity


class TestIssueType(unittest.TestCase):
    """IssueType enum tests."""

    def test_has_six_types(self) -> None:
        """The taxonomy is closed at six issue types."""
        self.assertEqual(len(IssueType), 6)

    def test_display_names(self) -> None:
        """Display names are the short labels used in reports."""
        self.assertEqual(
            IssueType.COST_HIGHER_THAN_PRICE.display_name, "Cost > Price"
        )
        self.assertEqual(IssueType.DEAD_STOCK.display_name, "Dead Stock")

    def test_every_type_has_description(self) -> None:
        """Each type carries a non-empty business description."""
        for issue_type in IssueType:
            with self.subTest(issue_type=issue_type.name):
                self.assertTrue(issue_type.business_description)


class TestSeverity(unittest.TestCase):
    """Severity enum tests."""

    def test_priorities(self) -> None:
        """Critical is most urgent, Info least."""
        self.assertEqual(Severity.CRITICAL.priority, 1)
        self.assertEqual(Severity.WARNING.priority, 2)
        self.assertEqual(Severity.INFO.priority, 3)

    def test_by_priority_order(self) -> None:
        """by_priority sorts most urgent first."""
        self.assertEqual(
            Severity.by_priority(),
            [Severity.CRITICAL, Severity.WARNING, Severity.INFO],
        )

    def test_lookup_by_name(self) -> None:
        """Members can be looked up by upper-case name."""
        self.assertIs(Severity["WARNING"], Severity.WARNING)


class TestQualityIssue(unittest.TestCase):
    """QualityIssue record tests."""

    def test_detailed_string_includes_all_parts(self) -> None:
        """All populated fields appear in the detailed view."""
        issue = QualityIssue(
            product_id="PRD1",
            issue_type=IssueType.OUT_OF_STOCK,
            severity=Severity.WARNING,
            description="Product is out of stock (quantity: 0)",
            actual_value="Stock: 0",
            expected_value="Stock > 0 for active products",
            suggested_action="Restock",
        )
        text = issue.to_detailed_string()
        self.assertTrue(text.startswith("Warning: Out of Stock\n"))
        self.assertIn("  Product: PRD1\n", text)
        self.assertIn("  Actual: Stock: 0\n", text)
        self.assertIn("  Expected: Stock > 0 for active products\n", text)
        self.assertIn("  Suggested Action: Restock\n", text)

    def test_detailed_string_skips_missing_parts(self) -> None:
        """Optional fields left as None are omitted."""
        issue = QualityIssue(
            product_id="PRD2",
            issue_type=IssueType.DEAD_STOCK,
            severity=Severity.INFO,
            description="No sales",
        )
        text = issue.to_detailed_string()
        self.assertNotIn("Actual:", text)
        self.assertNotIn("Expected:", text)
        self.assertNotIn("Suggested Action:", text)


if __name__ == "__main__":
    unittest.main()
