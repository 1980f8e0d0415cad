# tests/test_report_writer.py

"""Tests for the ReportWriter storage module."""

import io
import tempfile
import unittest
from contextlib import redirect_stdout
from pathlib import Path
from unittest.mock import patch

from src.models.quality_report import QualityReport
from src.storage.report_writer import ReportWriter


def _report() -> QualityReport:
    return QualityReport(total_products=4, total_issues=0)


class TestReportWriter(unittest.TestCase):
    """Tests for display, save and timestamped save."""

    def setUp(self) -> None:
        self.tmp_dir = Path(tempfile.mkdtemp())
        self.writer = ReportWriter(reports_dir=self.tmp_dir)

    def test_display_writes_to_stdout(self) -> None:
        buffer = io.StringIO()
        with redirect_stdout(buffer):
            self.writer.display_report(_report(), "markdown")
        self.assertIn("| 📦 Total Products | 4 |", buffer.getvalue())

    def test_save_report_creates_parents(self) -> None:
        path = self.tmp_dir / "nested" / "deeper" / "report.md"
        self.assertTrue(self.writer.save_report(_report(), path, "markdown"))
        self.assertTrue(path.exists())
        self.assertIn("Executive Summary", path.read_text(encoding="utf-8"))

    def test_save_report_failure_returns_false(self) -> None:
        path = self.tmp_dir / "report.csv"
        with patch.object(Path, "write_text", side_effect=OSError("disk full")):
            with self.assertLogs("catalog_audit.storage", level="ERROR"):
                self.assertFalse(self.writer.save_report(_report(), path, "csv"))

    def test_save_unknown_format_raises(self) -> None:
        with self.assertRaises(ValueError):
            self.writer.save_report(_report(), self.tmp_dir / "x.pdf", "pdf")

    def test_save_with_timestamp_naming(self) -> None:
        path = self.writer.save_report_with_timestamp(
            _report(), "audit", "csv"
        )
        assert path is not None
        self.assertEqual(path.parent, self.tmp_dir)
        self.assertRegex(path.name, r"^audit_\d{8}_\d{6}\.csv$")
        self.assertTrue(path.exists())

    def test_save_multiple_formats(self) -> None:
        saved = self.writer.save_multiple_formats(
            _report(), formats=["markdown", "csv", "console"]
        )
        self.assertEqual(set(saved), {"markdown", "csv", "console"})
        self.assertEqual(saved["markdown"].suffix, ".md")
        self.assertEqual(saved["console"].suffix, ".txt")

    def test_default_dir_from_settings(self) -> None:
        """Without an explicit dir the configured REPORTS_DIR is used."""
        from src.config.settings import Settings

        self.assertEqual(ReportWriter().reports_dir, Settings.REPORTS_DIR)

    def test_capabilities_lists_formats(self) -> None:
        text = ReportWriter.capabilities()
        self.assertIn("console, markdown, csv", text)


if __name__ == "__main__":
    unittest.main()
