# src/storage/report_writer.py

"""Handles displaying and saving rendered quality reports."""

import logging
import sys
from datetime import datetime
from pathlib import Path

from src.config.settings import Settings
from src.models.quality_report import QualityReport
from src.reporting.formatters import SUPPORTED_FORMATS, create_formatter

logger = logging.getLogger("catalog_audit.storage")


class ReportWriter:
    """Send rendered reports to stdout or to files."""

    def __init__(self, reports_dir: Path | None = None) -> None:
        self.reports_dir: Path = reports_dir or Settings.REPORTS_DIR
        logger.debug(
            "ReportWriter initialised, reports_dir=%s", self.reports_dir
        )

    def display_report(
        self, report: QualityReport, fmt: str = Settings.DEFAULT_FORMAT,
    ) -> None:
        """Render *report* and write it to stdout."""
        rendered = create_formatter(fmt).format(report)
        sys.stdout.write(rendered)
        if not rendered.endswith("\n"):
            sys.stdout.write("\n")

    def save_report(
        self, report: QualityReport, file_path: str | Path, fmt: str = "markdown",
    ) -> bool:
        """Render *report* into *file_path*, creating parent directories.

        Returns True on success; I/O failures are logged and return False.
        """
        path = Path(file_path)
        try:
            rendered = create_formatter(fmt).format(report)
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(rendered, encoding="utf-8")
        except OSError as exc:
            logger.error(
                "Failed to save report to %s: %s", path, exc, exc_info=True
            )
            return False

        logger.info(
            "Saved %s report (%d issues) to %s",
            fmt,
            report.total_issues,
            path,
        )
        return True

    def save_report_with_timestamp(
        self,
        report: QualityReport,
        base_name: str = "quality_report",
        fmt: str = "markdown",
    ) -> Path | None:
        """Save under ``reports_dir`` as ``<base>_<timestamp>.<ext>``."""
        formatter = create_formatter(fmt)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        filepath = (
            self.reports_dir
            / f"{base_name}_{timestamp}.{formatter.file_extension}"
        )
        return filepath if self.save_report(report, filepath, fmt) else None

    def save_multiple_formats(
        self,
        report: QualityReport,
        base_name: str = "quality_report",
        formats: list[str] | None = None,
    ) -> dict[str, Path]:
        """Save one file per format; return the ones that succeeded."""
        saved: dict[str, Path] = {}
        for fmt in formats or ["markdown", "csv"]:
            path = self.save_report_with_timestamp(report, base_name, fmt)
            if path is not None:
                saved[fmt] = path
        return saved

    @staticmethod
    def capabilities() -> str:
        """Describe supported formats and destinations."""
        return "\n".join([
            "📋 Report Generator Capabilities:",
            f"   Supported formats: {', '.join(SUPPORTED_FORMATS)}",
            "   Output destinations: Console, File",
            "   Features: Timestamp-based naming, Multi-format generation",
        ])
