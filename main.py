# main.py

"""Entry point for the catalog_audit product quality analyzer."""

import argparse
import asyncio
import logging
import sys

from src.config.logging_config import setup_logging
from src.config.settings import Settings
from src.reporting.formatters import SUPPORTED_FORMATS

logger = logging.getLogger("catalog_audit.main")


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the CLI."""
    rule_labels = ", ".join(r["label"] for r in Settings.AVAILABLE_RULES)

    parser = argparse.ArgumentParser(
        prog="catalog_audit",
        description=(
            "Analyze a product CSV export for quality issues and"
            " report them by type and severity."
        ),
        epilog=f"Quality rules: {rule_labels}",
    )
    parser.add_argument(
        "csv_file",
        nargs="?",
        default=None,
        help="Path to the CSV file containing product data.",
    )
    parser.add_argument(
        "--format",
        choices=SUPPORTED_FORMATS,
        type=str.lower,
        default=Settings.DEFAULT_FORMAT,
        dest="output_format",
        help=f"Output format (default: {Settings.DEFAULT_FORMAT}).",
    )
    parser.add_argument(
        "--severity",
        default=None,
        help="Filter by severity: critical, warning, info, all (default: all).",
    )
    parser.add_argument(
        "--type",
        default=None,
        dest="type_filter",
        help="Only run rules whose issue type contains this text.",
    )
    parser.add_argument(
        "--output",
        default=None,
        dest="output_file",
        help="Save the report to this file instead of printing it.",
    )
    parser.add_argument(
        "--capabilities",
        action="store_true",
        default=False,
        help="Show available report formats and destinations.",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"{Settings.APP_NAME} v{Settings.APP_VERSION}",
    )
    return parser


def _run_capabilities() -> None:
    """Print report generator capabilities."""
    from src.storage.report_writer import ReportWriter

    print(ReportWriter.capabilities())


def _run_analysis(args: argparse.Namespace) -> None:
    """Run the analysis and exit with its status code."""
    from src.cli.runner import run_analysis

    exit_code = asyncio.run(
        run_analysis(
            csv_file=args.csv_file,
            output_format=args.output_format,
            severity=args.severity,
            type_filter=args.type_filter,
            output_file=args.output_file,
        )
    )
    sys.exit(exit_code)


def main() -> None:
    """Route to capabilities, usage, or a full analysis run."""
    log_file = setup_logging()
    logger.info("catalog_audit starting, log file: %s", log_file)

    parser = _build_parser()
    args = parser.parse_args()

    if args.capabilities:
        _run_capabilities()
    elif args.csv_file is None:
        parser.print_help()
        sys.exit(1)
    else:
        _run_analysis(args)


if __name__ == "__main__":
    main()
