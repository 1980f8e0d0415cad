# src/storage/csv_repository.py

"""Load Product records from the catalog CSV export."""

import csv
import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path

from src.config.settings import Settings
from src.models.product import Product

logger = logging.getLogger("catalog_audit.storage")


class ProductLoadError(Exception):
    """The input file is missing or cannot be read at all."""


@dataclass
class LoadResult:
    """Products parsed from one CSV file plus per-row parse errors."""

    products: list[Product] = field(
        default_factory=lambda: list[Product]()
    )
    errors: list[str] = field(
        default_factory=lambda: list[str]()
    )
    error_count: int = 0


# ── Field parsers ────────────────────────────────────────


def _parse_float(value: str, field_name: str) -> float:
    try:
        return float(value.strip())
    except ValueError:
        msg = f"Invalid {field_name}: '{value}'"
        raise ValueError(msg) from None


def _parse_int(value: str, field_name: str) -> int:
    try:
        return int(value.strip())
    except ValueError:
        msg = f"Invalid {field_name}: '{value}'"
        raise ValueError(msg) from None


def _parse_date(value: str, field_name: str) -> date:
    try:
        return date.fromisoformat(value.strip())
    except ValueError:
        msg = (
            f"Invalid {field_name}: '{value}'. "
            "Expected format: YYYY-MM-DD"
        )
        raise ValueError(msg) from None


def _parse_bool(value: str, field_name: str) -> bool:
    lowered = value.strip().lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    msg = f"Invalid {field_name}: '{value}'. Expected 'true' or 'false'"
    raise ValueError(msg)


def _parse_tags(value: str) -> tuple[str, ...]:
    """Split a ``;``-separated tag cell, dropping blanks."""
    cleaned = value.strip()
    if not cleaned or cleaned == '""':
        return ()
    cleaned = cleaned.removeprefix('"').removesuffix('"')
    return tuple(
        tag.strip() for tag in cleaned.split(";") if tag.strip()
    )


def parse_product_row(row: list[str]) -> Product:
    """Convert one CSV row into a :class:`Product`.

    Raises:
        ValueError: if the row is short or any typed field is invalid.
    """
    expected = Settings.CSV_COLUMN_COUNT
    if len(row) < expected:
        msg = f"Invalid row: expected {expected} columns, got {len(row)}"
        raise ValueError(msg)

    return Product(
        id=row[0].strip(),
        name=row[1].strip(),
        category=row[2].strip(),
        sub_category=row[3].strip(),
        brand=row[4].strip(),
        price=_parse_float(row[5], "price"),
        cost=_parse_float(row[6], "cost"),
        stock_quantity=_parse_int(row[7], "stockQuantity"),
        warehouse_location=row[8].strip(),
        supplier=row[9].strip(),
        last_restock_date=_parse_date(row[10], "lastRestockDate"),
        sales_count=_parse_int(row[11], "salesCount"),
        rating=_parse_float(row[12], "rating"),
        review_count=_parse_int(row[13], "reviewCount"),
        tags=_parse_tags(row[14]),
        is_active=_parse_bool(row[15], "isActive"),
        discount=_parse_float(row[16], "discount"),
        weight=_parse_float(row[17], "weight"),
        dimensions=row[18].strip(),
    )


class CsvProductRepository:
    """Read products from a CSV export with a single header row."""

    def __init__(self, file_path: str | Path) -> None:
        self.file_path = Path(file_path)

    def load_all_products(self) -> LoadResult:
        """Parse every data row; bad rows are recorded, not fatal.

        Raises:
            ProductLoadError: if the file does not exist or cannot be read.
        """
        if not self.file_path.is_file():
            msg = f"CSV file not found: {self.file_path}"
            raise ProductLoadError(msg)

        result = LoadResult()
        try:
            with open(self.file_path, newline="", encoding="utf-8") as f:
                reader = csv.reader(f)
                next(reader, None)  # header
                # quoted cells may span lines; report where a record starts
                line_number = reader.line_num + 1
                for row in reader:
                    record_line, line_number = line_number, reader.line_num + 1
                    if not any(cell.strip() for cell in row):
                        continue
                    try:
                        result.products.append(parse_product_row(row))
                    except ValueError as exc:
                        result.error_count += 1
                        if len(result.errors) < Settings.MAX_PARSE_ERRORS:
                            result.errors.append(
                                f"Line {record_line}: {exc}"
                            )
        except (OSError, UnicodeDecodeError) as exc:
            msg = f"Failed to read {self.file_path}: {exc}"
            raise ProductLoadError(msg) from exc

        self._log_errors(result)
        logger.info(
            "Loaded %d products from %s",
            len(result.products),
            self.file_path,
        )
        return result

    def load_products(
        self, predicate: Callable[[Product], bool] | None = None,
    ) -> LoadResult:
        """Load all products, keeping only those matching *predicate*."""
        result = self.load_all_products()
        if predicate is not None:
            result.products = [p for p in result.products if predicate(p)]
        return result

    @staticmethod
    def _log_errors(result: LoadResult) -> None:
        if not result.error_count:
            return
        logger.warning(
            "%d parsing errors encountered", result.error_count
        )
        shown = result.errors[:Settings.PARSE_ERRORS_LOGGED]
        for message in shown:
            logger.warning("  %s", message)
        hidden = result.error_count - len(shown)
        if hidden > 0:
            logger.warning("  ... and %d more errors", hidden)
