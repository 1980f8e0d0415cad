# src/config/settings.py

"""Central configuration for the catalog_audit engine."""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Central configuration for the catalog_audit engine."""

    APP_NAME: str = "E-commerce Product Quality Analyzer"
    APP_VERSION: str = "1.0.0"

    # --- Analysis ---
    ANALYSIS_CHUNK_SIZE: int = int(
        os.getenv("AUDIT_CHUNK_SIZE", "1000")
    )                                    # Products per worker chunk
    DEAD_STOCK_DAYS: int = int(
        os.getenv("AUDIT_DEAD_STOCK_DAYS", "180")
    )                                    # Dead stock window (days)
    SAMPLE_SIZE: int = 5                 # Sample issues kept per type

    # --- Acceptance thresholds ---
    ACCEPTABLE_CRITICAL_RATE: float = 5.0    # Max % of products critical
    ACCEPTABLE_QUALITY_SCORE: float = 80.0   # Min quality score

    # --- Ingestion ---
    CSV_COLUMN_COUNT: int = 19
    MAX_PARSE_ERRORS: int = 100          # Error messages kept per load
    PARSE_ERRORS_LOGGED: int = 10        # Error messages echoed to log

    # --- Reporting ---
    DEFAULT_FORMAT: str = "console"
    CONSOLE_WIDTH: int = 100

    # --- Paths ---
    BASE_DIR: Path = Path(__file__).resolve().parent.parent.parent
    REPORTS_DIR: Path = Path(
        os.getenv("AUDIT_REPORTS_DIR", str(BASE_DIR / "reports"))
    )
    LOGS_DIR: Path = Path(
        os.getenv("AUDIT_LOGS_DIR", str(BASE_DIR / "logs"))
    )

    # --- Rules (registry, in default evaluation order) ---
    AVAILABLE_RULES: list[dict[str, str]] = [
        {
            "id": "cost_price",
            "label": "Cost > Price",
            "rule": "src.rules.cost_price_rule.CostPriceRule",
        },
        {
            "id": "rating_review",
            "label": "Rating/Review Mismatch",
            "rule": "src.rules.rating_review_rule.RatingReviewConsistencyRule",
        },
        {
            "id": "inactive_discount",
            "label": "Inactive with Discount",
            "rule": "src.rules.inactive_discount_rule.InactiveDiscountRule",
        },
        {
            "id": "out_of_stock",
            "label": "Out of Stock",
            "rule": "src.rules.out_of_stock_rule.OutOfStockRule",
        },
        {
            "id": "future_restock",
            "label": "Future Restock Date",
            "rule": "src.rules.future_restock_rule.FutureRestockDateRule",
        },
        {
            "id": "dead_stock",
            "label": "Dead Stock",
            "rule": "src.rules.dead_stock_rule.DeadStockRule",
        },
    ]
