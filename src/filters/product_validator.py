# src/filters/product_validator.py

"""Product validation: drop out-of-range records before analysis."""

import logging
import math

from src.models.product import Product

logger = logging.getLogger("catalog_audit.filters")

# nan and inf parse as floats but slip past every range comparison
_REAL_FIELDS = ("price", "cost", "rating", "discount", "weight")


class ProductValidator:
    """Validate products against the catalog's field ranges."""

    @staticmethod
    def violation(product: Product) -> str | None:
        """Return the first range violation of *product*, or None."""
        if not product.id.strip():
            return "empty id"
        for name in _REAL_FIELDS:
            value = getattr(product, name)
            if not math.isfinite(value):
                return f"non-finite {name} ({value})"
        if product.price < 0:
            return f"negative price ({product.price})"
        if product.cost < 0:
            return f"negative cost ({product.cost})"
        if product.stock_quantity < 0:
            return f"negative stock quantity ({product.stock_quantity})"
        if product.sales_count < 0:
            return f"negative sales count ({product.sales_count})"
        if product.review_count < 0:
            return f"negative review count ({product.review_count})"
        if not 0.0 <= product.rating <= 5.0:
            return f"rating out of range ({product.rating})"
        if not 0.0 <= product.discount <= 100.0:
            return f"discount out of range ({product.discount})"
        return None

    @staticmethod
    def validate(
        products: list[Product],
    ) -> tuple[list[Product], int]:
        """Drop products that break a field range.

        Returns the valid products and the count of dropped items.
        """
        valid: list[Product] = []
        dropped = 0

        for product in products:
            reason = ProductValidator.violation(product)
            if reason is not None:
                logger.debug(
                    "Dropped product %r: %s", product.id, reason
                )
                dropped += 1
                continue
            valid.append(product)

        if dropped:
            logger.info(
                "Validation dropped %d invalid products",
                dropped,
            )

        return valid, dropped
