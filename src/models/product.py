# src/models/product.py

"""Product data model for inter-module data flow."""

from dataclasses import dataclass, field
from datetime import date


@dataclass(frozen=True)
class Product:
    """A single catalog record as exported by the e-commerce database.

    Instances are built once by ingestion and never mutated. Prices and
    costs are in the export's currency; ``discount`` is a percentage
    (0-100) and ``rating`` an average on the 0-5 scale.
    """

    id: str
    name: str
    category: str
    sub_category: str
    brand: str
    price: float
    cost: float
    stock_quantity: int
    warehouse_location: str
    supplier: str
    last_restock_date: date
    sales_count: int
    rating: float
    review_count: int
    tags: tuple[str, ...] = field(default_factory=tuple)
    is_active: bool = True
    discount: float = 0.0
    weight: float = 0.0
    dimensions: str = ""

    def profit_margin_percentage(self) -> float | None:
        """Return the profit margin as a percentage, or None when price is 0."""
        if self.price > 0:
            return (self.price - self.cost) / self.price * 100
        return None

    def has_customer_engagement(self) -> bool:
        """True if the product has any rating or any review."""
        return self.rating > 0 or self.review_count > 0

    def is_potential_dead_stock(self, days_since_last_sale: int = 180) -> bool:
        """Heuristic dead stock check: stock on hand but no sales at all.

        ``days_since_last_sale`` is accepted for API symmetry with
        :class:`~src.rules.dead_stock_rule.DeadStockRule`; the export
        carries no last-sale date, so only ``sales_count`` is consulted.
        """
        return self.stock_quantity > 0 and self.sales_count == 0
