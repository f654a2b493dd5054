"""Read-only reports over the current collections.

Everything here is recomputed from scratch on each call.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from ims.domain.model.product import Product
from ims.domain.model.sale import SaleRecord
from ims.domain.model.value_objects import Money

# ---------------------------------------------------------------------------
# Constants for business rules
# ---------------------------------------------------------------------------
LOW_STOCK_THRESHOLD = 10


@dataclass(frozen=True)
class InventoryValuation:
    product_count: int
    total_value: Money


@dataclass(frozen=True)
class SalesSummary:
    sale_count: int
    total_revenue: Money


def value_inventory(products: Iterable[Product]) -> InventoryValuation:
    """Sum of ``price * quantity`` across all products."""
    count = 0
    total = Money.zero()
    for product in products:
        count += 1
        total = total + product.stock_value
    return InventoryValuation(product_count=count, total_value=total)


def summarize_sales(sales: Iterable[SaleRecord]) -> SalesSummary:
    count = 0
    total = Money.zero()
    for record in sales:
        count += 1
        total = total + record.total_amount
    return SalesSummary(sale_count=count, total_revenue=total)


def low_stock(
    products: Iterable[Product], threshold: int = LOW_STOCK_THRESHOLD
) -> list[Product]:
    return [p for p in products if p.quantity <= threshold]
