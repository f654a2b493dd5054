"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from ims.domain.model.product import Product
from ims.domain.model.sale import SaleRecord

DATE_FORMAT = "%Y-%m-%d"


@dataclass(frozen=True)
class ProductDTO:
    """Output: a single product as displayed to the user."""

    id: int
    name: str
    quantity: int
    price: str  # formatted, e.g. "$15.00"
    category: str
    last_restock: str  # day precision, e.g. "2024-05-01"


@dataclass(frozen=True)
class SaleDTO:
    """Output: a single recorded sale."""

    product_id: int
    product_name: str
    quantity_sold: int
    total_amount: str
    sale_date: str


@dataclass(frozen=True)
class InventoryReportDTO:
    products: list[ProductDTO]
    product_count: int
    total_value: str


@dataclass(frozen=True)
class SalesReportDTO:
    sales: list[SaleDTO]
    sale_count: int
    total_revenue: str


def product_to_dto(product: Product) -> ProductDTO:
    return ProductDTO(
        id=product.id,
        name=product.name,
        quantity=product.quantity,
        price=str(product.price),
        category=product.category,
        last_restock=product.last_restock_at.strftime(DATE_FORMAT),
    )


def sale_to_dto(sale: SaleRecord) -> SaleDTO:
    return SaleDTO(
        product_id=sale.product_id,
        product_name=sale.product_name,
        quantity_sold=sale.quantity_sold,
        total_amount=str(sale.total_amount),
        sale_date=sale.sold_at.strftime(DATE_FORMAT),
    )
