"""Application service: Add Product use case."""

from __future__ import annotations

from decimal import Decimal

from ims.application.dto import ProductDTO, product_to_dto
from ims.application.session import InventorySystem


class AddProductHandler:

    def __init__(self, system: InventorySystem) -> None:
        self._system = system

    def handle(
        self,
        name: str,
        quantity: int,
        price: str | float | int | Decimal,
        category: str,
    ) -> ProductDTO:
        """Add a new product; the store assigns its id."""
        product_id = self._system.store.add(
            name=name, quantity=quantity, price=price, category=category
        )
        return product_to_dto(self._system.store.find_by_id(product_id))  # type: ignore[arg-type]
