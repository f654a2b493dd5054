"""Application service: Update Product use case."""

from __future__ import annotations

from ims.application.dto import ProductDTO, product_to_dto
from ims.application.session import InventorySystem
from ims.domain.model.inventory import ProductUpdate


class UpdateProductHandler:

    def __init__(self, system: InventorySystem) -> None:
        self._system = system

    def handle(self, product_id: int, changes: ProductUpdate) -> ProductDTO:
        """Replace the fields present in *changes*, keep the rest.

        Past sales are unaffected: they captured the name and total
        at the time of sale.
        """
        product = self._system.store.update(product_id, changes)
        return product_to_dto(product)
