"""Application service: List Products use case (query)."""

from __future__ import annotations

from ims.application.dto import ProductDTO, product_to_dto
from ims.application.session import InventorySystem


class ListProductsHandler:

    def __init__(self, system: InventorySystem) -> None:
        self._system = system

    def handle(self) -> list[ProductDTO]:
        return [product_to_dto(p) for p in self._system.store.all()]
