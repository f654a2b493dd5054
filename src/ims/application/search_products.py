"""Application service: Search Products use case (query).

Name search is a case-insensitive substring match; category search is a
case-insensitive exact match. Results keep insertion order.
"""

from __future__ import annotations

from ims.application.dto import ProductDTO, product_to_dto
from ims.application.session import InventorySystem
from ims.domain.exceptions import EntityNotFoundError


class SearchProductsHandler:

    def __init__(self, system: InventorySystem) -> None:
        self._system = system

    def by_id(self, product_id: int) -> ProductDTO:
        product = self._system.store.find_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID {product_id} not found")
        return product_to_dto(product)

    def by_name(self, query: str) -> list[ProductDTO]:
        return [product_to_dto(p) for p in self._system.store.search_by_name(query)]

    def by_category(self, category: str) -> list[ProductDTO]:
        return [product_to_dto(p) for p in self._system.store.search_by_category(category)]
