"""Application service: Delete Product use case."""

from __future__ import annotations

from ims.application.session import InventorySystem


class DeleteProductHandler:

    def __init__(self, system: InventorySystem) -> None:
        self._system = system

    def handle(self, product_id: int) -> None:
        # Sales referencing this id are kept as history
        self._system.store.delete(product_id)
