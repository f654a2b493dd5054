"""Application service: Inventory Report use case (query)."""

from __future__ import annotations

from ims.application.dto import InventoryReportDTO, product_to_dto
from ims.application.session import InventorySystem
from ims.domain.service.reporting import value_inventory


class InventoryReportHandler:

    def __init__(self, system: InventorySystem) -> None:
        self._system = system

    def handle(self) -> InventoryReportDTO:
        products = self._system.store.all()
        valuation = value_inventory(products)
        return InventoryReportDTO(
            products=[product_to_dto(p) for p in products],
            product_count=valuation.product_count,
            total_value=str(valuation.total_value),
        )
