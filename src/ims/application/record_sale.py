"""Application service: Record Sale use case.

Thin wrapper around the SaleService domain service, which owns the
validate-then-mutate sequence across store and ledger.
"""

from __future__ import annotations

from ims.application.dto import SaleDTO, sale_to_dto
from ims.application.session import InventorySystem


class RecordSaleHandler:

    def __init__(self, system: InventorySystem) -> None:
        self._system = system

    def handle(self, product_id: int, quantity: int) -> SaleDTO:
        record = self._system.sale_service().record_sale(product_id, quantity)
        return sale_to_dto(record)
