"""Application service: Sales Report use case (query)."""

from __future__ import annotations

from ims.application.dto import SalesReportDTO, sale_to_dto
from ims.application.session import InventorySystem
from ims.domain.service.reporting import summarize_sales


class SalesReportHandler:

    def __init__(self, system: InventorySystem) -> None:
        self._system = system

    def handle(self) -> SalesReportDTO:
        sales = self._system.ledger.all()
        summary = summarize_sales(sales)
        return SalesReportDTO(
            sales=[sale_to_dto(s) for s in sales],
            sale_count=summary.sale_count,
            total_revenue=str(summary.total_revenue),
        )
