"""Integration tests for the RecordSale use case and the reports."""

import pytest

from ims.application.add_product import AddProductHandler
from ims.application.inventory_report import InventoryReportHandler
from ims.application.low_stock import LowStockHandler
from ims.application.record_sale import RecordSaleHandler
from ims.application.sales_report import SalesReportHandler
from ims.application.session import InventorySystem
from ims.domain.exceptions import InsufficientStockError
from ims.domain.model.inventory import InventoryStore
from tests.fakes import FakeClock


def _setup() -> InventorySystem:
    system = InventorySystem(store=InventoryStore(clock=FakeClock()))
    add = AddProductHandler(system)
    add.handle("Widget", 50, "2.50", "Hardware")
    add.handle("Gadget", 8, "12.00", "Electronics")
    return system


class TestRecordSale:

    def test_returns_sale_dto(self):
        system = _setup()
        dto = RecordSaleHandler(system).handle(1, 20)
        assert dto.product_id == 1
        assert dto.product_name == "Widget"
        assert dto.quantity_sold == 20
        assert dto.total_amount == "$50.00"
        assert system.store.find_by_id(1).quantity == 30

    def test_failure_leaves_ledger_empty(self):
        system = _setup()
        with pytest.raises(InsufficientStockError):
            RecordSaleHandler(system).handle(2, 9)
        assert len(system.ledger) == 0


class TestReports:

    def test_inventory_report_totals(self):
        report = InventoryReportHandler(_setup()).handle()
        assert report.product_count == 2
        assert report.total_value == "$221.00"
        assert [p.name for p in report.products] == ["Widget", "Gadget"]

    def test_sales_report_totals(self):
        system = _setup()
        sell = RecordSaleHandler(system)
        sell.handle(1, 20)
        sell.handle(2, 1)
        report = SalesReportHandler(system).handle()
        assert report.sale_count == 2
        assert report.total_revenue == "$62.00"
        assert [s.product_name for s in report.sales] == ["Widget", "Gadget"]

    def test_empty_sales_report(self):
        report = SalesReportHandler(InventorySystem()).handle()
        assert report.sales == []
        assert report.total_revenue == "$0.00"

    def test_low_stock_after_sale(self):
        system = _setup()
        assert [p.name for p in LowStockHandler(system).handle()] == ["Gadget"]
        RecordSaleHandler(system).handle(1, 40)
        assert [p.name for p in LowStockHandler(system).handle()] == ["Widget", "Gadget"]
