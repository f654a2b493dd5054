"""Session state: the explicit owner of both collections.

Built once per session by LoadSystemStateHandler and handed to every
use-case handler. Nothing in the application keeps module-level state.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ims.domain.model.inventory import InventoryStore
from ims.domain.model.ledger import SalesLedger
from ims.domain.service.sale_service import SaleService


@dataclass
class InventorySystem:

    store: InventoryStore = field(default_factory=InventoryStore)
    ledger: SalesLedger = field(default_factory=SalesLedger)

    def sale_service(self) -> SaleService:
        return SaleService(self.store, self.ledger)
