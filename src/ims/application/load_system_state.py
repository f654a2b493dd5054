"""Application service: Load System State (session startup).

A missing snapshot is a normal first run. A corrupt one is not fatal
either: that collection starts empty and the problem is reported back
as a diagnostic for the caller to show.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ims.application.session import InventorySystem
from ims.domain.exceptions import PersistenceError
from ims.domain.model.clock import Clock, utc_now
from ims.domain.model.inventory import InventoryStore
from ims.domain.model.ledger import SalesLedger
from ims.domain.repository.snapshot_repository import SnapshotRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoadResult:
    system: InventorySystem
    diagnostics: list[str] = field(default_factory=list)

    @property
    def degraded(self) -> bool:
        return bool(self.diagnostics)


class LoadSystemStateHandler:

    def __init__(self, snapshot_repo: SnapshotRepository, clock: Clock = utc_now) -> None:
        self._snapshot_repo = snapshot_repo
        self._clock = clock

    def handle(self) -> LoadResult:
        diagnostics: list[str] = []

        try:
            products = self._snapshot_repo.load_inventory()
        except PersistenceError as exc:
            logger.warning("Inventory snapshot unusable, starting empty: %s", exc)
            diagnostics.append(f"Error loading inventory: {exc}. Starting with empty inventory.")
            products = []

        try:
            sales = self._snapshot_repo.load_sales()
        except PersistenceError as exc:
            logger.warning("Sales snapshot unusable, starting empty: %s", exc)
            diagnostics.append(f"Error loading sales: {exc}. Starting with empty sales history.")
            sales = []

        system = InventorySystem(
            store=InventoryStore(products, clock=self._clock),
            ledger=SalesLedger(sales),
        )
        logger.debug(
            "Loaded %d products and %d sales records", len(products), len(sales)
        )
        return LoadResult(system=system, diagnostics=diagnostics)
