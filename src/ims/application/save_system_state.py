"""Application service: Save System State (checkpoint).

Both collections are always attempted. A failed save is reported, not
raised: the in-memory state is still good and the session can go on.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ims.application.session import InventorySystem
from ims.domain.exceptions import PersistenceError
from ims.domain.repository.snapshot_repository import SnapshotRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SaveResult:
    errors: list[str] = field(default_factory=list)

    @property
    def saved(self) -> bool:
        return not self.errors


class SaveSystemStateHandler:

    def __init__(self, snapshot_repo: SnapshotRepository) -> None:
        self._snapshot_repo = snapshot_repo

    def handle(self, system: InventorySystem) -> SaveResult:
        errors: list[str] = []

        try:
            self._snapshot_repo.save_inventory(system.store.all())
        except PersistenceError as exc:
            logger.error("Inventory checkpoint failed: %s", exc)
            errors.append(f"Error saving inventory: {exc}")

        try:
            self._snapshot_repo.save_sales(system.ledger.all())
        except PersistenceError as exc:
            logger.error("Sales checkpoint failed: %s", exc)
            errors.append(f"Error saving sales: {exc}")

        return SaveResult(errors=errors)
