"""Product entity.

Products are owned by the InventoryStore. Their id is assigned once by the
store and never changes; everything else is mutable.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from ims.domain.model.clock import utc_now
from ims.domain.model.value_objects import Money, require_stock_level


@dataclass
class Product:
    """A tracked inventory item.

    Invariants:
    - ``quantity`` is never negative
    - ``last_restock_at`` moves whenever ``quantity`` is reassigned
      through ``change_quantity()``

    The ``__init__`` does not re-validate so persisted products can be
    reconstituted as-is; the store validates new input before building one.
    """

    id: int
    name: str
    quantity: int
    price: Money
    category: str
    last_restock_at: datetime = field(default_factory=utc_now)

    def change_quantity(self, quantity: int, at: datetime | None = None) -> None:
        """Reassign the stock level and stamp the restock time."""
        self.quantity = require_stock_level(quantity)
        self.last_restock_at = at if at is not None else utc_now()

    @property
    def stock_value(self) -> Money:
        return self.price * self.quantity
