"""SaleRecord value object."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from ims.domain.exceptions import ValidationError
from ims.domain.model.clock import utc_now
from ims.domain.model.value_objects import Money


@dataclass(frozen=True)
class SaleRecord:
    """One completed sale.

    ``product_name`` and ``total_amount`` are snapshots taken at sale time;
    later product edits or deletion never change a recorded sale.
    """

    product_id: int
    product_name: str
    quantity_sold: int
    total_amount: Money
    sold_at: datetime = field(default_factory=utc_now)

    def __post_init__(self) -> None:
        if isinstance(self.quantity_sold, bool) or not isinstance(self.quantity_sold, int):
            raise ValidationError(
                f"Quantity sold must be an integer, got {type(self.quantity_sold).__name__}"
            )
        if self.quantity_sold <= 0:
            raise ValidationError("Quantity sold must be positive")
