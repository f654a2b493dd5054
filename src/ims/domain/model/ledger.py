"""SalesLedger: append-only collection of completed sales."""

from __future__ import annotations

from collections.abc import Iterable

from ims.domain.model.sale import SaleRecord
from ims.domain.model.value_objects import Money


class SalesLedger:

    def __init__(self, records: Iterable[SaleRecord] | None = None) -> None:
        self._records: list[SaleRecord] = list(records or [])

    def append(self, record: SaleRecord) -> None:
        self._records.append(record)

    def all(self) -> list[SaleRecord]:
        """Every sale in the order it was recorded."""
        return list(self._records)

    def total_revenue(self) -> Money:
        result = Money.zero()
        for record in self._records:
            result = result + record.total_amount
        return result

    def __len__(self) -> int:
        return len(self._records)
