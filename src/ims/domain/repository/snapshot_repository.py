"""Abstract repository for collection snapshots.

Defined in the domain layer so the domain never depends on
infrastructure. Each collection is stored whole: a save replaces the
previous snapshot, a load returns everything that was last saved.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from ims.domain.model.product import Product
from ims.domain.model.sale import SaleRecord


class SnapshotRepository(ABC):

    @abstractmethod
    def load_inventory(self) -> list[Product]:
        """Return the saved products, or an empty list if none were saved.

        Raises PersistenceError if a snapshot exists but cannot be read.
        """

    @abstractmethod
    def save_inventory(self, products: list[Product]) -> None:
        """Replace the product snapshot."""

    @abstractmethod
    def load_sales(self) -> list[SaleRecord]:
        """Return the saved sales, or an empty list if none were saved.

        Raises PersistenceError if a snapshot exists but cannot be read.
        """

    @abstractmethod
    def save_sales(self, sales: list[SaleRecord]) -> None:
        """Replace the sales snapshot."""
