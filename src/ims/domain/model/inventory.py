"""InventoryStore aggregate, owner of the product collection.

The store is the only writer of products. It assigns identifiers from a
monotonic counter so an id is never handed out twice, even after the
product that held it has been deleted.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from ims.domain.exceptions import EntityNotFoundError, ValidationError
from ims.domain.model.clock import Clock, utc_now
from ims.domain.model.product import Product
from ims.domain.model.value_objects import Money, require_stock_level, require_text

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProductUpdate:
    """Field-level partial update. ``None`` means "keep the current value"."""

    name: str | None = None
    quantity: int | None = None
    price: str | float | int | Decimal | None = None
    category: str | None = None

    @property
    def is_empty(self) -> bool:
        return (
            self.name is None
            and self.quantity is None
            and self.price is None
            and self.category is None
        )


class InventoryStore:
    """Aggregate root for the product collection.

    Invariants:
    - product ids are unique
    - ``next_id`` is greater than every id this store has ever held
    """

    def __init__(
        self,
        products: Iterable[Product] | None = None,
        clock: Clock = utc_now,
    ) -> None:
        self._products: list[Product] = list(products or [])
        ids = [p.id for p in self._products]
        if len(set(ids)) != len(ids):
            raise ValidationError("Product ids must be unique")
        self._clock = clock
        self._next_id = max((p.id for p in self._products), default=0) + 1

    # --- Mutations ------------------------------------------------------------

    def add(
        self,
        name: str,
        quantity: int,
        price: str | float | int | Decimal,
        category: str,
    ) -> int:
        """Add a new product and return its freshly assigned id."""
        product = Product(
            id=self._next_id,
            name=require_text(name, "name"),
            quantity=require_stock_level(quantity),
            price=Money.of(price),
            category=require_text(category, "category"),
            last_restock_at=self._clock(),
        )
        # Counter only moves once every field has passed validation
        self._next_id += 1
        self._products.append(product)
        logger.info("Added product #%d '%s'", product.id, product.name)
        return product.id

    def update(self, product_id: int, changes: ProductUpdate) -> Product:
        """Apply a partial update.

        Every present field is validated before any of them is written, so a
        rejected update leaves the product exactly as it was.
        """
        product = self._require(product_id)
        if changes.is_empty:
            return product

        name = require_text(changes.name, "name") if changes.name is not None else None
        quantity = (
            require_stock_level(changes.quantity) if changes.quantity is not None else None
        )
        price = Money.of(changes.price) if changes.price is not None else None
        category = (
            require_text(changes.category, "category")
            if changes.category is not None
            else None
        )

        if name is not None:
            product.name = name
        if quantity is not None:
            product.change_quantity(quantity, at=self._clock())
        if price is not None:
            product.price = price
        if category is not None:
            product.category = category

        logger.info("Updated product #%d", product.id)
        return product

    def delete(self, product_id: int) -> Product:
        product = self._require(product_id)
        self._products.remove(product)
        logger.info("Deleted product #%d '%s'", product.id, product.name)
        return product

    def debit(self, product_id: int, quantity: int) -> Product:
        """Take *quantity* units out of stock.

        Goes through ``change_quantity`` so the restock timestamp moves too.
        """
        product = self._require(product_id)
        product.change_quantity(product.quantity - quantity, at=self._clock())
        return product

    # --- Queries --------------------------------------------------------------

    def find_by_id(self, product_id: int) -> Product | None:
        for product in self._products:
            if product.id == product_id:
                return product
        return None

    def filter(self, predicate: Callable[[Product], bool]) -> list[Product]:
        return [p for p in self._products if predicate(p)]

    def search_by_name(self, query: str) -> list[Product]:
        needle = query.strip().lower()
        return self.filter(lambda p: needle in p.name.lower())

    def search_by_category(self, category: str) -> list[Product]:
        wanted = category.strip().casefold()
        return self.filter(lambda p: p.category.casefold() == wanted)

    def all(self) -> list[Product]:
        return list(self._products)

    @property
    def next_id(self) -> int:
        return self._next_id

    def now(self) -> datetime:
        return self._clock()

    def __len__(self) -> int:
        return len(self._products)

    # --- Internal helpers -----------------------------------------------------

    def _require(self, product_id: int) -> Product:
        product = self.find_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID {product_id} not found")
        return product
