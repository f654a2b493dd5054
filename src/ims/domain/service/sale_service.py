"""Domain service: Record Sale.

Coordinates the cross-aggregate sale transaction: the InventoryStore
gives up stock and the SalesLedger gains a record.

The two-phase approach (validate-then-mutate) ensures a rejected sale
leaves both the stock level and the ledger untouched.
"""

from __future__ import annotations

import logging

from ims.domain.exceptions import EntityNotFoundError, InsufficientStockError
from ims.domain.model.inventory import InventoryStore
from ims.domain.model.ledger import SalesLedger
from ims.domain.model.sale import SaleRecord
from ims.domain.model.value_objects import Quantity

logger = logging.getLogger(__name__)


class SaleService:

    def __init__(self, store: InventoryStore, ledger: SalesLedger) -> None:
        self._store = store
        self._ledger = ledger

    def record_sale(self, product_id: int, quantity: int) -> SaleRecord:
        """Sell *quantity* units of a product.

        Raises EntityNotFoundError, InvalidQuantityError or
        InsufficientStockError, in that order of checking.
        """
        # Phase 1: load and validate
        product = self._store.find_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID {product_id} not found")

        qty = Quantity(quantity)
        if qty.value > product.quantity:
            raise InsufficientStockError(
                f"Insufficient stock for {product.name} "
                f"(need {qty.value}, have {product.quantity} available)"
            )

        record = SaleRecord(
            product_id=product.id,
            product_name=product.name,
            quantity_sold=qty.value,
            total_amount=product.price * qty.value,
            sold_at=self._store.now(),
        )

        # Phase 2: mutate
        self._store.debit(product.id, qty.value)
        self._ledger.append(record)
        logger.info(
            "Recorded sale of %d x '%s' for %s",
            record.quantity_sold, record.product_name, record.total_amount,
        )
        return record
