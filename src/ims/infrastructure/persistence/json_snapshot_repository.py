"""JSON-file-backed implementation of SnapshotRepository.

Each collection lives in its own file as a versioned envelope::

    {"format": "ims.inventory", "version": 1, "records": [...]}

Writes go to a temporary file in the same directory which is then renamed
over the target, so a failed save leaves the previous snapshot intact.
"""

from __future__ import annotations

import json
import logging
import os
import stat
import tempfile
from collections.abc import Callable
from datetime import datetime
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Any, TypeVar

from ims.domain.exceptions import PersistenceError, ValidationError
from ims.domain.model.product import Product
from ims.domain.model.sale import SaleRecord
from ims.domain.model.value_objects import Money, require_stock_level
from ims.domain.repository.snapshot_repository import SnapshotRepository

logger = logging.getLogger(__name__)

T = TypeVar("T")

INVENTORY_FORMAT = "ims.inventory"
SALES_FORMAT = "ims.sales"
FORMAT_VERSION = 1


class JsonSnapshotRepository(SnapshotRepository):

    def __init__(self, inventory_path: Path, sales_path: Path) -> None:
        self._inventory_path = inventory_path
        self._sales_path = sales_path

    # --- SnapshotRepository interface -----------------------------------------

    def load_inventory(self) -> list[Product]:
        products = self._load(self._inventory_path, INVENTORY_FORMAT, self._product_to_domain)
        ids = [p.id for p in products]
        if len(set(ids)) != len(ids):
            raise PersistenceError(f"Duplicate product ids in {self._inventory_path}")
        return products

    def save_inventory(self, products: list[Product]) -> None:
        records = [self._product_to_raw(p) for p in products]
        self._persist(self._inventory_path, INVENTORY_FORMAT, records)

    def load_sales(self) -> list[SaleRecord]:
        return self._load(self._sales_path, SALES_FORMAT, self._sale_to_domain)

    def save_sales(self, sales: list[SaleRecord]) -> None:
        records = [self._sale_to_raw(s) for s in sales]
        self._persist(self._sales_path, SALES_FORMAT, records)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _product_to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "name": product.name,
            "quantity": product.quantity,
            "price": str(product.price.amount),
            "currency": product.price.currency,
            "category": product.category,
            "last_restock_at": product.last_restock_at.isoformat(),
        }

    @staticmethod
    def _product_to_domain(raw: dict) -> Product:
        return Product(
            id=_int_field(raw, "id"),
            name=_str_field(raw, "name"),
            quantity=require_stock_level(_int_field(raw, "quantity")),
            price=_price_field(raw, "price"),
            category=_str_field(raw, "category"),
            last_restock_at=_datetime_field(raw, "last_restock_at"),
        )

    @staticmethod
    def _sale_to_raw(sale: SaleRecord) -> dict:
        return {
            "product_id": sale.product_id,
            "product_name": sale.product_name,
            "quantity_sold": sale.quantity_sold,
            "total_amount": str(sale.total_amount.amount),
            "currency": sale.total_amount.currency,
            "sold_at": sale.sold_at.isoformat(),
        }

    @staticmethod
    def _sale_to_domain(raw: dict) -> SaleRecord:
        return SaleRecord(
            product_id=_int_field(raw, "product_id"),
            product_name=_str_field(raw, "product_name"),
            quantity_sold=_int_field(raw, "quantity_sold"),
            total_amount=_money_field(raw, "total_amount"),
            sold_at=_datetime_field(raw, "sold_at"),
        )

    # --- File helpers ---------------------------------------------------------

    def _load(
        self, path: Path, expected_format: str, to_domain: Callable[[dict], T]
    ) -> list[T]:
        if not path.exists():
            logger.debug("No snapshot at %s, starting empty", path)
            return []

        try:
            document = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError) as exc:
            raise PersistenceError(f"Cannot read {path}: {exc}") from exc
        except (ValueError, RecursionError) as exc:
            raise PersistenceError(f"Corrupt snapshot {path}: {exc}") from exc

        records = self._unwrap(path, document, expected_format)
        try:
            items = [to_domain(raw) for raw in records]
        except (KeyError, TypeError, ValueError, ValidationError) as exc:
            raise PersistenceError(f"Invalid record in {path}: {exc}") from exc

        logger.debug("Loaded %d records from %s", len(items), path)
        return items

    @staticmethod
    def _unwrap(path: Path, document: Any, expected_format: str) -> list[dict]:
        if not isinstance(document, dict):
            raise PersistenceError(f"Corrupt snapshot {path}: expected an object")
        if document.get("format") != expected_format:
            raise PersistenceError(
                f"Corrupt snapshot {path}: expected format {expected_format!r}, "
                f"got {document.get('format')!r}"
            )
        if document.get("version") != FORMAT_VERSION:
            raise PersistenceError(
                f"Unsupported snapshot version {document.get('version')!r} in {path}"
            )
        records = document.get("records")
        if not isinstance(records, list) or not all(isinstance(r, dict) for r in records):
            raise PersistenceError(f"Corrupt snapshot {path}: 'records' must be a list of objects")
        return records

    def _persist(self, path: Path, fmt: str, records: list[dict]) -> None:
        document = {"format": fmt, "version": FORMAT_VERSION, "records": records}
        payload = json.dumps(document, indent=2) + "\n"

        tmp_name: str | None = None
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            mode = _file_mode(path)
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=path.parent,
                prefix=f".{path.name}.",
                suffix=".tmp",
                delete=False,
            ) as tmp:
                tmp_name = tmp.name
                tmp.write(payload)
                tmp.flush()
                os.fsync(tmp.fileno())
            os.chmod(tmp_name, mode)
            os.replace(tmp_name, path)
        except OSError as exc:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise PersistenceError(f"Cannot write {path}: {exc}") from exc

        logger.debug("Saved %d records to %s", len(records), path)


# ---------------------------------------------------------------------------
# Field readers: raise ValueError/KeyError so _load can wrap them uniformly
# ---------------------------------------------------------------------------


def _int_field(raw: dict, key: str) -> int:
    value = raw[key]
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"field {key!r} must be an integer, got {value!r}")
    return value


def _str_field(raw: dict, key: str) -> str:
    value = raw[key]
    if not isinstance(value, str):
        raise ValueError(f"field {key!r} must be a string, got {value!r}")
    return value


def _decimal_field(raw: dict, key: str) -> Decimal:
    try:
        return Decimal(_str_field(raw, key))
    except InvalidOperation as exc:
        raise ValueError(f"field {key!r} is not a decimal: {raw[key]!r}") from exc


def _price_field(raw: dict, key: str) -> Money:
    return Money.of(_decimal_field(raw, key), raw.get("currency", "USD"))


def _money_field(raw: dict, key: str) -> Money:
    return Money(_decimal_field(raw, key), raw.get("currency", "USD"))


def _datetime_field(raw: dict, key: str) -> datetime:
    return datetime.fromisoformat(_str_field(raw, key))


def _file_mode(path: Path) -> int:
    """Permission bits for a rewritten snapshot.

    Keeps the existing file's mode; a new file gets the usual 0o666 minus
    umask instead of the 0o600 that tempfile creates with.
    """
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask
