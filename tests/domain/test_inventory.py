"""Unit tests for the InventoryStore aggregate."""

from datetime import datetime, timezone
from decimal import Decimal

import pytest

from ims.domain.exceptions import EntityNotFoundError, ValidationError
from ims.domain.model.inventory import InventoryStore, ProductUpdate
from ims.domain.model.product import Product
from ims.domain.model.value_objects import Money
from tests.fakes import FakeClock


def _store() -> InventoryStore:
    return InventoryStore(clock=FakeClock())


def _product(pid: int, name: str = "Widget", quantity: int = 5) -> Product:
    return Product(
        id=pid, name=name, quantity=quantity, price=Money.of("1.00"),
        category="Hardware",
        last_restock_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
    )


class TestInventoryStoreAdd:

    def test_first_id_is_one(self):
        assert _store().add("Widget", 50, "2.50", "Hardware") == 1

    def test_ids_strictly_increasing(self):
        store = _store()
        ids = [store.add(f"Item {i}", i, "1.00", "Misc") for i in range(5)]
        assert ids == [1, 2, 3, 4, 5]

    def test_add_then_find_returns_supplied_fields(self):
        store = _store()
        pid = store.add("Widget", 50, "2.50", "Hardware")
        p = store.find_by_id(pid)
        assert p is not None
        assert (p.name, p.quantity, p.price, p.category) == (
            "Widget", 50, Money(Decimal("2.50")), "Hardware",
        )

    def test_add_stamps_restock_time_from_clock(self):
        clock = FakeClock()
        store = InventoryStore(clock=clock)
        pid = store.add("Widget", 1, "1", "Hardware")
        assert store.find_by_id(pid).last_restock_at == clock.current

    def test_negative_quantity_rejected(self):
        store = _store()
        with pytest.raises(ValidationError, match="cannot be negative"):
            store.add("Widget", -1, "2.50", "Hardware")
        assert len(store) == 0

    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            _store().add("Widget", 1, "-2.50", "Hardware")

    def test_price_above_maximum_rejected(self):
        store = _store()
        with pytest.raises(ValidationError, match="exceeds the maximum"):
            store.add("Gold", 10, "1e999999", "Metal")
        assert len(store) == 0
        assert store.next_id == 1

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError, match="name is required"):
            _store().add("  ", 1, "1.00", "Hardware")

    def test_blank_category_rejected(self):
        with pytest.raises(ValidationError, match="category is required"):
            _store().add("Widget", 1, "1.00", "")

    def test_rejected_add_does_not_consume_an_id(self):
        store = _store()
        with pytest.raises(ValidationError):
            store.add("Widget", -1, "1.00", "Hardware")
        assert store.add("Widget", 1, "1.00", "Hardware") == 1

    def test_zero_quantity_and_price_allowed(self):
        store = _store()
        pid = store.add("Freebie", 0, "0", "Promo")
        assert store.find_by_id(pid).quantity == 0


class TestInventoryStoreIdSeeding:

    def test_seeded_from_max_loaded_id(self):
        store = InventoryStore([_product(3), _product(7), _product(5)])
        assert store.add("Next", 1, "1", "Misc") == 8

    def test_empty_store_starts_at_one(self):
        assert InventoryStore([]).next_id == 1

    def test_ids_not_reused_after_delete(self):
        store = _store()
        store.add("A", 1, "1", "Misc")
        second = store.add("B", 1, "1", "Misc")
        store.delete(second)
        assert store.add("C", 1, "1", "Misc") == 3

    def test_duplicate_loaded_ids_rejected(self):
        with pytest.raises(ValidationError, match="unique"):
            InventoryStore([_product(1), _product(1, name="Other")])


class TestInventoryStoreUpdate:

    def test_partial_update_keeps_other_fields(self):
        store = _store()
        pid = store.add("Widget", 50, "2.50", "Hardware")
        store.update(pid, ProductUpdate(name="Gizmo"))
        p = store.find_by_id(pid)
        assert p.name == "Gizmo"
        assert p.quantity == 50
        assert p.price == Money.of("2.50")
        assert p.category == "Hardware"

    def test_empty_update_is_noop_and_keeps_restock_time(self):
        store = _store()
        pid = store.add("Widget", 50, "2.50", "Hardware")
        before = store.find_by_id(pid).last_restock_at
        store.update(pid, ProductUpdate())
        p = store.find_by_id(pid)
        assert p.last_restock_at == before
        assert (p.name, p.quantity) == ("Widget", 50)

    def test_non_quantity_update_keeps_restock_time(self):
        store = _store()
        pid = store.add("Widget", 50, "2.50", "Hardware")
        before = store.find_by_id(pid).last_restock_at
        store.update(pid, ProductUpdate(price="3.00", category="Tools"))
        assert store.find_by_id(pid).last_restock_at == before

    def test_quantity_update_refreshes_restock_time(self):
        store = _store()
        pid = store.add("Widget", 50, "2.50", "Hardware")
        before = store.find_by_id(pid).last_restock_at
        store.update(pid, ProductUpdate(quantity=80))
        p = store.find_by_id(pid)
        assert p.quantity == 80
        assert p.last_restock_at > before

    def test_unknown_id_raises_not_found(self):
        with pytest.raises(EntityNotFoundError, match="not found"):
            _store().update(99, ProductUpdate(name="X"))

    def test_invalid_field_rejects_whole_update(self):
        store = _store()
        pid = store.add("Widget", 50, "2.50", "Hardware")
        with pytest.raises(ValidationError):
            store.update(pid, ProductUpdate(name="Gizmo", price="-1"))
        p = store.find_by_id(pid)
        assert p.name == "Widget"
        assert p.price == Money.of("2.50")

    def test_negative_quantity_rejected(self):
        store = _store()
        pid = store.add("Widget", 50, "2.50", "Hardware")
        with pytest.raises(ValidationError, match="cannot be negative"):
            store.update(pid, ProductUpdate(quantity=-5))
        assert store.find_by_id(pid).quantity == 50


class TestInventoryStoreDelete:

    def test_delete_then_find_is_none(self):
        store = _store()
        pid = store.add("Widget", 50, "2.50", "Hardware")
        store.delete(pid)
        assert store.find_by_id(pid) is None

    def test_delete_unknown_raises_and_keeps_size(self):
        store = _store()
        store.add("Widget", 50, "2.50", "Hardware")
        with pytest.raises(EntityNotFoundError):
            store.delete(42)
        assert len(store) == 1


class TestInventoryStoreQueries:

    def _populated(self) -> InventoryStore:
        store = _store()
        store.add("Red Widget", 50, "2.50", "Hardware")
        store.add("Blue Gadget", 5, "10.00", "Electronics")
        store.add("widget mini", 10, "1.00", "hardware")
        store.add("Cable", 11, "3.00", "Electronics")
        return store

    def test_find_by_id_miss_returns_none(self):
        assert _store().find_by_id(1) is None

    def test_all_in_insertion_order(self):
        names = [p.name for p in self._populated().all()]
        assert names == ["Red Widget", "Blue Gadget", "widget mini", "Cable"]

    def test_search_by_name_is_case_insensitive_substring(self):
        results = self._populated().search_by_name("WIDGET")
        assert [p.id for p in results] == [1, 3]

    def test_search_by_category_is_case_insensitive_exact(self):
        results = self._populated().search_by_category("HARDWARE")
        assert [p.id for p in results] == [1, 3]

    def test_search_by_category_does_not_match_substrings(self):
        assert self._populated().search_by_category("Hard") == []

    def test_filter_with_predicate(self):
        results = self._populated().filter(lambda p: p.quantity <= 10)
        assert [p.id for p in results] == [2, 3]

    def test_all_returns_a_copy(self):
        store = self._populated()
        snapshot = store.all()
        snapshot.clear()
        assert len(store) == 4
