"""Integration tests for the cart use cases."""

import pytest

from storefront.application.clear_cart import ClearCartHandler
from storefront.application.get_cart import GetCartHandler
from storefront.application.remove_cart_item import RemoveCartItemHandler
from storefront.application.set_cart_item import SetCartItemHandler
from storefront.domain.exceptions import (
    CartNotFoundError,
    InsufficientStockError,
    ProductNotFoundError,
    ValidationError,
)
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from tests.fakes import FakeUnitOfWork, InMemoryStore, uow_factory


def _store() -> InMemoryStore:
    return InMemoryStore(
        products=[
            Product(id="1", owner_id="m1", name="Widget", price=Money.of("15.00"), stock=5),
            Product(id="2", owner_id="m1", name="Gadget", price=Money.of("25.00"), stock=2),
        ]
    )


class TestGetCart:

    def test_creates_empty_cart_once(self):
        store = _store()
        handler = GetCartHandler(uow_factory(store))

        first = handler.handle("alice")
        second = handler.handle("alice")

        assert first == second
        assert first.items == []
        assert list(store.carts) == ["alice"]
        assert store.commits == 1

    def test_resolves_display_fields(self):
        store = _store()
        SetCartItemHandler(uow_factory(store)).handle("alice", "1", 2)

        dto = GetCartHandler(uow_factory(store)).handle("alice")

        line = dto.items[0]
        assert (line.product_name, line.unit_price, line.stock) == ("Widget", "$15.00", 5)
        assert dto.item_count == 2

    def test_deleted_product_shows_without_details(self):
        store = _store()
        SetCartItemHandler(uow_factory(store)).handle("alice", "1", 2)
        with FakeUnitOfWork(store) as uow:
            uow.products.delete("1")
            uow.commit()

        dto = GetCartHandler(uow_factory(store)).handle("alice")

        assert dto.items[0].product_id == "1"
        assert dto.items[0].product_name is None


class TestSetCartItem:

    def test_appends_then_replaces(self):
        store = _store()
        handler = SetCartItemHandler(uow_factory(store))

        handler.handle("alice", "1", 2)
        handler.handle("alice", "2", 1)
        dto = handler.handle("alice", "1", 4)

        assert [(i.product_id, i.quantity) for i in dto.items] == [("1", 4), ("2", 1)]
        assert [(i.product_id, i.quantity.value) for i in store.carts["alice"].items] == [
            ("1", 4),
            ("2", 1),
        ]

    def test_zero_quantity_rejected_before_store(self):
        store = _store()
        with pytest.raises(ValidationError, match="at least 1"):
            SetCartItemHandler(uow_factory(store)).handle("alice", "1", 0)
        assert store.commits == 0

    def test_unknown_product_rejected(self):
        store = _store()
        with pytest.raises(ProductNotFoundError, match="'99'"):
            SetCartItemHandler(uow_factory(store)).handle("alice", "99", 1)
        assert "alice" not in store.carts

    def test_more_than_stock_rejected(self):
        store = _store()
        with pytest.raises(InsufficientStockError, match="Gadget") as info:
            SetCartItemHandler(uow_factory(store)).handle("alice", "2", 3)
        assert info.value.available == 2
        assert "alice" not in store.carts


class TestRemoveCartItem:

    def test_removes_line(self):
        store = _store()
        SetCartItemHandler(uow_factory(store)).handle("alice", "1", 2)

        dto = RemoveCartItemHandler(uow_factory(store)).handle("alice", "1")

        assert dto.items == []
        assert store.carts["alice"].is_empty

    def test_absent_line_is_noop(self):
        store = _store()
        SetCartItemHandler(uow_factory(store)).handle("alice", "1", 2)

        dto = RemoveCartItemHandler(uow_factory(store)).handle("alice", "2")

        assert [i.product_id for i in dto.items] == ["1"]

    def test_missing_cart_rejected(self):
        with pytest.raises(CartNotFoundError):
            RemoveCartItemHandler(uow_factory(_store())).handle("alice", "1")


class TestClearCart:

    def test_clears_all_items(self):
        store = _store()
        SetCartItemHandler(uow_factory(store)).handle("alice", "1", 2)
        SetCartItemHandler(uow_factory(store)).handle("alice", "2", 1)

        ClearCartHandler(uow_factory(store)).handle("alice")

        assert store.carts["alice"].is_empty

    def test_missing_cart_rejected(self):
        with pytest.raises(CartNotFoundError, match="alice"):
            ClearCartHandler(uow_factory(_store())).handle("alice")
