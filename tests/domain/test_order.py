"""Unit tests for the Order aggregate and its business rules."""

import dataclasses

import pytest

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.order import Order, OrderLineItem, OrderStatus
from storefront.domain.model.value_objects import Money, Quantity


def _make_item(pid: str = "1", name: str = "Widget", qty: int = 1, price: str = "15.00") -> OrderLineItem:
    """Helper to build a valid line item."""
    return OrderLineItem(
        product_id=pid,
        product_name=name,
        quantity=Quantity(qty),
        unit_price=Money.of(price),
    )


class TestOrderCreation:

    def test_happy_path(self):
        order = Order.create("u1", [_make_item(qty=2, price="10.00")], "1 Main St")
        assert order.user_id == "u1"
        assert order.status == OrderStatus.PENDING
        assert order.address == "1 Main St"
        assert order.total == Money.of("20.00")

    def test_id_is_none_for_new_orders(self):
        order = Order.create("u1", [_make_item()], "1 Main St")
        assert order.id is None  # assigned by repository

    def test_total_is_sum_of_line_items(self):
        order = Order.create(
            "u1",
            [
                _make_item("1", "Widget", qty=3, price="15.00"),
                _make_item("2", "Gadget", qty=5, price="25.00"),
                _make_item("3", "Penny", qty=7, price="0.01"),
            ],
            "1 Main St",
        )
        assert order.total == Money.of("170.07")
        assert order.item_count == 15

    def test_address_is_trimmed(self):
        order = Order.create("u1", [_make_item()], "  1 Main St  ")
        assert order.address == "1 Main St"

    def test_blank_address_rejected(self):
        with pytest.raises(ValidationError, match="Address is required"):
            Order.create("u1", [_make_item()], "   ")

    def test_no_items_rejected(self):
        with pytest.raises(ValidationError, match="at least one item"):
            Order.create("u1", [], "1 Main St")

    def test_total_above_maximum_rejected(self):
        item = _make_item(qty=10, price="1000000000000.00")
        with pytest.raises(ValidationError, match="exceeds the maximum"):
            Order.create("u1", [item], "1 Main St")

    def test_line_items_are_immutable(self):
        order = Order.create("u1", [_make_item()], "1 Main St")
        with pytest.raises(dataclasses.FrozenInstanceError):
            order.items[0].unit_price = Money.of("1.00")  # type: ignore[misc]
        assert isinstance(order.items, tuple)


class TestOrderStatusTransitions:

    def _order(self) -> Order:
        order = Order.create("u1", [_make_item()], "1 Main St")
        order.id = 7
        return order

    def test_full_lifecycle(self):
        order = self._order()
        order.transition_to(OrderStatus.PAID)
        order.transition_to(OrderStatus.SHIPPED)
        order.transition_to(OrderStatus.COMPLETED)
        assert order.status == OrderStatus.COMPLETED

    def test_cancel_pending(self):
        order = self._order()
        order.transition_to(OrderStatus.CANCELLED)
        assert order.status == OrderStatus.CANCELLED

    def test_cancel_twice_rejected(self):
        order = self._order()
        order.transition_to(OrderStatus.CANCELLED)
        with pytest.raises(ValidationError, match="from cancelled to cancelled"):
            order.transition_to(OrderStatus.CANCELLED)

    def test_cancel_after_payment_rejected(self):
        order = self._order()
        order.transition_to(OrderStatus.PAID)
        with pytest.raises(ValidationError, match="from paid to cancelled"):
            order.transition_to(OrderStatus.CANCELLED)

    def test_skipping_a_step_rejected(self):
        order = self._order()
        with pytest.raises(ValidationError, match="from pending to shipped"):
            order.transition_to(OrderStatus.SHIPPED)

    def test_completed_is_final(self):
        order = self._order()
        order.transition_to(OrderStatus.PAID)
        order.transition_to(OrderStatus.SHIPPED)
        order.transition_to(OrderStatus.COMPLETED)
        with pytest.raises(ValidationError):
            order.transition_to(OrderStatus.PENDING)
