"""Unit tests for the Cart aggregate."""

from storefront.domain.model.cart import Cart
from storefront.domain.model.value_objects import Quantity


class TestCartItems:

    def test_new_cart_is_empty(self):
        cart = Cart(user_id="u1")
        assert cart.is_empty
        assert cart.item_count == 0

    def test_set_item_appends(self):
        cart = Cart(user_id="u1")
        cart.set_item("1", Quantity(2))
        cart.set_item("2", Quantity(1))
        assert [i.product_id for i in cart.items] == ["1", "2"]
        assert cart.item_count == 3

    def test_set_item_replaces_quantity_in_place(self):
        cart = Cart(user_id="u1")
        cart.set_item("1", Quantity(2))
        cart.set_item("2", Quantity(1))
        cart.set_item("1", Quantity(5))
        assert [(i.product_id, i.quantity.value) for i in cart.items] == [("1", 5), ("2", 1)]

    def test_remove_item(self):
        cart = Cart(user_id="u1")
        cart.set_item("1", Quantity(2))
        assert cart.remove_item("1") is True
        assert cart.is_empty

    def test_remove_absent_item_is_noop(self):
        cart = Cart(user_id="u1")
        cart.set_item("1", Quantity(2))
        assert cart.remove_item("99") is False
        assert cart.item_count == 2

    def test_clear(self):
        cart = Cart(user_id="u1")
        cart.set_item("1", Quantity(2))
        cart.clear()
        assert cart.is_empty
