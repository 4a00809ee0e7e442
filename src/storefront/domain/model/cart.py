"""Cart aggregate: one per user, holding desired purchase quantities.

Nothing in a cart is committed: prices are not captured here and stock is
only pre-checked. Checkout turns a cart into an Order.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from storefront.domain.model.value_objects import Quantity


@dataclass(frozen=True)
class CartItem:
    product_id: str
    quantity: Quantity


@dataclass
class Cart:
    """Aggregate root for a user's cart.

    Items keep insertion order and hold at most one line per product.
    """

    user_id: str
    items: list[CartItem] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.items

    @property
    def item_count(self) -> int:
        return sum(item.quantity.value for item in self.items)

    def set_item(self, product_id: str, quantity: Quantity) -> None:
        """Replace the quantity of an existing line, or append a new one."""
        for i, item in enumerate(self.items):
            if item.product_id == product_id:
                self.items[i] = CartItem(product_id=product_id, quantity=quantity)
                return
        self.items.append(CartItem(product_id=product_id, quantity=quantity))

    def remove_item(self, product_id: str) -> bool:
        """Drop the line for ``product_id``; returns False if it wasn't there."""
        remaining = [item for item in self.items if item.product_id != product_id]
        removed = len(remaining) != len(self.items)
        self.items = remaining
        return removed

    def clear(self) -> None:
        self.items = []
