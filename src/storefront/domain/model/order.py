"""Order aggregate: the immutable record of a checkout.

Line items and the shipping address are fixed when the order is created.
The only thing that changes afterwards is ``status``, and only along the
transitions in ``ALLOWED_TRANSITIONS``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money, Quantity


class OrderStatus(Enum):
    PENDING = "pending"
    PAID = "paid"
    SHIPPED = "shipped"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


ALLOWED_TRANSITIONS: dict[OrderStatus, frozenset[OrderStatus]] = {
    OrderStatus.PENDING: frozenset({OrderStatus.PAID, OrderStatus.CANCELLED}),
    OrderStatus.PAID: frozenset({OrderStatus.SHIPPED}),
    OrderStatus.SHIPPED: frozenset({OrderStatus.COMPLETED}),
    OrderStatus.COMPLETED: frozenset(),
    OrderStatus.CANCELLED: frozenset(),
}


@dataclass(frozen=True)
class OrderLineItem:
    """Captures the product as it was at checkout time.

    ``unit_price`` is a snapshot; later catalog price changes never reach it.
    ``product_name`` and ``image_url`` are kept for display only.
    """

    product_id: str
    product_name: str
    quantity: Quantity
    unit_price: Money  # locked at checkout
    image_url: str | None = None

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value


@dataclass
class Order:
    """Aggregate root for purchases.

    Use the ``Order.create()`` factory for new orders: it enforces all
    business rules.  The ``__init__`` is intentionally simple so the
    repository can reconstitute persisted orders without re-validating.
    """

    id: int | None
    user_id: str
    items: tuple[OrderLineItem, ...]
    address: str
    status: OrderStatus = OrderStatus.PENDING
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(
        user_id: str,
        items: list[OrderLineItem],
        address: str,
    ) -> Order:
        """Create a new pending order, enforcing all invariants."""
        if not user_id:
            raise ValidationError("User is required")

        if not address or not address.strip():
            raise ValidationError("Address is required")

        if not items:
            raise ValidationError("Order must contain at least one item")

        order = Order(
            id=None,
            user_id=user_id,
            items=tuple(items),
            address=address.strip(),
        )
        order.total  # raises ValidationError if the sum exceeds MAX_AMOUNT
        return order

    # --- State transitions ----------------------------------------------------

    def transition_to(self, new_status: OrderStatus) -> None:
        """Move along pending -> paid -> shipped -> completed (or pending -> cancelled)."""
        if new_status not in ALLOWED_TRANSITIONS[self.status]:
            raise ValidationError(
                f"Cannot move order #{self.id} from {self.status.value} "
                f"to {new_status.value}"
            )
        self.status = new_status

    # --- Computed properties --------------------------------------------------

    @property
    def total(self) -> Money:
        result = Money.zero()
        for item in self.items:
            result = result + item.line_total
        return result

    @property
    def item_count(self) -> int:
        return sum(item.quantity.value for item in self.items)
