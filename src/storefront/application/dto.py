"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.model.order import Order


@dataclass(frozen=True)
class OrderLineItemDTO:
    """Output: a single order line as displayed to the user."""

    product_id: str
    product_name: str
    image_url: str | None
    quantity: int
    unit_price: str  # formatted, e.g. "$15.00"
    line_total: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the user."""

    id: int
    user_id: str
    status: str
    address: str
    items: list[OrderLineItemDTO]
    total: str
    created_at: str


@dataclass(frozen=True)
class CartLineDTO:
    """Output: a cart line, resolved against the live catalog.

    Name, price and stock are None when the product has since been deleted.
    """

    product_id: str
    quantity: int
    product_name: str | None
    unit_price: str | None
    stock: int | None


@dataclass(frozen=True)
class CartDTO:
    user_id: str
    items: list[CartLineDTO]
    item_count: int


def order_to_dto(order: Order) -> OrderDTO:
    return OrderDTO(
        id=order.id,  # type: ignore[arg-type]
        user_id=order.user_id,
        status=order.status.value,
        address=order.address,
        items=[
            OrderLineItemDTO(
                product_id=item.product_id,
                product_name=item.product_name,
                image_url=item.image_url,
                quantity=item.quantity.value,
                unit_price=str(item.unit_price),
                line_total=str(item.line_total),
            )
            for item in order.items
        ],
        total=str(order.total),
        created_at=order.created_at.strftime("%Y-%m-%d %H:%M UTC"),
    )
