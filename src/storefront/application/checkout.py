"""Application service: Checkout use case.

Turns the user's cart into a pending order inside a single unit of work:

1. Load the cart (fail with EmptyCartError if missing or empty).
2. Load every product; fail on a missing product or short stock.
3. Snapshot name, image and price into immutable order lines.
4. Conditionally decrement each product's stock, add the order and empty
   the cart, then commit.

Any exception before ``commit()`` leaves the stores exactly as they were:
the unit of work rolls back on exit. A decrement that finds less stock than
step 2 read (a concurrent checkout got there first) is reported as
InsufficientStockError, and the decrements already applied in this attempt
are rolled back with everything else.
"""

from __future__ import annotations

from typing import Callable

import structlog

from storefront.application.dto import OrderDTO, order_to_dto
from storefront.domain.exceptions import (
    DomainException,
    EmptyCartError,
    InsufficientStockError,
    ProductNotFoundError,
    ValidationError,
)
from storefront.domain.model.order import Order, OrderLineItem
from storefront.domain.repository.unit_of_work import UnitOfWork

logger = structlog.get_logger(__name__)


class CheckoutHandler:

    def __init__(self, uow_factory: Callable[[], UnitOfWork]) -> None:
        self._uow_factory = uow_factory

    def handle(self, user_id: str, address: str) -> OrderDTO:
        """Place an order for everything in the user's cart."""
        if not address or not address.strip():
            raise ValidationError("Address is required")

        try:
            order = self._place_order(user_id, address)
        except DomainException as exc:
            logger.warning(
                "Checkout failed",
                user_id=user_id,
                reason=type(exc).__name__,
                detail=str(exc),
            )
            raise

        logger.info(
            "Checkout completed",
            user_id=user_id,
            order_id=order.id,
            total=str(order.total.amount),
            item_count=order.item_count,
        )
        return order_to_dto(order)

    def _place_order(self, user_id: str, address: str) -> Order:
        with self._uow_factory() as uow:
            cart = uow.carts.get_by_user(user_id)
            if cart is None or cart.is_empty:
                raise EmptyCartError(user_id)

            # Validate and snapshot: nothing has been written yet
            line_items: list[OrderLineItem] = []
            for item in cart.items:
                product = uow.products.get_by_id(item.product_id)
                if product is None:
                    raise ProductNotFoundError(item.product_id)
                if not product.has_stock_for(item.quantity.value):
                    raise InsufficientStockError(
                        product_id=product.id,
                        product_name=product.name,
                        requested=item.quantity.value,
                        available=product.stock,
                    )
                line_items.append(
                    OrderLineItem(
                        product_id=product.id,
                        product_name=product.name,
                        quantity=item.quantity,
                        unit_price=product.price,  # <-- price snapshot
                        image_url=product.primary_image_url,
                    )
                )

            order = Order.create(user_id=user_id, items=line_items, address=address)

            for line in order.items:
                if not uow.products.decrement_stock(line.product_id, line.quantity.value):
                    raise InsufficientStockError(
                        product_id=line.product_id,
                        product_name=line.product_name,
                        requested=line.quantity.value,
                    )

            uow.orders.add(order)
            uow.carts.replace_items(user_id, [])
            uow.commit()

        return order
