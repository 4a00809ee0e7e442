"""Application service: Update Order Status use case.

The status is the only part of an order that changes after checkout.
Cancelling does not put stock back.
"""

from __future__ import annotations

from typing import Callable

import structlog

from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.order import OrderStatus
from storefront.domain.model.user import Role
from storefront.domain.repository.unit_of_work import UnitOfWork
from storefront.domain.service.access import can_manage_orders, require_capability

logger = structlog.get_logger(__name__)


class UpdateOrderStatusHandler:

    def __init__(self, uow_factory: Callable[[], UnitOfWork]) -> None:
        self._uow_factory = uow_factory

    def handle(self, actor_role: Role, order_id: int, status: str) -> None:
        require_capability(can_manage_orders, actor_role, "update order status")

        try:
            new_status = OrderStatus(status.strip().lower())
        except ValueError as exc:
            raise ValidationError(f"Unknown order status '{status}'") from exc

        with self._uow_factory() as uow:
            order = uow.orders.get_by_id(order_id)
            if order is None:
                raise EntityNotFoundError(f"Order #{order_id} not found")
            previous = order.status
            order.transition_to(new_status)
            uow.orders.save(order)
            uow.commit()

        logger.info(
            "Order status changed",
            order_id=order_id,
            from_status=previous.value,
            to_status=new_status.value,
        )
