"""Application service: Show Order use case (query)."""

from __future__ import annotations

from typing import Callable

from storefront.application.dto import OrderDTO, order_to_dto
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.repository.unit_of_work import UnitOfWork


class ShowOrderHandler:

    def __init__(self, uow_factory: Callable[[], UnitOfWork]) -> None:
        self._uow_factory = uow_factory

    def handle(self, order_id: int, user_id: str | None = None) -> OrderDTO:
        """Look up an order; with ``user_id``, only that user's orders are visible."""
        with self._uow_factory() as uow:
            order = uow.orders.get_by_id(order_id)
        if order is None or (user_id is not None and order.user_id != user_id):
            raise EntityNotFoundError(f"Order #{order_id} not found")
        return order_to_dto(order)
