"""Application service: List Orders use case (query)."""

from __future__ import annotations

from typing import Callable

from storefront.application.dto import OrderDTO, order_to_dto
from storefront.domain.repository.unit_of_work import UnitOfWork


class ListOrdersHandler:

    def __init__(self, uow_factory: Callable[[], UnitOfWork]) -> None:
        self._uow_factory = uow_factory

    def handle(self, user_id: str) -> list[OrderDTO]:
        with self._uow_factory() as uow:
            orders = uow.orders.list_by_user(user_id)
        return [order_to_dto(order) for order in orders]
