"""Application service: Clear Cart use case."""

from __future__ import annotations

from typing import Callable

from storefront.domain.exceptions import CartNotFoundError
from storefront.domain.repository.unit_of_work import UnitOfWork


class ClearCartHandler:

    def __init__(self, uow_factory: Callable[[], UnitOfWork]) -> None:
        self._uow_factory = uow_factory

    def handle(self, user_id: str) -> None:
        with self._uow_factory() as uow:
            cart = uow.carts.get_by_user(user_id)
            if cart is None:
                raise CartNotFoundError(user_id)
            cart.clear()
            uow.carts.replace_items(user_id, cart.items)
            uow.commit()
