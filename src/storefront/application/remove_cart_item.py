"""Application service: Remove Cart Item use case."""

from __future__ import annotations

from typing import Callable

from storefront.application.dto import CartDTO
from storefront.application.get_cart import cart_to_dto
from storefront.domain.exceptions import CartNotFoundError
from storefront.domain.repository.unit_of_work import UnitOfWork


class RemoveCartItemHandler:

    def __init__(self, uow_factory: Callable[[], UnitOfWork]) -> None:
        self._uow_factory = uow_factory

    def handle(self, user_id: str, product_id: str) -> CartDTO:
        """Remove a line if present; removing an absent product is a no-op."""
        with self._uow_factory() as uow:
            cart = uow.carts.get_by_user(user_id)
            if cart is None:
                raise CartNotFoundError(user_id)

            if cart.remove_item(product_id):
                uow.carts.replace_items(user_id, cart.items)
                uow.commit()
            return cart_to_dto(cart, uow.products)
