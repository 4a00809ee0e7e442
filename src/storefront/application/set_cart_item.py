"""Application service: Set Cart Item use case.

Adds a product to the cart or replaces its quantity. The stock check here
is advisory; checkout re-checks under the same transaction that decrements.
"""

from __future__ import annotations

from typing import Callable

from storefront.application.dto import CartDTO
from storefront.application.get_cart import cart_to_dto
from storefront.domain.exceptions import InsufficientStockError, ProductNotFoundError
from storefront.domain.model.value_objects import Quantity
from storefront.domain.repository.unit_of_work import UnitOfWork


class SetCartItemHandler:

    def __init__(self, uow_factory: Callable[[], UnitOfWork]) -> None:
        self._uow_factory = uow_factory

    def handle(self, user_id: str, product_id: str, quantity: int) -> CartDTO:
        qty = Quantity(quantity)  # rejects < 1 before touching the store

        with self._uow_factory() as uow:
            product = uow.products.get_by_id(product_id)
            if product is None:
                raise ProductNotFoundError(product_id)
            if not product.has_stock_for(qty.value):
                raise InsufficientStockError(
                    product_id=product.id,
                    product_name=product.name,
                    requested=qty.value,
                    available=product.stock,
                )

            cart = uow.carts.get_by_user(user_id)
            if cart is None:
                cart = uow.carts.create(user_id)

            cart.set_item(product.id, qty)
            uow.carts.replace_items(user_id, cart.items)
            uow.commit()
            return cart_to_dto(cart, uow.products)
