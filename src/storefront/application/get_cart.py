"""Application service: Get Cart use case (get-or-create)."""

from __future__ import annotations

from typing import Callable

from storefront.application.dto import CartDTO, CartLineDTO
from storefront.domain.model.cart import Cart
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.repository.unit_of_work import UnitOfWork


class GetCartHandler:

    def __init__(self, uow_factory: Callable[[], UnitOfWork]) -> None:
        self._uow_factory = uow_factory

    def handle(self, user_id: str) -> CartDTO:
        """Return the user's cart, creating an empty one on first access.

        Calling this twice for a new user yields the same cart both times.
        """
        with self._uow_factory() as uow:
            cart = uow.carts.get_by_user(user_id)
            if cart is None:
                cart = uow.carts.create(user_id)
                uow.commit()
            return cart_to_dto(cart, uow.products)


def cart_to_dto(cart: Cart, products: ProductRepository) -> CartDTO:
    lines: list[CartLineDTO] = []
    for item in cart.items:
        product = products.get_by_id(item.product_id)
        lines.append(
            CartLineDTO(
                product_id=item.product_id,
                quantity=item.quantity.value,
                product_name=product.name if product else None,
                unit_price=str(product.price) if product else None,
                stock=product.stock if product else None,
            )
        )
    return CartDTO(user_id=cart.user_id, items=lines, item_count=cart.item_count)
