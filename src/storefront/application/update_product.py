"""Application service: Update Product use case."""

from __future__ import annotations

from typing import Callable

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.product import Product
from storefront.domain.model.user import Role
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.unit_of_work import UnitOfWork
from storefront.domain.service.access import (
    can_edit_product,
    can_manage_products,
    require,
    require_capability,
)


class UpdateProductHandler:

    def __init__(self, uow_factory: Callable[[], UnitOfWork]) -> None:
        self._uow_factory = uow_factory

    def handle(
        self,
        actor_id: str,
        actor_role: Role,
        product_id: str,
        price: str | None = None,
        stock: int | None = None,
        name: str | None = None,
    ) -> Product:
        """Edit a product's price, stock or name.

        This does NOT affect any existing orders; they captured a
        price snapshot at checkout.
        """
        require_capability(can_manage_products, actor_role, "edit products")

        with self._uow_factory() as uow:
            product = uow.products.get_by_id(product_id)
            if product is None:
                raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
            require(
                can_edit_product(actor_role, actor_id, product.owner_id),
                f"edit product '{product_id}'",
            )

            if price is not None:
                product.update_price(Money.of(price))
            if stock is not None:
                product.set_stock(stock)
            if name is not None:
                product.rename(name)

            uow.products.save(product)
            uow.commit()
        return product
