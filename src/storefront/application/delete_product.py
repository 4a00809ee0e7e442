"""Application service: Delete Product use case.

Carts that still reference the product are left alone; checkout reports the
missing product when the owner of such a cart tries to buy it.
"""

from __future__ import annotations

from typing import Callable

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.user import Role
from storefront.domain.repository.unit_of_work import UnitOfWork
from storefront.domain.service.access import (
    can_edit_product,
    can_manage_products,
    require,
    require_capability,
)


class DeleteProductHandler:

    def __init__(self, uow_factory: Callable[[], UnitOfWork]) -> None:
        self._uow_factory = uow_factory

    def handle(self, actor_id: str, actor_role: Role, product_id: str) -> None:
        require_capability(can_manage_products, actor_role, "delete products")

        with self._uow_factory() as uow:
            product = uow.products.get_by_id(product_id)
            if product is None:
                raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
            require(
                can_edit_product(actor_role, actor_id, product.owner_id),
                f"delete product '{product_id}'",
            )
            uow.products.delete(product_id)
            uow.commit()
