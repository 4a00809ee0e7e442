"""Application service: Add Product use case."""

from __future__ import annotations

from typing import Callable

from storefront.domain.model.product import Product, ProductImage
from storefront.domain.model.user import Role
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.unit_of_work import UnitOfWork
from storefront.domain.service.access import can_manage_products, require_capability


class AddProductHandler:

    def __init__(self, uow_factory: Callable[[], UnitOfWork]) -> None:
        self._uow_factory = uow_factory

    def handle(
        self,
        actor_id: str,
        actor_role: Role,
        name: str,
        price: str,
        stock: int = 0,
        description: str = "",
        images: list[ProductImage] | None = None,
        category_id: str | None = None,
    ) -> Product:
        """Add a new product to the catalog, owned by the acting manager."""
        require_capability(can_manage_products, actor_role, "add products")

        with self._uow_factory() as uow:
            product = Product(
                id=uow.products.next_id(),
                owner_id=actor_id,
                name=(name or "").strip(),
                price=Money.of(price),
                stock=stock,
                description=description,
                images=list(images or []),
                category_id=category_id,
            )
            uow.products.save(product)
            uow.commit()
        return product
