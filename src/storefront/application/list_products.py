"""Application service: List Products use case (query)."""

from __future__ import annotations

from typing import Callable

from storefront.domain.model.product import Product
from storefront.domain.repository.unit_of_work import UnitOfWork


class ListProductsHandler:

    def __init__(self, uow_factory: Callable[[], UnitOfWork]) -> None:
        self._uow_factory = uow_factory

    def handle(self, owner_id: str | None = None) -> list[Product]:
        """The whole catalog, or only the products ``owner_id`` manages."""
        with self._uow_factory() as uow:
            if owner_id is None:
                return uow.products.list_all()
            return uow.products.list_by_owner(owner_id)
