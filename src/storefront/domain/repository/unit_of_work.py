"""Abstract unit of work spanning the product, cart and order stores.

Reads and writes made through ``products``, ``carts`` and ``orders`` belong
to one transaction. Leaving the ``with`` block always rolls back whatever was
not committed, so a handler that raises part-way through leaves no trace:

    with uow_factory() as uow:
        ...
        uow.commit()
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository


class UnitOfWork(ABC):

    products: ProductRepository
    carts: CartRepository
    orders: OrderRepository

    def __enter__(self) -> UnitOfWork:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.rollback()

    @abstractmethod
    def commit(self) -> None:
        """Make every write since the unit of work began durable."""

    @abstractmethod
    def rollback(self) -> None:
        """Discard uncommitted writes. A no-op after ``commit()``."""
