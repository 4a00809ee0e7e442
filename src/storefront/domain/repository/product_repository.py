"""Abstract repository for the Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations live in the infrastructure layer
(SQL) and in the test suite (in-memory fakes).
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def next_id(self) -> str:
        """Generate the next unique product ID."""

    @abstractmethod
    def get_by_id(self, product_id: str) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog."""

    @abstractmethod
    def list_by_owner(self, owner_id: str) -> list[Product]:
        """Return the products a shop manager owns."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist a new or updated product."""

    @abstractmethod
    def delete(self, product_id: str) -> bool:
        """Remove a product; returns False if it did not exist."""

    @abstractmethod
    def decrement_stock(self, product_id: str, amount: int) -> bool:
        """Atomically subtract ``amount`` from stock where ``stock >= amount``.

        Returns False, changing nothing, when the product is missing or holds
        less than ``amount``. This is the only way checkout touches stock.
        """
