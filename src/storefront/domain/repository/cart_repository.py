"""Abstract repository for the Cart aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.cart import Cart, CartItem


class CartRepository(ABC):

    @abstractmethod
    def get_by_user(self, user_id: str) -> Cart | None:
        """Return the user's cart, or None if they never had one."""

    @abstractmethod
    def create(self, user_id: str) -> Cart:
        """Create an empty cart. At most one cart exists per user."""

    @abstractmethod
    def replace_items(self, user_id: str, items: list[CartItem]) -> None:
        """Overwrite the cart's line items, keeping their order."""
