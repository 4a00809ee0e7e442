"""Domain-level exceptions.

Every failure a request can run into is a subclass of DomainException so the
CLI layer can catch them uniformly, while the subclasses let callers tell an
out-of-stock checkout apart from an empty cart or a storage conflict.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class PermissionDeniedError(DomainException):
    """The acting role lacks the capability the operation requires."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class CartNotFoundError(EntityNotFoundError):
    """The user has no cart yet."""

    def __init__(self, user_id: str) -> None:
        super().__init__(f"Cart not found for user '{user_id}'")
        self.user_id = user_id


class ProductNotFoundError(EntityNotFoundError):
    """A referenced product is no longer in the catalog."""

    def __init__(self, product_id: str) -> None:
        super().__init__(f"Product not found: '{product_id}'")
        self.product_id = product_id


class EmptyCartError(DomainException):
    """Checkout was attempted without a cart or with zero items."""

    def __init__(self, user_id: str) -> None:
        super().__init__("Cannot create order from an empty cart")
        self.user_id = user_id


class InsufficientStockError(DomainException):
    """Requested quantity exceeds the product's available stock.

    ``available`` is None when the shortage was discovered by the store's
    conditional decrement rather than by reading the stock level.
    """

    def __init__(
        self,
        product_id: str,
        product_name: str,
        requested: int,
        available: int | None = None,
    ) -> None:
        if available is None:
            detail = f"need {requested}"
        else:
            detail = f"need {requested}, have {available}"
        super().__init__(f"Not enough stock for {product_name} ({detail})")
        self.product_id = product_id
        self.product_name = product_name
        self.requested = requested
        self.available = available


class StorageConflictError(DomainException):
    """The store rejected the unit of work because of concurrent access.

    The attempt left no trace; the caller may retry it.
    """

    retryable = True
