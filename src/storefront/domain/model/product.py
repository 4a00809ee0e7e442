"""Product aggregate.

Products live independently of carts and orders. Managers change prices and
stock levels; checkout only ever touches stock, through the store's
conditional decrement.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import MAX_COUNT, Money


@dataclass(frozen=True)
class ProductImage:
    """Reference to an uploaded image; storage itself happens elsewhere."""

    public_id: str
    url: str


@dataclass
class Product:
    """A product in the catalog.

    Invariants:
    - ``stock`` is never negative
    - ``name`` is never blank
    """

    id: str
    owner_id: str
    name: str
    price: Money
    stock: int = 0
    description: str = ""
    images: list[ProductImage] = field(default_factory=list)
    category_id: str | None = None

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValidationError("Product name is required")
        _check_stock(self.stock)

    @property
    def primary_image_url(self) -> str | None:
        return self.images[0].url if self.images else None

    def update_price(self, new_price: Money) -> None:
        """Change the product price.

        Existing orders are untouched: they hold their own price snapshot.
        """
        self.price = new_price

    def set_stock(self, quantity: int) -> None:
        """Overwrite the stock level (manager edit)."""
        _check_stock(quantity)
        self.stock = quantity

    def rename(self, name: str) -> None:
        if not name or not name.strip():
            raise ValidationError("Product name is required")
        self.name = name.strip()

    def has_stock_for(self, quantity: int) -> bool:
        return self.stock >= quantity


def _check_stock(quantity: int) -> None:
    if not isinstance(quantity, int) or isinstance(quantity, bool):
        raise ValidationError(
            f"Stock must be an integer, got {type(quantity).__name__}"
        )
    if quantity < 0:
        raise ValidationError(f"Stock cannot be negative, got {quantity}")
    if quantity > MAX_COUNT:
        raise ValidationError(f"Stock cannot exceed {MAX_COUNT}")
