"""SQLAlchemy-backed implementations of the domain repositories.

All three share the caller's Session, so everything they do belongs to the
transaction of the enclosing SqlUnitOfWork.
"""

from __future__ import annotations

from datetime import timezone
from decimal import Decimal

from sqlalchemy import select, update
from sqlalchemy.orm import Session

from storefront.domain.model.cart import Cart, CartItem
from storefront.domain.model.order import Order, OrderLineItem, OrderStatus
from storefront.domain.model.product import Product, ProductImage
from storefront.domain.model.value_objects import CENTS, Money, Quantity
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.infrastructure.persistence.orm import (
    CartItemRow,
    CartRow,
    OrderItemRow,
    OrderRow,
    ProductRow,
)


def _to_cents(money: Money) -> int:
    return int(money.amount * 100)


def _from_cents(cents: int, currency: str = "USD") -> Money:
    return Money((Decimal(cents) / 100).quantize(CENTS), currency)


class SqlProductRepository(ProductRepository):

    def __init__(self, session: Session) -> None:
        self._session = session

    # --- ProductRepository interface ------------------------------------------

    def next_id(self) -> str:
        ids = self._session.scalars(select(ProductRow.id)).all()
        numeric = [int(i) for i in ids if i.isdigit()]
        return str(max(numeric) + 1) if numeric else "1"

    def get_by_id(self, product_id: str) -> Product | None:
        row = self._session.get(ProductRow, product_id, populate_existing=True)
        return self._to_domain(row) if row is not None else None

    def list_all(self) -> list[Product]:
        rows = self._session.scalars(select(ProductRow).order_by(ProductRow.id))
        return [self._to_domain(row) for row in rows]

    def list_by_owner(self, owner_id: str) -> list[Product]:
        rows = self._session.scalars(
            select(ProductRow)
            .where(ProductRow.owner_id == owner_id)
            .order_by(ProductRow.id)
        )
        return [self._to_domain(row) for row in rows]

    def save(self, product: Product) -> None:
        row = self._session.get(ProductRow, product.id)
        if row is None:
            row = ProductRow(id=product.id)
            self._session.add(row)
        row.owner_id = product.owner_id
        row.name = product.name
        row.description = product.description
        row.price_cents = _to_cents(product.price)
        row.currency = product.price.currency
        row.stock = product.stock
        row.images = [{"public_id": i.public_id, "url": i.url} for i in product.images]
        row.category_id = product.category_id
        self._session.flush()

    def delete(self, product_id: str) -> bool:
        row = self._session.get(ProductRow, product_id)
        if row is None:
            return False
        self._session.delete(row)
        self._session.flush()
        return True

    def decrement_stock(self, product_id: str, amount: int) -> bool:
        result = self._session.execute(
            update(ProductRow)
            .where(ProductRow.id == product_id, ProductRow.stock >= amount)
            .values(stock=ProductRow.stock - amount)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount == 1

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_domain(row: ProductRow) -> Product:
        return Product(
            id=row.id,
            owner_id=row.owner_id,
            name=row.name,
            price=_from_cents(row.price_cents, row.currency),
            stock=row.stock,
            description=row.description or "",
            images=[ProductImage(i["public_id"], i["url"]) for i in row.images or []],
            category_id=row.category_id,
        )


class SqlCartRepository(CartRepository):

    def __init__(self, session: Session) -> None:
        self._session = session

    def get_by_user(self, user_id: str) -> Cart | None:
        row = self._row_for(user_id)
        return self._to_domain(row) if row is not None else None

    def create(self, user_id: str) -> Cart:
        row = CartRow(user_id=user_id, items=[])
        self._session.add(row)
        self._session.flush()
        return self._to_domain(row)

    def replace_items(self, user_id: str, items: list[CartItem]) -> None:
        row = self._row_for(user_id)
        if row is None:
            row = CartRow(user_id=user_id)
            self._session.add(row)
        row.items = [
            CartItemRow(position=i, product_id=item.product_id, quantity=item.quantity.value)
            for i, item in enumerate(items)
        ]
        self._session.flush()

    def _row_for(self, user_id: str) -> CartRow | None:
        return self._session.scalars(
            select(CartRow).where(CartRow.user_id == user_id)
        ).one_or_none()

    @staticmethod
    def _to_domain(row: CartRow) -> Cart:
        return Cart(
            user_id=row.user_id,
            items=[
                CartItem(product_id=i.product_id, quantity=Quantity(i.quantity))
                for i in row.items
            ],
        )


class SqlOrderRepository(OrderRepository):

    def __init__(self, session: Session) -> None:
        self._session = session

    def add(self, order: Order) -> None:
        row = OrderRow(
            user_id=order.user_id,
            address=order.address,
            status=order.status.value,
            total_cents=_to_cents(order.total),
            currency=order.total.currency,
            created_at=order.created_at,
            items=[
                OrderItemRow(
                    position=i,
                    product_id=item.product_id,
                    product_name=item.product_name,
                    image_url=item.image_url,
                    quantity=item.quantity.value,
                    unit_price_cents=_to_cents(item.unit_price),
                )
                for i, item in enumerate(order.items)
            ],
        )
        self._session.add(row)
        self._session.flush()
        order.id = row.id

    def get_by_id(self, order_id: int) -> Order | None:
        row = self._session.get(OrderRow, order_id)
        return self._to_domain(row) if row is not None else None

    def list_by_user(self, user_id: str) -> list[Order]:
        rows = self._session.scalars(
            select(OrderRow)
            .where(OrderRow.user_id == user_id)
            .order_by(OrderRow.created_at.desc(), OrderRow.id.desc())
        )
        return [self._to_domain(row) for row in rows]

    def save(self, order: Order) -> None:
        row = self._session.get(OrderRow, order.id)
        if row is None:
            self.add(order)
            return
        row.status = order.status.value
        self._session.flush()

    @staticmethod
    def _to_domain(row: OrderRow) -> Order:
        created_at = row.created_at
        if created_at.tzinfo is None:
            # SQLite drops the offset; everything is written in UTC.
            created_at = created_at.replace(tzinfo=timezone.utc)
        return Order(
            id=row.id,
            user_id=row.user_id,
            items=tuple(
                OrderLineItem(
                    product_id=i.product_id,
                    product_name=i.product_name,
                    quantity=Quantity(i.quantity),
                    unit_price=_from_cents(i.unit_price_cents, row.currency),
                    image_url=i.image_url,
                )
                for i in row.items
            ),
            address=row.address,
            status=OrderStatus(row.status),
            created_at=created_at,
        )
