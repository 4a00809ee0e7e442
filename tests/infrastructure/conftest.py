import pytest
from sqlalchemy.orm import sessionmaker

from storefront.domain.model.product import Product, ProductImage
from storefront.domain.model.value_objects import Money
from storefront.infrastructure.persistence.sql_unit_of_work import (
    SqlUnitOfWork,
    build_engine,
)


@pytest.fixture
def session_factory(tmp_path):
    engine = build_engine(f"sqlite:///{tmp_path / 'shop.db'}", lock_timeout=5.0)
    yield sessionmaker(bind=engine, expire_on_commit=False)
    engine.dispose()


@pytest.fixture
def uow_factory(session_factory):
    return lambda: SqlUnitOfWork(session_factory)


@pytest.fixture
def seeded(uow_factory):
    """Widget (id 1, stock 5, $10.00) and Gadget (id 2, stock 3, $2.50)."""
    with uow_factory() as uow:
        uow.products.save(
            Product(
                id="1", owner_id="m1", name="Widget", price=Money.of("10.00"), stock=5,
                images=[ProductImage("w1", "http://img/widget.png")],
            )
        )
        uow.products.save(
            Product(id="2", owner_id="m1", name="Gadget", price=Money.of("2.50"), stock=3)
        )
        uow.commit()
    return uow_factory
