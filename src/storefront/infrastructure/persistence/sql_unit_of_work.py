"""SQLAlchemy unit of work and engine setup.

One SqlUnitOfWork is one Session is one database transaction. On SQLite the
transaction is opened with ``BEGIN IMMEDIATE`` so concurrent units of work
are serialized by the database's write lock, and the busy timeout bounds how
long one waits for another. Lock and constraint failures leave the ``with``
block as StorageConflictError.
"""

from __future__ import annotations

import structlog
from sqlalchemy import Engine, create_engine, event
from sqlalchemy.exc import IntegrityError, OperationalError
from sqlalchemy.exc import TimeoutError as PoolTimeoutError
from sqlalchemy.orm import Session, sessionmaker

from storefront.domain.exceptions import StorageConflictError
from storefront.domain.repository.unit_of_work import UnitOfWork
from storefront.infrastructure.persistence.orm import Base
from storefront.infrastructure.persistence.sql_repositories import (
    SqlCartRepository,
    SqlOrderRepository,
    SqlProductRepository,
)

logger = structlog.get_logger(__name__)

CONFLICT_ERRORS = (OperationalError, IntegrityError, PoolTimeoutError)


def build_engine(database_url: str, lock_timeout: float = 5.0) -> Engine:
    """Create an engine and make sure the schema exists."""
    if database_url.startswith("sqlite"):
        engine = create_engine(
            database_url,
            connect_args={"timeout": lock_timeout, "check_same_thread": False},
        )
        _use_immediate_transactions(engine)
    else:
        engine = create_engine(database_url, pool_timeout=lock_timeout, pool_pre_ping=True)
    Base.metadata.create_all(engine)
    return engine


def _use_immediate_transactions(engine: Engine) -> None:
    # pysqlite defers BEGIN until the first write; take control of it so the
    # reads that validate stock run inside the same transaction as the writes.
    @event.listens_for(engine, "connect")
    def _on_connect(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None
        dbapi_connection.execute("PRAGMA foreign_keys=ON")

    @event.listens_for(engine, "begin")
    def _on_begin(conn):
        conn.exec_driver_sql("BEGIN IMMEDIATE")


class SqlUnitOfWork(UnitOfWork):

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory
        self._session: Session | None = None

    def __enter__(self) -> SqlUnitOfWork:
        self._session = self._session_factory()
        self.products = SqlProductRepository(self._session)
        self.carts = SqlCartRepository(self._session)
        self.orders = SqlOrderRepository(self._session)
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        try:
            super().__exit__(exc_type, exc, tb)
        finally:
            self._session.close()
            self._session = None

        if isinstance(exc, CONFLICT_ERRORS):
            logger.warning(
                "Unit of work aborted by the store",
                error=str(getattr(exc, "orig", None) or exc),
            )
            raise StorageConflictError(
                "The store rejected a concurrent change; please retry"
            ) from exc

    def commit(self) -> None:
        self._session.commit()

    def rollback(self) -> None:
        if self._session is not None:
            self._session.rollback()
