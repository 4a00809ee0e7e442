"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Callable

from sqlalchemy.orm import Session, sessionmaker

from storefront.infrastructure.config import Settings
from storefront.infrastructure.persistence.sql_unit_of_work import (
    SqlUnitOfWork,
    build_engine,
)

_SQLITE_FILE_PREFIX = "sqlite:///"


@lru_cache(maxsize=None)
def session_factory(settings: Settings) -> sessionmaker[Session]:
    """One engine (and connection pool) per distinct settings value."""
    if settings.database_url.startswith(_SQLITE_FILE_PREFIX):
        db_path = Path(settings.database_url[len(_SQLITE_FILE_PREFIX):])
        db_path.parent.mkdir(parents=True, exist_ok=True)
    engine = build_engine(settings.database_url, settings.lock_timeout)
    return sessionmaker(bind=engine, expire_on_commit=False)


def unit_of_work_factory(settings: Settings | None = None) -> Callable[[], SqlUnitOfWork]:
    factory = session_factory(settings or Settings.from_env())
    return lambda: SqlUnitOfWork(factory)
