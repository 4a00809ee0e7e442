"""Runtime settings, read from the environment.

    SHOP_DATABASE_URL   SQLAlchemy URL (default: SQLite file in ./data)
    SHOP_LOCK_TIMEOUT   seconds a transaction may wait on a lock (default: 5)
    SHOP_LOG_LEVEL      standard logging level name (default: INFO)
    SHOP_LOG_JSON       "1"/"true" renders log events as JSON lines
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DATA_DIR = Path(__file__).resolve().parents[3] / "data"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    database_url: str
    lock_timeout: float = 5.0
    log_level: str = "INFO"
    log_json: bool = False

    @staticmethod
    def from_env(environ: Mapping[str, str] | None = None) -> Settings:
        env = os.environ if environ is None else environ
        return Settings(
            database_url=env.get(
                "SHOP_DATABASE_URL", f"sqlite:///{_DATA_DIR / 'storefront.db'}"
            ),
            lock_timeout=float(env.get("SHOP_LOCK_TIMEOUT", "5")),
            log_level=env.get("SHOP_LOG_LEVEL", "INFO").upper(),
            log_json=env.get("SHOP_LOG_JSON", "").strip().lower() in _TRUTHY,
        )
