"""Tests for settings and logging setup."""

import json
import logging

import pytest
import structlog

from storefront.infrastructure.config import Settings
from storefront.infrastructure.logging import configure_logging


class TestSettings:

    def test_defaults(self):
        settings = Settings.from_env({})
        assert settings.database_url.startswith("sqlite:///")
        assert settings.database_url.endswith("storefront.db")
        assert settings.lock_timeout == 5.0
        assert settings.log_level == "INFO"
        assert settings.log_json is False

    def test_overrides(self):
        settings = Settings.from_env(
            {
                "SHOP_DATABASE_URL": "sqlite:///tmp/x.db",
                "SHOP_LOCK_TIMEOUT": "0.5",
                "SHOP_LOG_LEVEL": "debug",
                "SHOP_LOG_JSON": "true",
            }
        )
        assert settings == Settings(
            database_url="sqlite:///tmp/x.db",
            lock_timeout=0.5,
            log_level="DEBUG",
            log_json=True,
        )


class TestLogging:

    @pytest.fixture(autouse=True)
    def _reset_structlog(self):
        yield
        structlog.reset_defaults()

    def test_json_events_reach_stdlib_logging(self, caplog):
        caplog.set_level(logging.INFO)
        configure_logging(Settings(database_url="sqlite://", log_json=True))

        structlog.get_logger("storefront.test").info("Checkout completed", order_id=7)

        event = json.loads(caplog.records[-1].getMessage())
        assert event["event"] == "Checkout completed"
        assert event["order_id"] == 7
        assert event["level"] == "info"

    def test_level_filters_events(self, caplog):
        caplog.set_level(logging.DEBUG)
        configure_logging(Settings(database_url="sqlite://", log_level="WARNING"))

        structlog.get_logger("storefront.test").info("quiet")

        assert not [r for r in caplog.records if "quiet" in r.getMessage()]
