"""Tests for logging configuration and application startup."""

import logging
from collections.abc import Generator

import pytest
import structlog

from stockbook.application.services import bootstrap, reset_repository
from stockbook.config import configure_logging, get_logger, reset_settings


@pytest.fixture
def restore_structlog() -> Generator[None, None, None]:
    yield
    structlog.reset_defaults()


class TestConfigureLogging:
    """Tests for configure_logging()."""

    def test_quiets_aiosqlite(self, restore_structlog):
        configure_logging()
        assert logging.getLogger("aiosqlite").level == logging.WARNING

    def test_production_renders_json(self, monkeypatch, restore_structlog):
        monkeypatch.setenv("ENVIRONMENT", "production")
        reset_settings()
        configure_logging()

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_get_logger_binds(self, restore_structlog):
        configure_logging()
        logger = get_logger("stockbook.test")
        assert logger.bind(key="products") is not None


class TestBootstrap:
    """Tests for bootstrap()."""

    async def test_bootstrap_loads_shared_repository(self, monkeypatch, restore_structlog):
        monkeypatch.setenv("STORAGE_BACKEND", "memory")
        reset_settings()
        try:
            repository = await bootstrap()
            assert repository.products == ()
        finally:
            await reset_repository()
