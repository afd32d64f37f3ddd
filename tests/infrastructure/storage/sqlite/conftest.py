"""Pytest fixtures for SQLite storage tests."""

from collections.abc import AsyncGenerator
from pathlib import Path
from unittest.mock import patch

import pytest

from stockbook.infrastructure.storage.sqlite.connection import KeyValueDatabase
from stockbook.infrastructure.storage.sqlite.kv_store import SQLiteKeyValueStore


@pytest.fixture
def temp_db_path(tmp_path: Path) -> Path:
    """Create a temporary database path."""
    return tmp_path / "test.db"


@pytest.fixture
async def database(temp_db_path: Path) -> AsyncGenerator[KeyValueDatabase, None]:
    """Key-value database over a temporary file, closed after the test."""
    db = KeyValueDatabase(temp_db_path, busy_timeout=5000)
    yield db
    await db.close()


@pytest.fixture
def sqlite_store(database: KeyValueDatabase) -> SQLiteKeyValueStore:
    """SQLite key-value store routed to the temporary database."""
    module = "stockbook.infrastructure.storage.sqlite.kv_store"
    with (
        patch(f"{module}.get_connection", side_effect=lambda: database.connection()),
        patch(f"{module}.get_transaction", side_effect=lambda: database.transaction()),
    ):
        yield SQLiteKeyValueStore(namespace="test")
