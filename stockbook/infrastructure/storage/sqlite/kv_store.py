"""SQLite implementation of the key-value store."""

from datetime import UTC, datetime
from typing import Any

import aiosqlite

from stockbook.config import get_logger
from stockbook.core.exceptions import DatabaseError, StoreWriteError
from stockbook.core.interfaces.kv_store import IKeyValueStore
from stockbook.infrastructure.storage.envelope import (
    UnreadableValueError,
    decode,
    encode,
    namespaced,
)
from stockbook.infrastructure.storage.sqlite.connection import (
    get_connection,
    get_transaction,
)

logger = get_logger(__name__)


class SQLiteKeyValueStore(IKeyValueStore):
    """Key-value store over the kv_store table, one row per namespaced key."""

    def __init__(self, namespace: str = "stockbook") -> None:
        self.namespace = namespace

    async def read(self, key: str, default: Any = None) -> Any:
        """Get a value; corrupt or unreadable rows fall back to default."""
        full_key = namespaced(self.namespace, key)
        try:
            async with get_connection() as conn:
                cursor = await conn.execute(
                    "SELECT value FROM kv_store WHERE key = ?", (full_key,)
                )
                row = await cursor.fetchone()
        except aiosqlite.Error as e:
            raise DatabaseError("read", str(e)) from e

        if row is None:
            return default
        try:
            return decode(row["value"])
        except UnreadableValueError as e:
            logger.warning("store_value_corrupt", key=full_key, error=str(e))
            return default

    async def write(self, key: str, value: Any) -> None:
        """Upsert a value in its own transaction."""
        full_key = namespaced(self.namespace, key)
        try:
            text = encode(value)
        except (TypeError, ValueError) as e:
            raise StoreWriteError(key, str(e)) from e

        try:
            async with get_transaction() as conn:
                await conn.execute(
                    """
                    INSERT INTO kv_store (key, value, updated_at)
                    VALUES (?, ?, ?)
                    ON CONFLICT(key) DO UPDATE SET
                        value = excluded.value,
                        updated_at = excluded.updated_at
                    """,
                    (full_key, text, datetime.now(UTC).isoformat()),
                )
        except aiosqlite.Error as e:
            raise StoreWriteError(key, str(e)) from e
        logger.debug("store_value_written", key=full_key, size=len(text))

    async def delete(self, key: str) -> None:
        full_key = namespaced(self.namespace, key)
        try:
            async with get_transaction() as conn:
                await conn.execute("DELETE FROM kv_store WHERE key = ?", (full_key,))
        except aiosqlite.Error as e:
            raise DatabaseError("delete", str(e)) from e

