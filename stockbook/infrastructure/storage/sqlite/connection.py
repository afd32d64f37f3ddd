"""
SQLite database holding the key-value table.

One process owns the shop data, so a single aiosqlite connection guarded
by a lock serves every read and write. The table layout is versioned
with PRAGMA user_version and upgraded step by step when the file opens;
the values inside it carry their own envelope version.
"""

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

import aiosqlite

from stockbook.config import get_logger, get_settings
from stockbook.core.exceptions import DatabaseError

logger = get_logger(__name__)

# Index i upgrades a database at user_version i to i + 1
SCHEMA_STEPS: tuple[str, ...] = (
    """
    CREATE TABLE IF NOT EXISTS kv_store (
        key TEXT PRIMARY KEY,
        value TEXT NOT NULL,
        updated_at TEXT NOT NULL
    );
    """,
)
LAYOUT_VERSION = len(SCHEMA_STEPS)


async def read_layout_version(conn: aiosqlite.Connection) -> int:
    cursor = await conn.execute("PRAGMA user_version")
    row = await cursor.fetchone()
    return int(row[0])


async def upgrade_layout(conn: aiosqlite.Connection) -> int:
    """
    Apply the pending schema steps.

    Returns:
        The number of steps applied.

    Raises:
        DatabaseError: The file was written by a newer layout.
    """
    current = await read_layout_version(conn)
    if current > LAYOUT_VERSION:
        raise DatabaseError(
            "open",
            f"layout version {current} is newer than supported {LAYOUT_VERSION}",
        )

    for version in range(current, LAYOUT_VERSION):
        await conn.executescript(SCHEMA_STEPS[version])
        # PRAGMA does not accept bound parameters
        await conn.execute(f"PRAGMA user_version={version + 1}")
        await conn.commit()
        logger.info("kv_layout_upgraded", version=version + 1)
    return LAYOUT_VERSION - current


class KeyValueDatabase:
    """Lazily opened, lock-guarded connection to one database file."""

    def __init__(self, db_path: Path, busy_timeout: int = 30000):
        self.db_path = db_path
        self.busy_timeout = busy_timeout
        self._conn: aiosqlite.Connection | None = None
        self._lock = asyncio.Lock()

    @property
    def is_open(self) -> bool:
        return self._conn is not None

    async def _open(self) -> aiosqlite.Connection:
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        conn = await aiosqlite.connect(self.db_path)
        try:
            conn.row_factory = aiosqlite.Row
            await conn.execute("PRAGMA journal_mode=WAL")
            await conn.execute(f"PRAGMA busy_timeout={self.busy_timeout}")
            await upgrade_layout(conn)
        except Exception:
            await conn.close()
            raise
        logger.info("kv_database_opened", db_path=str(self.db_path))
        return conn

    @asynccontextmanager
    async def connection(self) -> AsyncIterator[aiosqlite.Connection]:
        """Exclusive use of the connection, opening the file on first use."""
        async with self._lock:
            if self._conn is None:
                self._conn = await self._open()
            yield self._conn

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[aiosqlite.Connection]:
        """Exclusive use of the connection; commits on success, else rolls back."""
        async with self.connection() as conn:
            try:
                yield conn
                await conn.commit()
            except Exception:
                await conn.rollback()
                raise

    async def close(self) -> None:
        async with self._lock:
            if self._conn is None:
                return
            await self._conn.close()
            self._conn = None
            logger.info("kv_database_closed", db_path=str(self.db_path))


_database: KeyValueDatabase | None = None


def get_database() -> KeyValueDatabase:
    """Shared database built from the storage settings."""
    global _database
    if _database is None:
        storage = get_settings().storage
        _database = KeyValueDatabase(storage.db_path, busy_timeout=storage.busy_timeout)
    return _database


async def close_database() -> None:
    global _database
    if _database is not None:
        await _database.close()
        _database = None


@asynccontextmanager
async def get_connection() -> AsyncIterator[aiosqlite.Connection]:
    async with get_database().connection() as conn:
        yield conn


@asynccontextmanager
async def get_transaction() -> AsyncIterator[aiosqlite.Connection]:
    async with get_database().transaction() as conn:
        yield conn
