"""SQLite storage implementations."""

from stockbook.infrastructure.storage.sqlite.connection import (
    KeyValueDatabase,
    close_database,
    get_connection,
    get_database,
    get_transaction,
)
from stockbook.infrastructure.storage.sqlite.kv_store import SQLiteKeyValueStore

__all__ = [
    # Connection
    "KeyValueDatabase",
    "get_database",
    "close_database",
    "get_connection",
    "get_transaction",
    # Store classes
    "SQLiteKeyValueStore",
]
