"""Key-value storage backends."""

from stockbook.config import StorageSettings, get_logger, get_settings
from stockbook.core.exceptions import ConfigurationError
from stockbook.core.interfaces.kv_store import IKeyValueStore
from stockbook.infrastructure.storage.memory_store import InMemoryKeyValueStore
from stockbook.infrastructure.storage.sqlite import SQLiteKeyValueStore

logger = get_logger(__name__)


def create_kv_store(storage: StorageSettings | None = None) -> IKeyValueStore:
    """
    Build the key-value store selected by the storage settings.

    Raises:
        ConfigurationError: Unknown backend.
    """
    storage = storage or get_settings().storage
    if storage.backend == "sqlite":
        store: IKeyValueStore = SQLiteKeyValueStore(namespace=storage.namespace)
    elif storage.backend == "memory":
        store = InMemoryKeyValueStore(namespace=storage.namespace)
    else:
        raise ConfigurationError(
            f"Unknown storage backend: {storage.backend}",
            code="UNKNOWN_STORAGE_BACKEND",
            details={"backend": storage.backend},
        )
    logger.info("kv_store_created", backend=storage.backend, namespace=storage.namespace)
    return store


__all__ = [
    "create_kv_store",
    "InMemoryKeyValueStore",
    "SQLiteKeyValueStore",
]
