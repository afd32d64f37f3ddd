"""In-memory key-value store."""

from typing import Any

from stockbook.config import get_logger
from stockbook.core.exceptions import StoreWriteError
from stockbook.core.interfaces.kv_store import IKeyValueStore
from stockbook.infrastructure.storage.envelope import (
    UnreadableValueError,
    decode,
    encode,
    namespaced,
)

logger = get_logger(__name__)


class InMemoryKeyValueStore(IKeyValueStore):
    """
    Process-local store holding serialized text.

    Values go through the same envelope as the SQLite store, so
    round-trips and corrupt data behave identically. Used for tests and
    ephemeral sessions.
    """

    def __init__(self, namespace: str = "stockbook") -> None:
        self.namespace = namespace
        self._data: dict[str, str] = {}

    async def read(self, key: str, default: Any = None) -> Any:
        text = self._data.get(namespaced(self.namespace, key))
        if text is None:
            return default
        try:
            return decode(text)
        except UnreadableValueError as e:
            logger.warning("store_value_corrupt", key=key, error=str(e))
            return default

    async def write(self, key: str, value: Any) -> None:
        try:
            text = encode(value)
        except (TypeError, ValueError) as e:
            raise StoreWriteError(key, str(e)) from e
        self._data[namespaced(self.namespace, key)] = text

    async def delete(self, key: str) -> None:
        self._data.pop(namespaced(self.namespace, key), None)

    def get_raw(self, key: str) -> str | None:
        """Stored text for key, as written."""
        return self._data.get(namespaced(self.namespace, key))

    def put_raw(self, key: str, text: str) -> None:
        """Store text as-is, bypassing the envelope."""
        self._data[namespaced(self.namespace, key)] = text
