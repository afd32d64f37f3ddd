"""Abstract interface for the persistent key-value store."""

from abc import ABC, abstractmethod
from typing import Any


class IKeyValueStore(ABC):
    """
    Durable storage of JSON-serializable values under string keys.

    Keys are independent: there is no atomicity across several keys.
    """

    @abstractmethod
    async def read(self, key: str, default: Any = None) -> Any:
        """
        Get the value stored under key.

        Returns default when nothing is stored or the stored data cannot
        be parsed. Never raises on malformed data.
        """
        pass

    @abstractmethod
    async def write(self, key: str, value: Any) -> None:
        """
        Store value under key, replacing any prior value.

        Raises:
            StoreWriteError: value is not serializable or the write failed.
        """
        pass

    @abstractmethod
    async def delete(self, key: str) -> None:
        """Remove key if present."""
        pass
