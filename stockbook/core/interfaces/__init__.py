"""Core interfaces (ports) for dependency injection."""

from stockbook.core.interfaces.kv_store import IKeyValueStore

__all__ = [
    # Storage interfaces
    "IKeyValueStore",
]
