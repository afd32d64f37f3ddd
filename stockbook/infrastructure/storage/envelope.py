"""
Versioned envelope for persisted values.

Every value is stored as JSON text of the form
{"schema_version": N, "data": <value>}. A bare JSON value without the
envelope is legacy data (version 0). Decoding migrates older versions up
to SCHEMA_VERSION and rejects newer ones.
"""

import json
from collections.abc import Callable
from typing import Any

SCHEMA_VERSION = 1

# version -> step that upgrades data from that version to the next
_MIGRATIONS: dict[int, Callable[[Any], Any]] = {
    0: lambda data: data,  # legacy bare value, same shape
}


class UnreadableValueError(ValueError):
    """Stored text cannot be turned back into a value."""


def namespaced(namespace: str, key: str) -> str:
    return f"{namespace}:{key}" if namespace else key


def encode(value: Any) -> str:
    """
    Serialize value inside a current-version envelope.

    Raises:
        TypeError: value is not JSON-serializable.
        ValueError: value contains NaN or infinity, or a circular reference.
    """
    return json.dumps(
        {"schema_version": SCHEMA_VERSION, "data": value},
        ensure_ascii=False,
        allow_nan=False,
    )


def decode(text: str) -> Any:
    """
    Parse stored text and migrate it to the current version.

    Raises:
        UnreadableValueError: text is not JSON or has an unsupported version.
    """
    try:
        payload = json.loads(text)
    except (TypeError, ValueError) as e:
        raise UnreadableValueError(f"invalid JSON: {e}") from e

    if isinstance(payload, dict) and payload.keys() == {"schema_version", "data"}:
        version = payload["schema_version"]
        if not isinstance(version, int) or isinstance(version, bool):
            raise UnreadableValueError(f"invalid schema_version: {version!r}")
        if version > SCHEMA_VERSION or version < 0:
            raise UnreadableValueError(f"unsupported schema_version: {version}")
        data = payload["data"]
    else:
        version, data = 0, payload

    while version < SCHEMA_VERSION:
        data = _MIGRATIONS[version](data)
        version += 1
    return data
