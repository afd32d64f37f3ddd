"""Shared configuration for persisted domain entities."""

import uuid
from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


def new_id() -> str:
    """Generate an opaque unique identifier."""
    return str(uuid.uuid4())


def utc_now() -> datetime:
    return datetime.now(UTC)


class EntityModel(BaseModel):
    """
    Immutable entity base.

    Python attributes are snake_case; the persisted JSON uses camelCase
    aliases (purchasePrice, productName, ...). Instances are frozen, so
    changes go through model_copy(update=...).
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        str_strip_whitespace=True,
    )

    def to_record(self) -> dict:
        """Serialize to the persisted JSON-compatible shape."""
        return self.model_dump(mode="json", by_alias=True)
