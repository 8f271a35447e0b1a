"""Shared base for persisted entities."""

from __future__ import annotations

from uuid import uuid4

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


def new_id() -> str:
    """Return a fresh UUIDv4 string identifier."""
    return str(uuid4())


class CamelModel(BaseModel):
    """Model whose JSON keys are camelCase while attributes stay snake_case."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class StoredModel(CamelModel):
    """Persisted record; keys this code does not know are kept and written back."""

    model_config = ConfigDict(extra="allow")
