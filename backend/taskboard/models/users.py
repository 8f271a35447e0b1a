"""User model for registered accounts."""

from __future__ import annotations

from pydantic import AliasChoices, Field

from taskboard.models.base import StoredModel, new_id


class User(StoredModel):
    """Registered account with a bcrypt password hash."""

    id: str = Field(default_factory=new_id)
    username: str
    # Older documents store the hash under `password`.
    password_hash: str = Field(
        validation_alias=AliasChoices("passwordHash", "password_hash", "password"),
    )
