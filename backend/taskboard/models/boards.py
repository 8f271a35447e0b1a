"""Board model grouping a user's tasks."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from taskboard.core.time import utcnow
from taskboard.models.base import StoredModel, new_id

RUNTIME_ANNOTATION_TYPES = (datetime,)


class Board(StoredModel):
    """Named container of tasks owned by a single user."""

    id: str = Field(default_factory=new_id)
    user_id: str
    name: str
    created_at: datetime = Field(default_factory=utcnow)
