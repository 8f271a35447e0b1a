"""Task model representing board work items."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from taskboard.core.time import utcnow
from taskboard.models.base import StoredModel, new_id

RUNTIME_ANNOTATION_TYPES = (datetime,)

TASK_STATUS_PENDING = "pending"
TASK_STATUS_COMPLETED = "completed"
TASK_STATUSES = frozenset({TASK_STATUS_PENDING, TASK_STATUS_COMPLETED})
TASK_PRIORITIES = frozenset({"low", "medium", "high"})


class Task(StoredModel):
    """Board-scoped task; its position in the document's task list is its order."""

    id: str = Field(default_factory=new_id)
    board_id: str
    title: str
    description: str | None = None
    status: str = TASK_STATUS_PENDING
    priority: str | None = None
    # Stored as the client-supplied date string.
    due_date: str | None = None
    created_at: datetime = Field(default_factory=utcnow)
