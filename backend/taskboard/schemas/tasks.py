"""Schemas for task create/update/reorder API operations."""

from __future__ import annotations

from pydantic import BaseModel, Field

from taskboard.models.base import CamelModel
from taskboard.models.tasks import Task


class TaskCreate(CamelModel):
    """Payload for creating a task on a board."""

    board_id: str | None = Field(
        default=None,
        examples=["22222222-2222-2222-2222-222222222222"],
    )
    title: str | None = Field(default=None, examples=["Buy milk"])
    description: str | None = None
    due_date: str | None = Field(default=None, examples=["2026-11-01T09:00:00.000Z"])
    priority: str | None = Field(default=None, examples=["medium"])


class TaskUpdate(CamelModel):
    """Partial task update.

    Only fields present in the payload are applied. An explicit `null` clears
    `dueDate` and `priority`; `null` for the other fields is ignored.
    """

    title: str | None = None
    description: str | None = None
    status: str | None = Field(default=None, examples=["completed"])
    due_date: str | None = None
    priority: str | None = None


class TaskReorder(BaseModel):
    """New relative order for a subset of tasks."""

    ids: list[str] | None = Field(
        default=None,
        description="Task ids in their new order; tasks not listed keep their relative order.",
    )


class TaskResponse(BaseModel):
    task: Task


class TaskList(BaseModel):
    tasks: list[Task]
