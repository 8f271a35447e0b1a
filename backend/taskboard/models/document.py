"""Top-level shape of the persisted JSON document."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, PrivateAttr

from taskboard.models.boards import Board
from taskboard.models.tasks import Task
from taskboard.models.users import User


class Document(BaseModel):
    """Single consistent snapshot of every user, board, and task."""

    users: list[User] = Field(default_factory=list)
    boards: list[Board] = Field(default_factory=list)
    tasks: list[Task] = Field(default_factory=list)

    # Stored records that failed validation, per collection. They are never
    # served but are written back unchanged after the valid records.
    _unreadable: dict[str, list[Any]] = PrivateAttr(default_factory=dict)

    def find_user(self, user_id: str) -> User | None:
        return next((user for user in self.users if user.id == user_id), None)

    def find_board(self, board_id: str) -> Board | None:
        return next((board for board in self.boards if board.id == board_id), None)

    def find_task(self, task_id: str) -> Task | None:
        return next((task for task in self.tasks if task.id == task_id), None)

    def keep_unreadable(self, collection: str, record: Any) -> None:
        self._unreadable.setdefault(collection, []).append(record)

    def unreadable(self, collection: str) -> list[Any]:
        return list(self._unreadable.get(collection, []))

    def to_storage(self) -> dict[str, Any]:
        """Return the JSON-ready document with unreadable records appended."""
        data = self.model_dump(mode="json", by_alias=True)
        for collection, records in self._unreadable.items():
            data[collection].extend(records)
        return data
