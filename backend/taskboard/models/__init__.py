"""Model exports for the persisted document."""

from taskboard.models.boards import Board
from taskboard.models.document import Document
from taskboard.models.tasks import Task
from taskboard.models.users import User

__all__ = [
    "Board",
    "Document",
    "Task",
    "User",
]
