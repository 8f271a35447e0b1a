"""Public schema exports shared by API route modules."""

from taskboard.schemas.boards import (
    BoardCreate,
    BoardDeleted,
    BoardList,
    BoardResponse,
    BoardUpdate,
)
from taskboard.schemas.common import MessageResponse
from taskboard.schemas.errors import ErrorResponse
from taskboard.schemas.health import HealthStatusResponse
from taskboard.schemas.tasks import TaskCreate, TaskList, TaskReorder, TaskResponse, TaskUpdate
from taskboard.schemas.users import Credentials, CurrentUserResponse, LoginResponse, UserRead

__all__ = [
    "BoardCreate",
    "BoardDeleted",
    "BoardList",
    "BoardResponse",
    "BoardUpdate",
    "Credentials",
    "CurrentUserResponse",
    "ErrorResponse",
    "HealthStatusResponse",
    "LoginResponse",
    "MessageResponse",
    "TaskCreate",
    "TaskList",
    "TaskReorder",
    "TaskResponse",
    "TaskUpdate",
    "UserRead",
]
