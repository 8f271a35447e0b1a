"""Task list, create, update, delete, and reorder endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Query, status

from taskboard.api.deps import AUTH_DEP, BOARD_ID_DEP, STORE_DEP, TASK_ID_DEP
from taskboard.core.auth import AuthContext
from taskboard.db.store import JsonDatastore
from taskboard.schemas.common import MessageResponse
from taskboard.schemas.errors import ErrorResponse
from taskboard.schemas.tasks import TaskCreate, TaskList, TaskReorder, TaskResponse, TaskUpdate
from taskboard.services import tasks as task_service

router = APIRouter(prefix="/tasks", tags=["tasks"])
_ERROR_RESPONSES: dict[int | str, dict[str, object]] = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
    status.HTTP_401_UNAUTHORIZED: {"model": ErrorResponse},
    status.HTTP_403_FORBIDDEN: {"model": ErrorResponse},
    status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
}


@router.patch("/reorder", response_model=MessageResponse, responses=_ERROR_RESPONSES)
def reorder_tasks(
    payload: TaskReorder,
    auth: AuthContext = AUTH_DEP,
    store: JsonDatastore = STORE_DEP,
) -> MessageResponse:
    """Persist a new relative order for the listed tasks."""
    task_service.reorder_tasks(store, auth.user, payload.ids)
    return MessageResponse(message="Reordered")


@router.get("/{board_id}", response_model=TaskList, responses=_ERROR_RESPONSES)
def list_tasks(
    auth: AuthContext = AUTH_DEP,
    board_id: str = BOARD_ID_DEP,
    task_status: str | None = Query(default=None, alias="status"),
    store: JsonDatastore = STORE_DEP,
) -> TaskList:
    """List a board's tasks in their stored order, optionally filtered by status."""
    tasks = task_service.list_tasks(store, auth.user, board_id, status=task_status)
    return TaskList(tasks=tasks)


@router.post(
    "",
    response_model=TaskResponse,
    status_code=status.HTTP_201_CREATED,
    responses=_ERROR_RESPONSES,
)
def create_task(
    payload: TaskCreate,
    auth: AuthContext = AUTH_DEP,
    store: JsonDatastore = STORE_DEP,
) -> TaskResponse:
    """Create a pending task on one of the caller's boards."""
    return TaskResponse(task=task_service.create_task(store, auth.user, payload))


@router.put("/{task_id}", response_model=TaskResponse, responses=_ERROR_RESPONSES)
def update_task(
    payload: TaskUpdate,
    auth: AuthContext = AUTH_DEP,
    task_id: str = TASK_ID_DEP,
    store: JsonDatastore = STORE_DEP,
) -> TaskResponse:
    """Apply a partial update to a task."""
    return TaskResponse(task=task_service.update_task(store, auth.user, task_id, payload))


@router.delete("/{task_id}", response_model=MessageResponse, responses=_ERROR_RESPONSES)
def delete_task(
    auth: AuthContext = AUTH_DEP,
    task_id: str = TASK_ID_DEP,
    store: JsonDatastore = STORE_DEP,
) -> MessageResponse:
    task_service.delete_task(store, auth.user, task_id)
    return MessageResponse(message="Task deleted")
