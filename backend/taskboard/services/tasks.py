"""Task CRUD, status changes, and ordering within the global task list.

Task order is the position in the document's single `tasks` list, shared by
all boards. Reordering a subset moves the listed tasks to the front in the
requested order and leaves every other task in its original relative order.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from taskboard.core.logging import get_logger
from taskboard.models.tasks import TASK_PRIORITIES, TASK_STATUSES, Task
from taskboard.services.ownership import (
    require_owned_board,
    require_owned_boards,
    require_owned_task,
)
from taskboard.services.validation import (
    bad_request,
    is_valid_date,
    is_valid_id,
    require_valid_id,
)

if TYPE_CHECKING:
    from taskboard.db.store import JsonDatastore
    from taskboard.schemas.tasks import TaskCreate, TaskUpdate
    from taskboard.schemas.users import UserRead

logger = get_logger(__name__)


def _clean_title(title: str | None) -> str:
    cleaned = (title or "").strip()
    if not cleaned:
        raise bad_request("title is required")
    return cleaned


def _clean_due_date(value: str | None) -> str | None:
    """Return a trimmed date string, `None` for empty input, or raise 400."""
    cleaned = (value or "").strip()
    if not cleaned:
        return None
    if not is_valid_date(cleaned):
        raise bad_request("Invalid dueDate")
    return cleaned


def _clean_priority(value: str | None) -> str | None:
    cleaned = (value or "").strip()
    if not cleaned:
        return None
    if cleaned not in TASK_PRIORITIES:
        raise bad_request("Invalid priority")
    return cleaned


def _clean_status(value: str) -> str:
    cleaned = value.strip()
    if cleaned not in TASK_STATUSES:
        raise bad_request("Invalid status")
    return cleaned


def list_tasks(
    store: JsonDatastore,
    caller: UserRead,
    board_id: str,
    status: str | None = None,
) -> list[Task]:
    """Return the tasks of an owned board in store order, optionally by status."""
    wanted = _clean_status(status) if status is not None else None
    doc = store.load()
    require_owned_board(doc, caller, board_id)
    tasks = [task for task in doc.tasks if task.board_id == board_id]
    if wanted is not None:
        tasks = [task for task in tasks if task.status == wanted]
    return tasks


def create_task(store: JsonDatastore, caller: UserRead, payload: TaskCreate) -> Task:
    """Append a pending task to one of the caller's boards."""
    board_id = require_valid_id((payload.board_id or "").strip(), kind="board")
    title = _clean_title(payload.title)
    description = payload.description.strip() if payload.description is not None else None
    due_date = _clean_due_date(payload.due_date)
    priority = _clean_priority(payload.priority)

    with store.transaction() as doc:
        require_owned_board(doc, caller, board_id)
        task = Task(
            board_id=board_id,
            title=title,
            description=description,
            due_date=due_date,
            priority=priority,
        )
        doc.tasks.append(task)
    logger.info("tasks.create task_id=%s board_id=%s", task.id, board_id)
    return task


def update_task(
    store: JsonDatastore,
    caller: UserRead,
    task_id: str,
    patch: TaskUpdate,
) -> Task:
    """Apply the fields present in `patch`; any invalid field rejects the whole update."""
    fields = patch.model_fields_set
    with store.transaction() as doc:
        task = require_owned_task(doc, caller, task_id)
        if patch.title is not None:
            task.title = _clean_title(patch.title)
        if patch.description is not None:
            task.description = patch.description.strip()
        if patch.status is not None:
            previous = task.status
            task.status = _clean_status(patch.status)
            if previous != task.status:
                logger.info(
                    "tasks.status task_id=%s from=%s to=%s",
                    task_id,
                    previous,
                    task.status,
                )
        if "due_date" in fields:
            task.due_date = _clean_due_date(patch.due_date)
        if "priority" in fields:
            task.priority = _clean_priority(patch.priority)
    return task


def delete_task(store: JsonDatastore, caller: UserRead, task_id: str) -> None:
    with store.transaction() as doc:
        require_owned_task(doc, caller, task_id)
        doc.tasks = [t for t in doc.tasks if t.id != task_id]
    logger.info("tasks.delete task_id=%s", task_id)


def reorder_subset(tasks: list[Task], ids: list[str]) -> list[Task]:
    """Return `tasks` with the tasks named in `ids` first, in `ids` order.

    Unknown ids are skipped and repeated ids are placed once. Tasks not named
    in `ids` follow in their original relative order.
    """
    by_id = {task.id: task for task in tasks}
    listed: list[Task] = []
    placed: set[str] = set()
    for task_id in ids:
        task = by_id.get(task_id)
        if task is None or task_id in placed:
            continue
        listed.append(task)
        placed.add(task_id)
    unlisted = [task for task in tasks if task.id not in placed]
    return listed + unlisted


def reorder_tasks(store: JsonDatastore, caller: UserRead, ids: list[str] | None) -> None:
    """Reorder a subset of tasks; every board they belong to must be the caller's."""
    if not ids:
        raise bad_request("ids array is required")
    if not all(is_valid_id(task_id) for task_id in ids):
        raise bad_request("Invalid task id in ids")

    with store.transaction() as doc:
        wanted = set(ids)
        touched_boards = {task.board_id for task in doc.tasks if task.id in wanted}
        require_owned_boards(doc, caller, touched_boards)
        doc.tasks = reorder_subset(doc.tasks, ids)
    logger.info("tasks.reorder count=%s boards=%s", len(ids), len(touched_boards))
