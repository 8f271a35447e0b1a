# ruff: noqa: INP001
"""Task service tests: validation, patch semantics, ownership, and reordering."""

from __future__ import annotations

from uuid import uuid4

import pytest
from fastapi import HTTPException

from taskboard.db.store import JsonDatastore
from taskboard.models import Board, Task
from taskboard.schemas.tasks import TaskCreate, TaskUpdate
from taskboard.schemas.users import UserRead
from taskboard.services import boards as board_service
from taskboard.services import tasks as task_service


def _user(name: str = "alice") -> UserRead:
    return UserRead(id=str(uuid4()), username=name)


@pytest.fixture
def alice() -> UserRead:
    return _user("alice")


@pytest.fixture
def board(store: JsonDatastore, alice: UserRead) -> Board:
    return board_service.create_board(store, alice, "Groceries")


def _create(store: JsonDatastore, caller: UserRead, board_id: str, **fields: object) -> Task:
    return task_service.create_task(
        store,
        caller,
        TaskCreate(board_id=board_id, title=fields.pop("title", "Buy milk"), **fields),
    )


def test_create_task_defaults_to_pending(
    store: JsonDatastore, alice: UserRead, board: Board
) -> None:
    task = _create(
        store,
        alice,
        board.id,
        title="  Buy milk ",
        description=" 2 litres ",
        due_date="2026-11-01T09:00:00.000Z",
        priority="high",
    )

    assert task.status == "pending"
    assert task.title == "Buy milk"
    assert task.description == "2 litres"
    assert task.due_date == "2026-11-01T09:00:00.000Z"
    assert task.priority == "high"
    assert store.load().tasks == [task]


def test_create_task_accepts_camel_case_payload(
    store: JsonDatastore, alice: UserRead, board: Board
) -> None:
    payload = TaskCreate.model_validate({"boardId": board.id, "title": "x", "dueDate": "2026-11-01"})

    task = task_service.create_task(store, alice, payload)

    assert task.board_id == board.id
    assert task.due_date == "2026-11-01"


@pytest.mark.parametrize(
    ("fields", "detail"),
    [
        ({"title": "  "}, "title is required"),
        ({"due_date": "not-a-date"}, "Invalid dueDate"),
        ({"priority": "urgent"}, "Invalid priority"),
    ],
)
def test_create_task_validation(
    store: JsonDatastore,
    alice: UserRead,
    board: Board,
    fields: dict[str, object],
    detail: str,
) -> None:
    with pytest.raises(HTTPException) as exc:
        _create(store, alice, board.id, **fields)

    assert exc.value.status_code == 400
    assert exc.value.detail == detail
    assert store.load().tasks == []


def test_create_task_board_checks(store: JsonDatastore, alice: UserRead, board: Board) -> None:
    with pytest.raises(HTTPException) as invalid:
        _create(store, alice, "not-a-uuid")
    with pytest.raises(HTTPException) as missing:
        _create(store, alice, str(uuid4()))
    with pytest.raises(HTTPException) as foreign:
        _create(store, _user("bob"), board.id)

    assert (invalid.value.status_code, invalid.value.detail) == (400, "Invalid board id")
    assert (missing.value.status_code, missing.value.detail) == (404, "Board not found")
    assert (foreign.value.status_code, foreign.value.detail) == (403, "Forbidden")


def test_empty_due_date_is_stored_as_absent(
    store: JsonDatastore, alice: UserRead, board: Board
) -> None:
    assert _create(store, alice, board.id, due_date="").due_date is None


def test_list_tasks_filters_by_board_and_status(
    store: JsonDatastore, alice: UserRead, board: Board
) -> None:
    other = board_service.create_board(store, alice, "Other")
    first = _create(store, alice, board.id, title="first")
    _create(store, alice, other.id, title="elsewhere")
    second = _create(store, alice, board.id, title="second")
    task_service.update_task(store, alice, second.id, TaskUpdate(status="completed"))

    assert [t.id for t in task_service.list_tasks(store, alice, board.id)] == [
        first.id,
        second.id,
    ]
    assert [t.id for t in task_service.list_tasks(store, alice, board.id, status="completed")] == [
        second.id,
    ]
    with pytest.raises(HTTPException) as exc:
        task_service.list_tasks(store, alice, board.id, status="done")
    assert exc.value.status_code == 400


def test_list_tasks_reads_one_snapshot(
    store: JsonDatastore,
    alice: UserRead,
    board: Board,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    task = _create(store, alice, board.id)
    loads: list[int] = []
    real_load = store.load

    def _counting_load():
        loads.append(1)
        return real_load()

    monkeypatch.setattr(store, "load", _counting_load)

    assert task_service.list_tasks(store, alice, board.id) == [task]
    assert len(loads) == 1


@pytest.mark.parametrize(
    "due_date",
    ["2026-11-01", "2026-11-01T09:00:00", "2026-11-01T09:00:00.000Z", "2026-11-01 09:00+02:00"],
)
def test_iso_due_dates_are_accepted(
    store: JsonDatastore, alice: UserRead, board: Board, due_date: str
) -> None:
    assert _create(store, alice, board.id, due_date=due_date).due_date == due_date


@pytest.mark.parametrize("due_date", ["2026/11/01", "Nov 1 2026", "not-a-date", "2026-13-01"])
def test_non_iso_due_dates_are_rejected(
    store: JsonDatastore, alice: UserRead, board: Board, due_date: str
) -> None:
    with pytest.raises(HTTPException) as exc:
        _create(store, alice, board.id, due_date=due_date)

    assert exc.value.detail == "Invalid dueDate"


def test_list_tasks_requires_owned_board(
    store: JsonDatastore, alice: UserRead, board: Board
) -> None:
    with pytest.raises(HTTPException) as foreign:
        task_service.list_tasks(store, _user("bob"), board.id)
    with pytest.raises(HTTPException) as missing:
        task_service.list_tasks(store, alice, str(uuid4()))

    assert foreign.value.status_code == 403
    assert missing.value.status_code == 404


def test_update_task_applies_only_present_fields(
    store: JsonDatastore, alice: UserRead, board: Board
) -> None:
    task = _create(store, alice, board.id, description="keep", due_date="2026-11-01")

    updated = task_service.update_task(store, alice, task.id, TaskUpdate(status="completed"))

    assert updated.status == "completed"
    assert updated.title == "Buy milk"
    assert updated.description == "keep"
    assert updated.due_date == "2026-11-01"


def test_status_transitions_both_ways(
    store: JsonDatastore, alice: UserRead, board: Board
) -> None:
    task = _create(store, alice, board.id)

    task_service.update_task(store, alice, task.id, TaskUpdate(status="completed"))
    reverted = task_service.update_task(store, alice, task.id, TaskUpdate(status="pending"))

    assert reverted.status == "pending"


def test_update_task_null_due_date_clears_but_null_description_is_ignored(
    store: JsonDatastore, alice: UserRead, board: Board
) -> None:
    task = _create(store, alice, board.id, description="notes", due_date="2026-11-01")

    patch = TaskUpdate.model_validate({"dueDate": None, "description": None})
    updated = task_service.update_task(store, alice, task.id, patch)

    assert updated.due_date is None
    assert updated.description == "notes"


def test_invalid_update_is_rejected_without_partial_write(
    store: JsonDatastore, alice: UserRead, board: Board
) -> None:
    task = _create(store, alice, board.id)

    with pytest.raises(HTTPException) as exc:
        task_service.update_task(
            store,
            alice,
            task.id,
            TaskUpdate(title="Renamed", status="done"),
        )

    assert exc.value.status_code == 400
    assert exc.value.detail == "Invalid status"
    assert store.load().tasks[0].title == "Buy milk"


def test_update_task_rejects_bad_due_date_and_blank_title(
    store: JsonDatastore, alice: UserRead, board: Board
) -> None:
    task = _create(store, alice, board.id)

    with pytest.raises(HTTPException) as due:
        task_service.update_task(store, alice, task.id, TaskUpdate(due_date="not-a-date"))
    with pytest.raises(HTTPException) as title:
        task_service.update_task(store, alice, task.id, TaskUpdate(title="   "))

    assert due.value.detail == "Invalid dueDate"
    assert title.value.detail == "title is required"


def test_update_and_delete_check_existence_then_ownership(
    store: JsonDatastore, alice: UserRead, board: Board
) -> None:
    task = _create(store, alice, board.id)
    bob = _user("bob")

    with pytest.raises(HTTPException) as missing:
        task_service.update_task(store, alice, str(uuid4()), TaskUpdate(title="x"))
    with pytest.raises(HTTPException) as foreign_update:
        task_service.update_task(store, bob, task.id, TaskUpdate(title="x"))
    with pytest.raises(HTTPException) as foreign_delete:
        task_service.delete_task(store, bob, task.id)

    assert (missing.value.status_code, missing.value.detail) == (404, "Task not found")
    assert foreign_update.value.status_code == 403
    assert foreign_delete.value.status_code == 403
    assert store.load().tasks == [task]


def test_delete_task_removes_it(store: JsonDatastore, alice: UserRead, board: Board) -> None:
    keep = _create(store, alice, board.id, title="keep")
    drop = _create(store, alice, board.id, title="drop")

    task_service.delete_task(store, alice, drop.id)

    assert store.load().tasks == [keep]


def test_reorder_subset_keeps_unlisted_block_in_order() -> None:
    board_x, board_y = str(uuid4()), str(uuid4())
    a = Task(board_id=board_x, title="a")
    b = Task(board_id=board_x, title="b")
    c = Task(board_id=board_y, title="c")
    d = Task(board_id=board_y, title="d")

    result = task_service.reorder_subset([a, c, b, d], [b.id, a.id])

    assert [t.title for t in result] == ["b", "a", "c", "d"]


def test_reorder_subset_skips_unknown_and_repeated_ids() -> None:
    a = Task(board_id=str(uuid4()), title="a")
    b = Task(board_id=a.board_id, title="b")

    result = task_service.reorder_subset([a, b], [str(uuid4()), b.id, b.id, a.id])

    assert [t.title for t in result] == ["b", "a"]


def test_reorder_tasks_persists_new_global_order(
    store: JsonDatastore, alice: UserRead, board: Board
) -> None:
    other = board_service.create_board(store, alice, "Other")
    a = _create(store, alice, board.id, title="a")
    b = _create(store, alice, board.id, title="b")
    c = _create(store, alice, other.id, title="c")
    d = _create(store, alice, other.id, title="d")

    task_service.reorder_tasks(store, alice, [b.id, a.id])

    assert [t.id for t in store.load().tasks] == [b.id, a.id, c.id, d.id]


def test_reorder_is_forbidden_when_any_touched_board_is_foreign(
    store: JsonDatastore, alice: UserRead, board: Board
) -> None:
    bob = _user("bob")
    bobs_board = board_service.create_board(store, bob, "Bob's")
    a = _create(store, alice, board.id, title="a")
    b = _create(store, alice, board.id, title="b")
    c = _create(store, bob, bobs_board.id, title="c")
    before = [t.id for t in store.load().tasks]

    with pytest.raises(HTTPException) as only_foreign:
        task_service.reorder_tasks(store, bob, [b.id, a.id])
    with pytest.raises(HTTPException) as mixed:
        task_service.reorder_tasks(store, alice, [c.id, b.id, a.id])

    assert only_foreign.value.status_code == 403
    assert mixed.value.status_code == 403
    assert [t.id for t in store.load().tasks] == before


@pytest.mark.parametrize(
    ("ids", "detail"),
    [
        (None, "ids array is required"),
        ([], "ids array is required"),
        (["not-a-uuid"], "Invalid task id in ids"),
    ],
)
def test_reorder_tasks_validates_ids(
    store: JsonDatastore, alice: UserRead, ids: list[str] | None, detail: str
) -> None:
    with pytest.raises(HTTPException) as exc:
        task_service.reorder_tasks(store, alice, ids)

    assert exc.value.status_code == 400
    assert exc.value.detail == detail
