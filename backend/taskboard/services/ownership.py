"""Ownership checks for boards and the tasks they contain.

Lookups report a missing resource as 404 before ownership is checked, so a
caller can tell "not found" from "forbidden". A task's owner is the owner of
its board.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import HTTPException, status

if TYPE_CHECKING:
    from collections.abc import Iterable

    from taskboard.models.boards import Board
    from taskboard.models.document import Document
    from taskboard.models.tasks import Task
    from taskboard.schemas.users import UserRead


def forbidden() -> HTTPException:
    return HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Forbidden")


def authorize_board(caller: UserRead, board: Board | None) -> bool:
    """Return True iff `caller` owns `board`."""
    return board is not None and board.user_id == caller.id


def require_owned_board(doc: Document, caller: UserRead, board_id: str) -> Board:
    """Return the board or raise 404 when missing and 403 when owned by someone else."""
    board = doc.find_board(board_id)
    if board is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Board not found")
    if not authorize_board(caller, board):
        raise forbidden()
    return board


def require_owned_task(doc: Document, caller: UserRead, task_id: str) -> Task:
    """Return the task or raise 404 when missing and 403 unless its board is the caller's."""
    task = doc.find_task(task_id)
    if task is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Task not found")
    if not authorize_board(caller, doc.find_board(task.board_id)):
        raise forbidden()
    return task


def require_owned_boards(doc: Document, caller: UserRead, board_ids: Iterable[str]) -> None:
    """Raise 403 if any of `board_ids` is missing or not owned by `caller`."""
    for board_id in board_ids:
        if not authorize_board(caller, doc.find_board(board_id)):
            raise forbidden()
