"""Board create, rename, and delete operations scoped to the owning user."""

from __future__ import annotations

from typing import TYPE_CHECKING

from taskboard.core.logging import get_logger
from taskboard.models.boards import Board
from taskboard.services.ownership import require_owned_board
from taskboard.services.validation import bad_request

if TYPE_CHECKING:
    from taskboard.db.store import JsonDatastore
    from taskboard.schemas.users import UserRead

logger = get_logger(__name__)


def _clean_name(name: str | None) -> str:
    cleaned = (name or "").strip()
    if not cleaned:
        raise bad_request("Board name is required")
    return cleaned


def list_boards(store: JsonDatastore, caller: UserRead) -> list[Board]:
    """Return the caller's boards in store order."""
    return store.get_boards_by_user_id(caller.id)


def create_board(store: JsonDatastore, caller: UserRead, name: str | None) -> Board:
    """Append a new board owned by the caller."""
    board = Board(user_id=caller.id, name=_clean_name(name))
    with store.transaction() as doc:
        doc.boards.append(board)
    logger.info("boards.create board_id=%s user_id=%s", board.id, caller.id)
    return board


def rename_board(
    store: JsonDatastore,
    caller: UserRead,
    board_id: str,
    name: str | None,
) -> Board:
    """Rename one of the caller's boards."""
    cleaned = _clean_name(name)
    with store.transaction() as doc:
        board = require_owned_board(doc, caller, board_id)
        board.name = cleaned
    logger.info("boards.rename board_id=%s", board_id)
    return board


def delete_board(store: JsonDatastore, caller: UserRead, board_id: str) -> Board:
    """Remove a board and every task on it in one write."""
    with store.transaction() as doc:
        board = require_owned_board(doc, caller, board_id)
        doc.boards = [b for b in doc.boards if b.id != board_id]
        before = len(doc.tasks)
        doc.tasks = [t for t in doc.tasks if t.board_id != board_id]
        removed_tasks = before - len(doc.tasks)
    logger.info("boards.delete board_id=%s removed_tasks=%s", board_id, removed_tasks)
    return board
