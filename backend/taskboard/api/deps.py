"""Reusable FastAPI dependencies for auth, storage, and path id checks.

Routes compose these instead of re-implementing session or id validation.
Ownership itself is enforced in the service layer, against the same loaded
document the service mutates.
"""

from __future__ import annotations

from fastapi import Depends

from taskboard.core.auth import get_auth_context, get_auth_context_optional
from taskboard.db.store import get_datastore
from taskboard.services.validation import require_valid_id

AUTH_DEP = Depends(get_auth_context)
AUTH_OPTIONAL_DEP = Depends(get_auth_context_optional)
STORE_DEP = Depends(get_datastore)


def valid_board_id(board_id: str) -> str:
    """Reject malformed board ids in the path with HTTP 400."""
    return require_valid_id(board_id, kind="board")


def valid_task_id(task_id: str) -> str:
    """Reject malformed task ids in the path with HTTP 400."""
    return require_valid_id(task_id, kind="task")


BOARD_ID_DEP = Depends(valid_board_id)
TASK_ID_DEP = Depends(valid_task_id)
