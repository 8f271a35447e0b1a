"""Board list, create, rename, and delete endpoints."""

from __future__ import annotations

from fastapi import APIRouter, status

from taskboard.api.deps import AUTH_DEP, BOARD_ID_DEP, STORE_DEP
from taskboard.core.auth import AuthContext
from taskboard.db.store import JsonDatastore
from taskboard.schemas.boards import (
    BoardCreate,
    BoardDeleted,
    BoardList,
    BoardResponse,
    BoardUpdate,
)
from taskboard.schemas.errors import ErrorResponse
from taskboard.services import boards as board_service

router = APIRouter(prefix="/boards", tags=["boards"])
_ERROR_RESPONSES: dict[int | str, dict[str, object]] = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
    status.HTTP_401_UNAUTHORIZED: {"model": ErrorResponse},
    status.HTTP_403_FORBIDDEN: {"model": ErrorResponse},
    status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
}


@router.get("", response_model=BoardList)
def list_boards(
    auth: AuthContext = AUTH_DEP,
    store: JsonDatastore = STORE_DEP,
) -> BoardList:
    """List the caller's boards."""
    return BoardList(boards=board_service.list_boards(store, auth.user))


@router.post(
    "",
    response_model=BoardResponse,
    status_code=status.HTTP_201_CREATED,
    responses=_ERROR_RESPONSES,
)
def create_board(
    payload: BoardCreate,
    auth: AuthContext = AUTH_DEP,
    store: JsonDatastore = STORE_DEP,
) -> BoardResponse:
    """Create a board owned by the caller."""
    board = board_service.create_board(store, auth.user, payload.name)
    return BoardResponse(board=board)


@router.put("/{board_id}", response_model=BoardResponse, responses=_ERROR_RESPONSES)
def rename_board(
    payload: BoardUpdate,
    auth: AuthContext = AUTH_DEP,
    board_id: str = BOARD_ID_DEP,
    store: JsonDatastore = STORE_DEP,
) -> BoardResponse:
    """Rename one of the caller's boards."""
    board = board_service.rename_board(store, auth.user, board_id, payload.name)
    return BoardResponse(board=board)


@router.delete("/{board_id}", response_model=BoardDeleted, responses=_ERROR_RESPONSES)
def delete_board(
    auth: AuthContext = AUTH_DEP,
    board_id: str = BOARD_ID_DEP,
    store: JsonDatastore = STORE_DEP,
) -> BoardDeleted:
    """Delete a board together with all of its tasks."""
    board = board_service.delete_board(store, auth.user, board_id)
    return BoardDeleted(board=board)
