"""Registration, login, logout, and current-session endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Response, status

from taskboard.api.deps import AUTH_OPTIONAL_DEP, STORE_DEP
from taskboard.core.auth import AuthContext, clear_session_cookie, set_session_cookie
from taskboard.db.store import JsonDatastore
from taskboard.schemas.common import MessageResponse
from taskboard.schemas.errors import ErrorResponse
from taskboard.schemas.users import Credentials, CurrentUserResponse, LoginResponse
from taskboard.services.users import authenticate_user, register_user

router = APIRouter(prefix="/auth", tags=["auth"])


@router.get(
    "/me",
    response_model=CurrentUserResponse,
    summary="Current Session User",
    description="Return the identity carried by the session cookie, or `null` without a session.",
)
def get_current_user(auth: AuthContext | None = AUTH_OPTIONAL_DEP) -> CurrentUserResponse:
    """Return the session identity; never fails for a missing or expired session."""
    return CurrentUserResponse(user=auth.user if auth is not None else None)


@router.post(
    "/register",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_409_CONFLICT: {"model": ErrorResponse},
    },
)
def register(
    payload: Credentials,
    store: JsonDatastore = STORE_DEP,
) -> MessageResponse:
    """Create an account with a unique username."""
    register_user(store, payload)
    return MessageResponse(message="Registration successful")


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_401_UNAUTHORIZED: {"model": ErrorResponse},
    },
)
def login(
    payload: Credentials,
    response: Response,
    store: JsonDatastore = STORE_DEP,
) -> LoginResponse:
    """Check credentials and set the session cookie."""
    user = authenticate_user(store, payload)
    set_session_cookie(response, user)
    return LoginResponse(user=user)


@router.post("/logout", response_model=MessageResponse)
def logout(response: Response) -> MessageResponse:
    """Expire the session cookie."""
    clear_session_cookie(response)
    return MessageResponse(message="Logged out")
