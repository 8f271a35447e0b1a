"""Session-cookie authentication and caller resolution."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from fastapi import Depends, HTTPException, Request, Response, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from taskboard.core.config import settings
from taskboard.core.logging import get_logger
from taskboard.core.security import SessionClaims, issue_token, verify_token
from taskboard.schemas.users import UserRead

logger = get_logger(__name__)
security = HTTPBearer(auto_error=False)
SECURITY_DEP = Depends(security)


@dataclass
class AuthContext:
    """Authenticated caller resolved from the session token."""

    actor_type: Literal["user"]
    user: UserRead


def resolve_caller(token: str | None) -> UserRead | None:
    """Return the identity embedded in `token`, or `None` when there is no valid session.

    The claims are trusted as-is; the user record is not re-read from the store.
    """
    if not token:
        return None
    claims = verify_token(token)
    if claims is None:
        return None
    return UserRead(id=claims.id, username=claims.username)


def _extract_token(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None,
) -> str | None:
    cookie = request.cookies.get(settings.session_cookie_name)
    if cookie:
        return cookie
    if credentials is not None and credentials.scheme.lower() == "bearer":
        return credentials.credentials.strip() or None
    return None


def get_auth_context_optional(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = SECURITY_DEP,
) -> AuthContext | None:
    """Resolve the caller if a valid session is present, otherwise `None`."""
    user = resolve_caller(_extract_token(request, credentials))
    if user is None:
        return None
    return AuthContext(actor_type="user", user=user)


def get_auth_context(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = SECURITY_DEP,
) -> AuthContext:
    """Resolve the caller or raise HTTP 401."""
    auth = get_auth_context_optional(request, credentials)
    if auth is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")
    return auth


def set_session_cookie(response: Response, user: UserRead) -> None:
    """Issue a session token for `user` and attach it as the session cookie."""
    token = issue_token(SessionClaims(id=user.id, username=user.username))
    response.set_cookie(
        settings.session_cookie_name,
        token,
        max_age=settings.session_ttl_seconds,
        path="/",
        secure=settings.session_cookie_secure,
        httponly=True,
        samesite="strict",
    )


def clear_session_cookie(response: Response) -> None:
    """Expire the session cookie immediately."""
    response.set_cookie(
        settings.session_cookie_name,
        "",
        max_age=0,
        path="/",
        secure=settings.session_cookie_secure,
        httponly=True,
        samesite="strict",
    )
