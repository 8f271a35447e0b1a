"""Account registration and credential checks."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import HTTPException, status

from taskboard.core.logging import get_logger
from taskboard.core.security import hash_password, verify_password
from taskboard.models.users import User
from taskboard.schemas.users import UserRead
from taskboard.services.validation import bad_request

if TYPE_CHECKING:
    from taskboard.db.store import JsonDatastore
    from taskboard.schemas.users import Credentials

logger = get_logger(__name__)
USERNAME_MIN_LENGTH = 3
PASSWORD_MIN_LENGTH = 6


def validate_credentials(payload: Credentials) -> tuple[str, str]:
    """Return the trimmed `(username, password)` pair or raise 400."""
    username = (payload.username or "").strip()
    password = (payload.password or "").strip()
    if not username or not password:
        raise bad_request("Username and password are required")
    if len(username) < USERNAME_MIN_LENGTH:
        raise bad_request(f"Username must be at least {USERNAME_MIN_LENGTH} characters")
    if len(password) < PASSWORD_MIN_LENGTH:
        raise bad_request(f"Password must be at least {PASSWORD_MIN_LENGTH} characters")
    return username, password


def _username_taken() -> HTTPException:
    return HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Username already exists")


def register_user(store: JsonDatastore, payload: Credentials) -> User:
    """Create a new account; usernames are unique."""
    username, password = validate_credentials(payload)
    if store.get_user_by_username(username) is not None:
        raise _username_taken()
    # Hash outside the write lock; bcrypt is the slow part.
    user = User(username=username, password_hash=hash_password(password))
    with store.transaction() as doc:
        if any(existing.username == username for existing in doc.users):
            raise _username_taken()
        doc.users.append(user)
    logger.info("users.register user_id=%s", user.id)
    return user


def authenticate_user(store: JsonDatastore, payload: Credentials) -> UserRead:
    """Return the identity for valid credentials or raise 401."""
    username, password = validate_credentials(payload)
    user = store.get_user_by_username(username)
    if user is None or not verify_password(password, user.password_hash):
        logger.info("users.login.rejected username_length=%s", len(username))
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")
    logger.info("users.login user_id=%s", user.id)
    return UserRead(id=user.id, username=user.username)
