"""Password hashing and signed session tokens."""

from __future__ import annotations

from datetime import timedelta

import bcrypt
from jose import JWTError, jwt
from pydantic import BaseModel, ValidationError

from taskboard.core.config import settings
from taskboard.core.time import utcnow

# bcrypt only reads the first 72 bytes of its input.
BCRYPT_MAX_PASSWORD_BYTES = 72


class SessionClaims(BaseModel):
    """Identity claims embedded in a session token."""

    id: str
    username: str


def _password_bytes(plaintext: str) -> bytes:
    return plaintext.encode("utf-8")[:BCRYPT_MAX_PASSWORD_BYTES]


def hash_password(plaintext: str) -> str:
    """Return a salted bcrypt hash of `plaintext`."""
    salt = bcrypt.gensalt(rounds=settings.bcrypt_rounds)
    return bcrypt.hashpw(_password_bytes(plaintext), salt).decode("utf-8")


def verify_password(plaintext: str, password_hash: str) -> bool:
    """Check `plaintext` against a stored bcrypt hash."""
    try:
        return bcrypt.checkpw(_password_bytes(plaintext), password_hash.encode("utf-8"))
    except ValueError:
        # Stored value is not a bcrypt hash.
        return False


def issue_token(claims: SessionClaims, ttl: timedelta | None = None) -> str:
    """Sign `claims` into a JWT that expires after `ttl` (session TTL by default)."""
    if ttl is None:
        ttl = timedelta(seconds=settings.session_ttl_seconds)
    now = utcnow()
    payload: dict[str, object] = {
        **claims.model_dump(),
        "iat": int(now.timestamp()),
        "exp": int((now + ttl).timestamp()),
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str) -> SessionClaims | None:
    """Return the token's claims, or `None` if it is malformed, expired, or forged."""
    try:
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except JWTError:
        return None
    try:
        return SessionClaims.model_validate(payload)
    except ValidationError:
        return None
