"""User API schemas for credentials and session identity."""

from __future__ import annotations

from pydantic import BaseModel, Field


class Credentials(BaseModel):
    """Register/login payload; both fields are trimmed and checked by the service."""

    username: str | None = Field(default=None, examples=["alice"])
    password: str | None = Field(default=None, examples=["secret1"])


class UserRead(BaseModel):
    """Minimal identity carried by the session token."""

    id: str = Field(
        description="User UUID.",
        examples=["11111111-1111-1111-1111-111111111111"],
    )
    username: str = Field(examples=["alice"])


class CurrentUserResponse(BaseModel):
    """Current session identity, `null` when there is no valid session."""

    user: UserRead | None = None


class LoginResponse(BaseModel):
    """Identity of the user who just logged in."""

    user: UserRead
