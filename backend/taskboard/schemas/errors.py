"""Structured error payload schema used by API responses."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Error body returned for every rejected request."""

    detail: str | dict[str, object] | list[object] = Field(
        description="Short human-readable message, or a list of field errors on 400.",
        examples=["Board not found"],
    )
    error: str = Field(
        description="Message suitable for display; equals `detail` when that is a string.",
        examples=["Board not found"],
    )
    request_id: str | None = Field(
        default=None,
        description="Request correlation identifier injected by middleware.",
    )
