"""Common reusable response schemas."""

from __future__ import annotations

from pydantic import BaseModel, Field


class MessageResponse(BaseModel):
    """Acknowledgement payload for operations that return no entity."""

    message: str = Field(examples=["Task deleted"])
