"""Schemas for board create/update/read API operations."""

from __future__ import annotations

from pydantic import BaseModel, Field

from taskboard.models.boards import Board


class BoardCreate(BaseModel):
    """Payload for creating a board."""

    name: str | None = Field(default=None, examples=["Groceries"])


class BoardUpdate(BaseModel):
    """Payload for renaming a board."""

    name: str | None = Field(default=None, examples=["Weekly groceries"])


class BoardResponse(BaseModel):
    board: Board


class BoardList(BaseModel):
    boards: list[Board]


class BoardDeleted(BaseModel):
    """Delete acknowledgement carrying the removed board."""

    message: str = Field(default="Board deleted")
    board: Board
