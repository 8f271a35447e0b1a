"""Input checks shared by the board and task services."""

from __future__ import annotations

import re
from datetime import datetime

from fastapi import HTTPException, status

ID_PATTERN = re.compile(r"^[0-9a-fA-F-]{36}$")


def is_valid_id(value: object) -> bool:
    """Return True for 36-character UUID-formatted strings."""
    return isinstance(value, str) and ID_PATTERN.fullmatch(value) is not None


def is_valid_date(value: object) -> bool:
    """Return True for non-empty ISO 8601 date or datetime strings."""
    if not isinstance(value, str) or not value:
        return False
    try:
        datetime.fromisoformat(value)
    except ValueError:
        return False
    return True


def bad_request(detail: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


def require_valid_id(value: object, *, kind: str) -> str:
    """Return `value` if it is a well-formed id, else raise 400 `Invalid <kind> id`."""
    if not is_valid_id(value):
        raise bad_request(f"Invalid {kind} id")
    return str(value)
