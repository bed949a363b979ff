"""
HTTP exception utilities for common error patterns.
"""

from typing import TypeVar

from fastapi import HTTPException

T = TypeVar("T")


def require_deleted(rows: list[T], detail: str = "Nothing was deleted") -> list[T]:
    """
    Raise 404 if a delete returned no rows, otherwise return the rows.

    Usage:
        require_deleted(store.delete_user_rows(user_id), "User not found")
    """
    if not rows:
        raise HTTPException(status_code=404, detail=detail)
    return rows


def server_error(detail: str) -> HTTPException:
    """Build a 500 error whose detail is shown to the caller."""
    return HTTPException(status_code=500, detail=detail)
