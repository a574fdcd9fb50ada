"""Database error helpers."""

from __future__ import annotations

from sqlalchemy.exc import IntegrityError

UNIQUE_VIOLATION_SQLSTATE = "23505"
_UNIQUE_VIOLATION_MARKERS = ("duplicate key", "unique constraint", "unique_violation")


def is_unique_violation(error: IntegrityError) -> bool:
    """Return True when the IntegrityError indicates a unique-constraint conflict.

    PostgreSQL drivers expose SQLSTATE 23505; SQLite only reports
    ``UNIQUE constraint failed`` in the message.
    """
    original = getattr(error, "orig", None)
    sqlstate = getattr(original, "sqlstate", None) or getattr(original, "pgcode", None)
    if sqlstate == UNIQUE_VIOLATION_SQLSTATE:
        return True
    message = str(original or error).lower()
    return any(marker in message for marker in _UNIQUE_VIOLATION_MARKERS)


__all__ = ["is_unique_violation"]
