"""Tests for database error classification."""

from sqlalchemy.exc import IntegrityError

from db.errors import is_unique_violation


class _DriverError(Exception):
    def __init__(self, message: str, sqlstate: str | None = None) -> None:
        super().__init__(message)
        self.sqlstate = sqlstate


def _integrity_error(orig: Exception) -> IntegrityError:
    return IntegrityError("INSERT INTO likes ...", {}, orig)


def test_postgres_sqlstate_is_unique_violation():
    assert is_unique_violation(_integrity_error(_DriverError("boom", sqlstate="23505")))


def test_sqlite_unique_message_is_unique_violation():
    error = _integrity_error(
        _DriverError("UNIQUE constraint failed: likes.post_id, likes.user_id")
    )
    assert is_unique_violation(error)


def test_duplicate_key_message_is_unique_violation():
    error = _integrity_error(
        _DriverError('duplicate key value violates unique constraint "ux_likes_post_user"')
    )
    assert is_unique_violation(error)


def test_foreign_key_failure_is_not_unique_violation():
    error = _integrity_error(_DriverError("FOREIGN KEY constraint failed", sqlstate="23503"))
    assert not is_unique_violation(error)
