"""Translation of SQLAlchemy errors into repository errors."""

from __future__ import annotations

from typing import NoReturn

from sqlalchemy.exc import DBAPIError

from postdesk.interfaces.errors import StorageError

EMPTY_STRING = ""  # pragma: no mutate


def error_message(error: DBAPIError) -> str:
    """Return the driver's message for `error`, falling back to SQLAlchemy's."""
    orig = error.orig
    return str(orig) if orig not in (None, EMPTY_STRING) else str(error)


def raise_storage_error(error: DBAPIError) -> NoReturn:
    """Re-raise any DBAPI failure as a `StorageError`, chained to the original."""
    raise StorageError(error_message(error)) from error
