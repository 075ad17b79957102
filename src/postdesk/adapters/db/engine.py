"""Database engine factory.

Use `make_engine` whenever an Engine is needed so every connection is
configured the same way. On SQLite it installs connection PRAGMAs; other
backends are used as-is.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import create_engine, event
from sqlalchemy.engine import URL, make_url

if TYPE_CHECKING:
    from sqlite3 import Connection as SQLiteConnection

    from sqlalchemy.engine import Engine

SQLITE_NAMES = {"sqlite", "sqlite+pysqlite"}


def is_sqlite(url: str | URL) -> bool:
    """Return True if the given SQLAlchemy URL or string points at SQLite."""
    u = make_url(str(url))
    return u.get_backend_name() in SQLITE_NAMES


def unicode_lower(value: str | None) -> str | None:
    """Lowercase `value` with Python's Unicode rules; ``NULL`` stays ``NULL``."""
    if value is None:
        return None
    return str(value).lower()


def make_engine(url: str | URL, *, echo: bool = False) -> Engine:
    """Create a SQLAlchemy Engine for the given URL.

    For SQLite the following PRAGMAs are applied on every new connection:
        - ``foreign_keys=ON`` (``category_post`` relies on ON DELETE CASCADE)
        - ``journal_mode=WAL`` (readers don't block the writer)
        - ``synchronous=NORMAL``
        - ``busy_timeout=5000`` (wait for a concurrent writer instead of failing)

    SQLite's built-in ``lower()`` only folds ASCII letters, so it is replaced
    on every connection by `unicode_lower`. Case-insensitive searches then
    agree with Postgres and with Python's `str.lower`.

    Args:
        url: Database connection URL (str or :class:`URL`).
        echo: If True, log SQL statements.

    Returns:
        Engine: Configured SQLAlchemy Engine.
    """
    engine = create_engine(url, echo=echo)

    if is_sqlite(url):

        @event.listens_for(engine, "connect")
        def _sqlite_pragmas(dbapi_conn: SQLiteConnection, conn_record):  # type: ignore #pylint: disable=W0613
            cur = dbapi_conn.cursor()
            cur.execute("PRAGMA foreign_keys=ON;")
            cur.execute("PRAGMA journal_mode=WAL;")
            cur.execute("PRAGMA synchronous=NORMAL;")
            cur.execute("PRAGMA busy_timeout=5000;")
            cur.close()
            dbapi_conn.create_function("lower", 1, unicode_lower, deterministic=True)

    return engine
