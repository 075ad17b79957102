"""SQLAlchemy-backed Unit of Work for Postdesk.

Each ``with`` block owns one `Connection` (and therefore one transaction)
shared by all four repositories. Nothing is persisted unless `commit()` is
called before the block exits.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from postdesk.adapters.repositories.sqlalchemy_adapters import (
    SqlAlchemyAccessTokenRepository,
    SqlAlchemyCategoryRepository,
    SqlAlchemyPostRepository,
    SqlAlchemyUserRepository,
)
from postdesk.interfaces.unit_of_work import AbstractUnitOfWork

if TYPE_CHECKING:
    from sqlalchemy.engine import Connection, Engine


class SqlAlchemyUnitOfWork(AbstractUnitOfWork):
    """SQLAlchemy-backed Unit of Work."""

    def __init__(self, engine: Engine):
        self.engine = engine
        self.connection: Connection

    def __enter__(self):
        self.connection = self.engine.connect()
        self.posts = SqlAlchemyPostRepository(self.connection)
        self.categories = SqlAlchemyCategoryRepository(self.connection)
        self.users = SqlAlchemyUserRepository(self.connection)
        self.tokens = SqlAlchemyAccessTokenRepository(self.connection)
        return super().__enter__()

    def __exit__(self, *args):
        super().__exit__(*args)
        self.connection.close()

    def commit(self):
        self.connection.commit()

    def rollback(self):
        self.connection.rollback()
