"""SQLAlchemy-backed CategoryRepository."""

from __future__ import annotations

from collections.abc import Collection
from typing import TYPE_CHECKING

from sqlalchemy import insert, select
from sqlalchemy.exc import DBAPIError

from postdesk.adapters.db.schema import categories
from postdesk.domain.model import Category
from postdesk.interfaces.category_repository import CategoryRepository

from .errors import raise_storage_error

if TYPE_CHECKING:
    from sqlalchemy.engine import Connection


class SqlAlchemyCategoryRepository(CategoryRepository):
    """CategoryRepository over the ``categories`` table."""

    def __init__(self, connection: Connection):
        self.connection = connection

    def find_missing(self, category_ids: Collection[int]) -> set[int]:
        wanted = set(category_ids)
        if not wanted:
            return set()
        stmt = select(categories.c.id).where(categories.c.id.in_(wanted))
        found = set(self.connection.execute(stmt).scalars())
        return wanted - found

    def get_by_name(self, name: str) -> Category | None:
        row = self.connection.execute(
            select(categories).where(categories.c.name == name)
        ).one_or_none()
        return None if row is None else Category(id=row.id, name=row.name)

    def add(self, name: str) -> Category:
        try:
            new_id = self.connection.execute(
                insert(categories).values(name=name).returning(categories.c.id)
            ).scalar_one()
        except DBAPIError as e:
            raise_storage_error(e)
        return Category(id=int(new_id), name=name)

    def list_all(self) -> list[Category]:
        rows = self.connection.execute(select(categories).order_by(categories.c.id))
        return [Category(id=row.id, name=row.name) for row in rows]
