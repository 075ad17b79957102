"""SQLAlchemy-backed PostRepository.

Posts are read together with their owner (joined from ``users``) and their
categories (from ``category_post``), so every read returns a complete `Post`.
Write failures are mapped onto the repository error taxonomy:

- a UNIQUE violation on ``posts.slug`` → `SlugAlreadyTakenError`
- any other DBAPI error → `StorageError`
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Collection, Iterable
from typing import TYPE_CHECKING

from sqlalchemy import delete, insert, or_, select, update
from sqlalchemy.exc import DBAPIError, IntegrityError

from postdesk.adapters.db.schema import (
    POSTS_SLUG_CONSTRAINT,
    categories,
    category_post,
    posts,
    users,
)
from postdesk.domain.model import Category, Post, Principal
from postdesk.interfaces.post_repository import (
    NewPost,
    PostChanges,
    PostRepository,
    SlugAlreadyTakenError,
)

from .errors import error_message, raise_storage_error

if TYPE_CHECKING:
    from sqlalchemy import Row, Select
    from sqlalchemy.engine import Connection

# SQLite reports "UNIQUE constraint failed: posts.slug", Postgres names the constraint.
SLUG_VIOLATION_MARKERS = ("posts.slug", POSTS_SLUG_CONSTRAINT)  # pragma: no mutate


class SqlAlchemyPostRepository(PostRepository):
    """PostRepository over the ``posts`` and ``category_post`` tables."""

    def __init__(self, connection: Connection):
        self.connection = connection

    # --- reads ---

    def get(self, post_id: int) -> Post | None:
        row = self.connection.execute(
            self._select_posts().where(posts.c.id == post_id)
        ).one_or_none()
        if row is None:
            return None
        return self._to_post(row, self._categories_for([post_id])[post_id])

    def slug_exists(self, slug: str) -> bool:
        stmt = select(posts.c.id).where(posts.c.slug == slug).limit(1)
        return self.connection.execute(stmt).first() is not None

    def list_by_owner(self, owner_id: int, search: str | None = None) -> list[Post]:
        stmt = self._select_posts().where(posts.c.user_id == owner_id)
        if search:
            stmt = stmt.where(
                or_(
                    posts.c.title.icontains(search, autoescape=True),
                    posts.c.content.icontains(search, autoescape=True),
                )
            )
        rows = self.connection.execute(
            stmt.order_by(posts.c.created_at, posts.c.id)
        ).all()
        by_post = self._categories_for(row.id for row in rows)
        return [self._to_post(row, by_post[row.id]) for row in rows]

    # --- writes ---

    def add(self, post: NewPost) -> int:
        stmt = (
            insert(posts)
            .values(
                user_id=post.owner_id,
                title=post.title,
                slug=post.slug,
                excerpt=post.excerpt,
                content=post.content,
                created_at=post.created_at,
                updated_at=post.updated_at,
            )
            .returning(posts.c.id)
        )
        try:
            return int(self.connection.execute(stmt).scalar_one())
        except IntegrityError as e:
            msg = error_message(e)
            if any(marker in msg for marker in SLUG_VIOLATION_MARKERS):
                raise SlugAlreadyTakenError(post.slug) from e
            raise_storage_error(e)
        except DBAPIError as e:
            raise_storage_error(e)

    def attach_categories(self, post_id: int, category_ids: Collection[int]) -> None:
        if not category_ids:
            return
        try:
            self.connection.execute(
                insert(category_post),
                [{"post_id": post_id, "category_id": cid} for cid in category_ids],
            )
        except DBAPIError as e:
            raise_storage_error(e)

    def replace_categories(self, post_id: int, category_ids: Collection[int]) -> None:
        try:
            self.connection.execute(
                delete(category_post).where(category_post.c.post_id == post_id)
            )
        except DBAPIError as e:
            raise_storage_error(e)
        self.attach_categories(post_id, category_ids)

    def update(self, post_id: int, changes: PostChanges) -> None:
        try:
            self.connection.execute(
                update(posts).where(posts.c.id == post_id).values(**changes.as_values())
            )
        except DBAPIError as e:
            raise_storage_error(e)

    def delete(self, post_id: int) -> None:
        try:
            # explicit so the association goes even where FKs are not enforced
            self.connection.execute(
                delete(category_post).where(category_post.c.post_id == post_id)
            )
            self.connection.execute(delete(posts).where(posts.c.id == post_id))
        except DBAPIError as e:
            raise_storage_error(e)

    # --- helpers ---

    @staticmethod
    def _select_posts() -> Select:
        return select(
            posts,
            users.c.name.label("owner_name"),
            users.c.email.label("owner_email"),
        ).join(users, users.c.id == posts.c.user_id)

    def _categories_for(self, post_ids: Iterable[int]) -> dict[int, list[Category]]:
        by_post: dict[int, list[Category]] = defaultdict(list)
        if not (ids := list(post_ids)):
            return by_post
        stmt = (
            select(category_post.c.post_id, categories.c.id, categories.c.name)
            .join(categories, categories.c.id == category_post.c.category_id)
            .where(category_post.c.post_id.in_(ids))
            .order_by(category_post.c.post_id, categories.c.id)
        )
        for row in self.connection.execute(stmt):
            by_post[row.post_id].append(Category(id=row.id, name=row.name))
        return by_post

    @staticmethod
    def _to_post(row: Row, post_categories: list[Category]) -> Post:
        return Post(
            id=row.id,
            title=row.title,
            slug=row.slug,
            excerpt=row.excerpt,
            content=row.content,
            owner=Principal(id=row.user_id, name=row.owner_name, email=row.owner_email),
            categories=tuple(post_categories),
            created_at=row.created_at,
            updated_at=row.updated_at,
        )
