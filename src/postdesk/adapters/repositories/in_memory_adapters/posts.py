"""In-memory PostRepository."""

from __future__ import annotations

from collections.abc import Collection
from dataclasses import replace

from postdesk.domain.model import Post, Principal
from postdesk.interfaces.post_repository import (
    NewPost,
    PostChanges,
    PostRepository,
    SlugAlreadyTakenError,
)

from .store import InMemoryBlogData, PostRow


class InMemoryPostRepository(PostRepository):
    """PostRepository backed by `InMemoryBlogData`."""

    def __init__(self, data: InMemoryBlogData) -> None:
        self._data = data

    def get(self, post_id: int) -> Post | None:
        row = self._data.posts.get(post_id)
        return None if row is None else self._to_post(row)

    def slug_exists(self, slug: str) -> bool:
        return any(row.slug == slug for row in self._data.posts.values())

    def add(self, post: NewPost) -> int:
        if self.slug_exists(post.slug):
            raise SlugAlreadyTakenError(post.slug)
        post_id = next(self._data.post_ids)
        self._data.posts[post_id] = PostRow(
            id=post_id,
            owner_id=post.owner_id,
            title=post.title,
            slug=post.slug,
            excerpt=post.excerpt,
            content=post.content,
            created_at=post.created_at,
            updated_at=post.updated_at,
        )
        self._data.category_links[post_id] = set()
        return post_id

    def attach_categories(self, post_id: int, category_ids: Collection[int]) -> None:
        self._data.category_links.setdefault(post_id, set()).update(category_ids)

    def replace_categories(self, post_id: int, category_ids: Collection[int]) -> None:
        self._data.category_links[post_id] = set(category_ids)

    def update(self, post_id: int, changes: PostChanges) -> None:
        if (row := self._data.posts.get(post_id)) is not None:
            self._data.posts[post_id] = replace(row, **changes.as_values())

    def delete(self, post_id: int) -> None:
        self._data.posts.pop(post_id, None)
        self._data.category_links.pop(post_id, None)

    def list_by_owner(self, owner_id: int, search: str | None = None) -> list[Post]:
        rows = [row for row in self._data.posts.values() if row.owner_id == owner_id]
        if search:
            term = search.lower()
            rows = [
                row
                for row in rows
                if term in row.title.lower() or term in row.content.lower()
            ]
        rows.sort(key=lambda row: (row.created_at, row.id))
        return [self._to_post(row) for row in rows]

    def _to_post(self, row: PostRow) -> Post:
        user = self._data.users[row.owner_id]
        linked = sorted(self._data.category_links.get(row.id, ()))
        return Post(
            id=row.id,
            title=row.title,
            slug=row.slug,
            excerpt=row.excerpt,
            content=row.content,
            owner=Principal(id=user.id, name=user.name, email=user.email),
            categories=tuple(self._data.categories[cid] for cid in linked),
            created_at=row.created_at,
            updated_at=row.updated_at,
        )
