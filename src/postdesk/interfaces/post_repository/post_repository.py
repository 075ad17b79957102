"""Interface for storing and querying posts.

Defines the `PostRepository` abstraction plus the small write models it
accepts. Implementations resolve each post's owner and categories so reads
always return fully populated `Post` read models.
"""

from __future__ import annotations

import abc
from collections.abc import Collection
from dataclasses import dataclass
from datetime import datetime

from postdesk.domain.model import Post

# pylint: disable=too-many-instance-attributes


@dataclass(frozen=True, slots=True)
class NewPost:
    """Write model for a post about to be inserted."""

    owner_id: int
    title: str
    slug: str
    excerpt: str
    content: str
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True, slots=True)
class PostChanges:
    """Write model for an update. ``None`` means "leave unchanged"."""

    updated_at: datetime
    title: str | None = None
    excerpt: str | None = None
    content: str | None = None

    def as_values(self) -> dict[str, object]:
        """Return the column values to write, skipping unchanged fields."""
        values: dict[str, object] = {"updated_at": self.updated_at}
        for field in ("title", "excerpt", "content"):
            if (value := getattr(self, field)) is not None:
                values[field] = value
        return values


class PostRepository(abc.ABC):
    """Posts with their owner and category associations."""

    @abc.abstractmethod
    def get(self, post_id: int) -> Post | None:
        """Return the post with `post_id`, or ``None`` if it does not exist."""

    @abc.abstractmethod
    def slug_exists(self, slug: str) -> bool:
        """Return True if any stored post uses `slug`."""

    @abc.abstractmethod
    def add(self, post: NewPost) -> int:
        """Insert a post and return its new id.

        Raises:
            SlugAlreadyTakenError: If the slug is already used by another post.
                Callers should treat the surrounding unit of work as failed.
            StorageError: On any other storage failure.
        """

    @abc.abstractmethod
    def attach_categories(self, post_id: int, category_ids: Collection[int]) -> None:
        """Associate the post with every category in `category_ids`."""

    @abc.abstractmethod
    def replace_categories(self, post_id: int, category_ids: Collection[int]) -> None:
        """Replace all category associations of the post with `category_ids`."""

    @abc.abstractmethod
    def update(self, post_id: int, changes: PostChanges) -> None:
        """Overwrite the changed fields of the post. The slug is never touched."""

    @abc.abstractmethod
    def delete(self, post_id: int) -> None:
        """Remove the post and its category associations (not the categories)."""

    @abc.abstractmethod
    def list_by_owner(self, owner_id: int, search: str | None = None) -> list[Post]:
        """List the posts of one owner in creation order.

        Args:
            owner_id: Only posts owned by this user are returned.
            search: When given, keep only posts whose title or content contains
                it as a case-insensitive substring.

        Returns:
            The matching posts, oldest first (ties broken by id).
        """
