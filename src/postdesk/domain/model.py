"""Read models for posts, categories and the authenticated principal."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta

# pylint: disable=too-many-instance-attributes

#: Largest id a 64-bit ``BIGINT`` key column can hold.
MAX_ID = 2**63 - 1


def is_storable_id(value: int) -> bool:
    """Return True if `value` fits the positive range of the id columns."""
    return 0 < value <= MAX_ID


@dataclass(frozen=True, slots=True)
class Principal:
    """The authenticated identity on whose behalf an operation runs."""

    id: int
    name: str
    email: str


@dataclass(frozen=True, slots=True)
class Category:
    """A category posts can be tagged with. Categories have no owner."""

    id: int
    name: str


@dataclass(frozen=True, slots=True)
class Post:
    """Full representation of a stored post.

    Conventions:
      - `slug` is assigned once at creation and never recomputed.
      - `owner` is the principal that created the post; it never changes.
      - `categories` are ordered by category id.
      - `created_at` and `updated_at` are timezone-aware UTC datetimes.
    """

    id: int
    title: str
    slug: str
    excerpt: str
    content: str
    owner: Principal
    categories: tuple[Category, ...]
    created_at: datetime
    updated_at: datetime

    def __post_init__(self) -> None:
        for name in ("created_at", "updated_at"):
            value: datetime = getattr(self, name)
            if value.tzinfo is None or value.utcoffset() != timedelta(0):
                raise ValueError(f"{name} must be timezone-aware UTC")

    def is_owned_by(self, principal: Principal) -> bool:
        """Return True if `principal` is the owner of this post."""
        return self.owner.id == principal.id

    def summarize(self) -> PostSummary:
        """Project the post onto its list-view summary."""
        return PostSummary(
            id=self.id,
            title=self.title,
            slug=self.slug,
            excerpt=self.excerpt,
            categories=tuple(category.name for category in self.categories),
            owner_name=self.owner.name,
            created_at=self.created_at,
        )


@dataclass(frozen=True, slots=True)
class PostSummary:
    """Reduced projection of a post for list views.

    The content body and the owner's email are left out.
    """

    id: int
    title: str
    slug: str
    excerpt: str
    categories: tuple[str, ...]
    owner_name: str
    created_at: datetime
