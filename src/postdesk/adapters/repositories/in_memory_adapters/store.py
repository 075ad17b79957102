"""In-memory shared data store for the in-memory repositories."""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from datetime import datetime

from postdesk.domain.model import Category
from postdesk.interfaces.identity import AccessTokenRecord

# pylint: disable=too-many-instance-attributes


@dataclass(slots=True)
class PostRow:
    """A stored post, as the ``posts`` table would hold it."""

    id: int
    owner_id: int
    title: str
    slug: str
    excerpt: str
    content: str
    created_at: datetime
    updated_at: datetime


@dataclass(slots=True)
class UserRow:
    """A stored user, as the ``users`` table would hold it."""

    id: int
    name: str
    email: str
    password_hash: str
    created_at: datetime


@dataclass(slots=True)
class InMemoryBlogData:
    """Shared backing store for the in-memory repositories.

    A single instance is passed to every in-memory repository of a unit of
    work so they resolve cross references (post owner, post categories)
    against the same data, just like tables in one database.
    """

    users: dict[int, UserRow] = field(default_factory=dict)
    tokens: dict[str, AccessTokenRecord] = field(default_factory=dict)
    categories: dict[int, Category] = field(default_factory=dict)
    posts: dict[int, PostRow] = field(default_factory=dict)

    # post id -> category ids
    category_links: dict[int, set[int]] = field(default_factory=dict)

    user_ids: itertools.count = field(default_factory=lambda: itertools.count(1))
    category_ids: itertools.count = field(default_factory=lambda: itertools.count(1))
    post_ids: itertools.count = field(default_factory=lambda: itertools.count(1))
