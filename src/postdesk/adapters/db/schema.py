"""Relational schema for POSTDESK.

Tables:

| Table            | Purpose                                      |
|------------------|----------------------------------------------|
| users            | registered principals and password hashes    |
| access_tokens    | hashed bearer tokens issued to users         |
| categories       | shared, ownerless post categories            |
| posts            | blog posts, one owner each                   |
| category_post    | many-to-many association posts <-> categories|

Constraints (enforced here):

| Constraint                              | Purpose                             |
|-----------------------------------------|-------------------------------------|
| UNIQUE(posts.slug)                      | slugs are unique system-wide        |
| UNIQUE(users.email)                     | one account per email               |
| UNIQUE(categories.name)                 | seeding is idempotent               |
| FK category_post -> posts CASCADE       | deleting a post drops its tags      |
| FK category_post -> categories RESTRICT | a linked category cannot be removed |

The schema is created by the Alembic migrations; `metadata.create_all()` is
only used by fast in-memory test fixtures.
"""

from __future__ import annotations

from sqlalchemy import (
    Column,
    ForeignKey,
    Identity,
    Index,
    String,
    Table,
    Text,
    UniqueConstraint,
)

from postdesk.adapters.db.metadata import metadata
from postdesk.adapters.db.sa_types import BIGINT_PK, UTCDateTime

__all__ = ["access_tokens", "categories", "category_post", "posts", "users"]

users = Table(
    "users",
    metadata,
    Column("id", BIGINT_PK, Identity(start=1), primary_key=True),
    Column("name", String(255), nullable=False),
    Column("email", String(255), nullable=False, comment="Stored lowercased."),
    Column("password_hash", String(255), nullable=False),
    Column("created_at", UTCDateTime(), nullable=False),
    Column("updated_at", UTCDateTime(), nullable=False),
    UniqueConstraint("email"),
    comment="Registered users.",
)

access_tokens = Table(
    "access_tokens",
    metadata,
    Column("id", String(26), primary_key=True, comment="ULID token id."),
    Column(
        "user_id",
        BIGINT_PK,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("name", String(255), nullable=False),
    Column(
        "token_hash",
        String(64),
        nullable=False,
        comment="SHA-256 hex digest of the token secret.",
    ),
    Column("created_at", UTCDateTime(), nullable=False),
    Column("last_used_at", UTCDateTime(), nullable=True),
    Index(None, "user_id"),
    comment="Bearer tokens. Only secret digests are stored.",
)

categories = Table(
    "categories",
    metadata,
    Column("id", BIGINT_PK, Identity(start=1), primary_key=True),
    Column("name", String(255), nullable=False),
    UniqueConstraint("name"),
    comment="Post categories. Shared by all users.",
)

posts = Table(
    "posts",
    metadata,
    Column("id", BIGINT_PK, Identity(start=1), primary_key=True),
    Column(
        "user_id",
        BIGINT_PK,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        comment="Owner. Assigned at creation, never changed.",
    ),
    Column("title", String(255), nullable=False),
    Column(
        "slug",
        String(255),
        nullable=False,
        comment="Derived from the title at creation, never recomputed.",
    ),
    Column("excerpt", Text, nullable=False),
    Column("content", Text, nullable=False),
    Column("created_at", UTCDateTime(), nullable=False),
    Column("updated_at", UTCDateTime(), nullable=False),
    UniqueConstraint("slug"),
    Index(None, "user_id", "created_at"),
    comment="Blog posts.",
)

category_post = Table(
    "category_post",
    metadata,
    Column(
        "post_id",
        BIGINT_PK,
        ForeignKey("posts.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "category_id",
        BIGINT_PK,
        ForeignKey("categories.id", ondelete="RESTRICT"),
        primary_key=True,
    ),
    Index(None, "category_id"),
    comment="Post <-> category association.",
)

#: Name of the unique constraint guarding post slugs.
POSTS_SLUG_CONSTRAINT = "uq_posts_slug"
