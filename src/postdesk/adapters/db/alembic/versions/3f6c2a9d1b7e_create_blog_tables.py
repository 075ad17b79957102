"""Create users, access_tokens, categories, posts and category_post tables

Revision ID: 3f6c2a9d1b7e
Revises:
Create Date: 2026-10-19

"""

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

from postdesk.adapters.db.sa_types import BIGINT_PK, UTCDateTime

# pylint: disable=no-member

# revision identifiers, used by Alembic.
revision: str = "3f6c2a9d1b7e"
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "users",
        sa.Column("id", BIGINT_PK, sa.Identity(always=False, start=1), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column(
            "email", sa.String(length=255), nullable=False, comment="Stored lowercased."
        ),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("created_at", UTCDateTime(), nullable=False),
        sa.Column("updated_at", UTCDateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_users")),
        sa.UniqueConstraint("email", name=op.f("uq_users_email")),
        comment="Registered users.",
    )

    op.create_table(
        "access_tokens",
        sa.Column("id", sa.String(length=26), nullable=False, comment="ULID token id."),
        sa.Column("user_id", BIGINT_PK, nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column(
            "token_hash",
            sa.String(length=64),
            nullable=False,
            comment="SHA-256 hex digest of the token secret.",
        ),
        sa.Column("created_at", UTCDateTime(), nullable=False),
        sa.Column("last_used_at", UTCDateTime(), nullable=True),
        sa.ForeignKeyConstraint(
            ["user_id"],
            ["users.id"],
            name=op.f("fk_access_tokens_user_id_users"),
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_access_tokens")),
        comment="Bearer tokens. Only secret digests are stored.",
    )
    op.create_index(
        op.f("ix_access_tokens_user_id"), "access_tokens", ["user_id"], unique=False
    )

    op.create_table(
        "categories",
        sa.Column("id", BIGINT_PK, sa.Identity(always=False, start=1), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_categories")),
        sa.UniqueConstraint("name", name=op.f("uq_categories_name")),
        comment="Post categories. Shared by all users.",
    )

    op.create_table(
        "posts",
        sa.Column("id", BIGINT_PK, sa.Identity(always=False, start=1), nullable=False),
        sa.Column(
            "user_id",
            BIGINT_PK,
            nullable=False,
            comment="Owner. Assigned at creation, never changed.",
        ),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column(
            "slug",
            sa.String(length=255),
            nullable=False,
            comment="Derived from the title at creation, never recomputed.",
        ),
        sa.Column("excerpt", sa.Text(), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("created_at", UTCDateTime(), nullable=False),
        sa.Column("updated_at", UTCDateTime(), nullable=False),
        sa.ForeignKeyConstraint(
            ["user_id"],
            ["users.id"],
            name=op.f("fk_posts_user_id_users"),
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_posts")),
        sa.UniqueConstraint("slug", name=op.f("uq_posts_slug")),
        comment="Blog posts.",
    )
    op.create_index(
        op.f("ix_posts_user_id_created_at"),
        "posts",
        ["user_id", "created_at"],
        unique=False,
    )

    op.create_table(
        "category_post",
        sa.Column("post_id", BIGINT_PK, nullable=False),
        sa.Column("category_id", BIGINT_PK, nullable=False),
        sa.ForeignKeyConstraint(
            ["category_id"],
            ["categories.id"],
            name=op.f("fk_category_post_category_id_categories"),
            ondelete="RESTRICT",
        ),
        sa.ForeignKeyConstraint(
            ["post_id"],
            ["posts.id"],
            name=op.f("fk_category_post_post_id_posts"),
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("post_id", "category_id", name=op.f("pk_category_post")),
        comment="Post <-> category association.",
    )
    op.create_index(
        op.f("ix_category_post_category_id"),
        "category_post",
        ["category_id"],
        unique=False,
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index(op.f("ix_category_post_category_id"), table_name="category_post")
    op.drop_table("category_post")
    op.drop_index(op.f("ix_posts_user_id_created_at"), table_name="posts")
    op.drop_table("posts")
    op.drop_table("categories")
    op.drop_index(op.f("ix_access_tokens_user_id"), table_name="access_tokens")
    op.drop_table("access_tokens")
    op.drop_table("users")
