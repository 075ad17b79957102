"""JSON representations of read models."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from postdesk.domain.model import Category, Post, PostSummary, Principal

TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S.%fZ"


def timestamp(value: datetime) -> str:
    """Render a datetime as an ISO-8601 UTC string ending in ``Z``."""
    return value.astimezone(timezone.utc).strftime(TIMESTAMP_FORMAT)


def user_resource(principal: Principal) -> dict[str, Any]:
    return {"id": principal.id, "name": principal.name, "email": principal.email}


def category_resource(category: Category) -> dict[str, Any]:
    return {"id": category.id, "name": category.name}


def post_resource(post: Post) -> dict[str, Any]:
    """Full post: content, categories as objects and the owner as an object."""
    return {
        "id": post.id,
        "title": post.title,
        "slug": post.slug,
        "excerpt": post.excerpt,
        "content": post.content,
        "categories": [category_resource(c) for c in post.categories],
        "user": user_resource(post.owner),
        "created_at": timestamp(post.created_at),
        "updated_at": timestamp(post.updated_at),
    }


def post_summary_resource(summary: PostSummary) -> dict[str, Any]:
    """List item: category names and the owner's name only."""
    return {
        "id": summary.id,
        "title": summary.title,
        "slug": summary.slug,
        "excerpt": summary.excerpt,
        "categories": list(summary.categories),
        "user": summary.owner_name,
        "created_at": timestamp(summary.created_at),
    }
