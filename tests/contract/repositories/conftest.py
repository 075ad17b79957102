"""Fixtures for repository contract tests.

Provided fixtures
-----------------
- **repos**: the four repositories of one unit of work, backed by the
  in-memory store, SQLite or Postgres. SQL backends share one uncommitted
  connection that is rolled back after the test.
- **user**: a registered principal to own posts and tokens.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

import pytest

from postdesk.adapters.repositories.in_memory_adapters import (
    InMemoryAccessTokenRepository,
    InMemoryBlogData,
    InMemoryCategoryRepository,
    InMemoryPostRepository,
    InMemoryUserRepository,
)
from postdesk.adapters.repositories.sqlalchemy_adapters import (
    SqlAlchemyAccessTokenRepository,
    SqlAlchemyCategoryRepository,
    SqlAlchemyPostRepository,
    SqlAlchemyUserRepository,
)
from postdesk.domain.model import Principal
from postdesk.interfaces.category_repository import CategoryRepository
from postdesk.interfaces.identity import AccessTokenRepository, UserRepository
from postdesk.interfaces.post_repository import PostRepository

# pylint: disable=redefined-outer-name


@dataclass
class Repositories:
    """The repositories a unit of work would expose."""

    posts: PostRepository
    categories: CategoryRepository
    users: UserRepository
    tokens: AccessTokenRepository


@pytest.fixture(params=["memory", "sqlite_engine_memory", "postgres_engine"])
def repos(request: pytest.FixtureRequest) -> Iterator[Repositories]:
    """Yield fresh repositories for the requested backend."""
    if request.param == "memory":
        data = InMemoryBlogData()
        yield Repositories(
            posts=InMemoryPostRepository(data),
            categories=InMemoryCategoryRepository(data),
            users=InMemoryUserRepository(data),
            tokens=InMemoryAccessTokenRepository(data),
        )
        return

    engine = request.getfixturevalue(request.param)
    with engine.connect() as conn:
        yield Repositories(
            posts=SqlAlchemyPostRepository(conn),
            categories=SqlAlchemyCategoryRepository(conn),
            users=SqlAlchemyUserRepository(conn),
            tokens=SqlAlchemyAccessTokenRepository(conn),
        )
        conn.rollback()


@pytest.fixture
def user(repos: Repositories, make_new_user) -> Principal:
    return repos.users.add(make_new_user(name="Ana", email="ana@example.com"))
