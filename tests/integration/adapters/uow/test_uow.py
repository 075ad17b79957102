"""Integration tests for the SQLAlchemy-backed Unit of Work adapter.

Verifies commit and rollback behavior of SqlAlchemyUnitOfWork and that its
repositories share one transaction.
"""

import pytest

from postdesk.adapters.unit_of_work import SqlAlchemyUnitOfWork


def test_commit_persists_across_units(sqlite_engine_memory, make_new_user):
    """Committed writes are visible to the next unit of work."""
    uow = SqlAlchemyUnitOfWork(sqlite_engine_memory)
    with uow:
        principal = uow.users.add(make_new_user())
        uow.commit()

    with uow:
        assert uow.users.get(principal.id) == principal


def test_exit_without_commit_discards(sqlite_engine_memory, make_new_user):
    """Anything not committed is rolled back when the block exits."""
    uow = SqlAlchemyUnitOfWork(sqlite_engine_memory)
    with uow:
        principal = uow.users.add(make_new_user())

    with uow:
        assert uow.users.get(principal.id) is None


def test_rolls_back_on_error(sqlite_engine_memory, make_new_user):
    """An exception inside the block discards the unit's writes."""

    class MyException(Exception):
        """Custom exception for testing."""

    uow = SqlAlchemyUnitOfWork(sqlite_engine_memory)
    with pytest.raises(MyException):
        with uow:
            uow.categories.add("noticias")
            raise MyException()

    with uow:
        assert uow.categories.list_all() == []


def test_repositories_share_the_transaction(
    sqlite_engine_memory, make_new_user, make_new_post
):
    """A post written through one repository sees rows from the others."""
    uow = SqlAlchemyUnitOfWork(sqlite_engine_memory)
    with uow:
        owner = uow.users.add(make_new_user())
        category = uow.categories.add("noticias")
        post_id = uow.posts.add(make_new_post(owner.id))
        uow.posts.attach_categories(post_id, [category.id])
        uow.commit()

    with uow:
        post = uow.posts.get(post_id)
    assert post.owner == owner
    assert post.categories == (category,)


def test_each_block_gets_a_new_connection(sqlite_engine_memory):
    """Re-entering the unit opens a fresh connection."""
    uow = SqlAlchemyUnitOfWork(sqlite_engine_memory)
    with uow:
        first = uow.connection
    with uow:
        second = uow.connection
    assert first is not second
    assert first.closed
