"""Unit of Work interface for Postdesk.

Defines the AbstractUnitOfWork contract: a context-managed unit of work
exposing the post, category, user and token repositories that share one
transaction, with abstract commit/rollback methods.
"""

from __future__ import annotations

import abc

from .category_repository import CategoryRepository
from .identity import AccessTokenRepository, UserRepository
from .post_repository import PostRepository


class AbstractUnitOfWork(abc.ABC):
    """Contract for a transactional unit of work."""

    posts: PostRepository
    categories: CategoryRepository
    users: UserRepository
    tokens: AccessTokenRepository

    def __enter__(self) -> AbstractUnitOfWork:
        """Enter the unit of work context and return the unit.

        Implementations may acquire transactional resources here.
        """
        return self

    def __exit__(self, *args):
        """Exit the unit of work context.

        Default behavior is to roll back on exit; anything not committed
        is discarded.
        """
        self.rollback()

    @abc.abstractmethod
    def commit(self):
        """Persist changes and finalize the transaction."""

    @abc.abstractmethod
    def rollback(self):
        """Revert changes and clean up transactional resources."""
