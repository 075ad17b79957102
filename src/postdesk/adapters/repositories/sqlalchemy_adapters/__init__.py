"""SQLAlchemy repository adapters.

Each repository wraps the `Connection` owned by the surrounding unit of work
and never commits on its own.
"""

from .categories import SqlAlchemyCategoryRepository
from .identity import SqlAlchemyAccessTokenRepository, SqlAlchemyUserRepository
from .posts import SqlAlchemyPostRepository

__all__ = [
    "SqlAlchemyAccessTokenRepository",
    "SqlAlchemyCategoryRepository",
    "SqlAlchemyPostRepository",
    "SqlAlchemyUserRepository",
]
