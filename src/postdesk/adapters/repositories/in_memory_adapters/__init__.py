"""In-memory repository adapters.

All repositories share one `InMemoryBlogData` so they see each other's
writes. There is no transaction support: writes are visible immediately.
"""

from .categories import InMemoryCategoryRepository
from .identity import InMemoryAccessTokenRepository, InMemoryUserRepository
from .posts import InMemoryPostRepository
from .store import InMemoryBlogData

__all__ = [
    "InMemoryAccessTokenRepository",
    "InMemoryBlogData",
    "InMemoryCategoryRepository",
    "InMemoryPostRepository",
    "InMemoryUserRepository",
]
