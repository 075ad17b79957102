"""POSTDESK Post Repository Interface Package"""

from .errors import PostRepositoryError, SlugAlreadyTakenError
from .post_repository import NewPost, PostChanges, PostRepository

__all__ = [
    "NewPost",
    "PostChanges",
    "PostRepository",
    "PostRepositoryError",
    "SlugAlreadyTakenError",
]
