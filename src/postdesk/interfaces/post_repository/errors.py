"""Exceptions for post repository operations."""

from postdesk.interfaces.errors import RepositoryError


class PostRepositoryError(RepositoryError):
    """Base class for post repository errors."""


class SlugAlreadyTakenError(PostRepositoryError):
    """Conflict: another post claimed the slug between the check and the insert.

    Attributes:
        slug (str): The slug that could not be inserted.
    """

    def __init__(self, slug: str):
        super().__init__(f"Slug '{slug}' is already taken by another post.")
        self.slug = slug
