"""Exceptions for identity operations (users, credentials, access tokens)."""

from postdesk.interfaces.errors import RepositoryError


class IdentityError(Exception):
    """Base class for identity errors."""


class UnauthenticatedError(IdentityError):
    """Raised when a request carries no valid identity."""

    def __init__(self, message: str = "Unauthenticated.") -> None:
        super().__init__(message)


class InvalidCredentialsError(UnauthenticatedError):
    """Raised when an email/password pair does not match a user."""

    def __init__(self) -> None:
        super().__init__("These credentials do not match our records.")


class EmailAlreadyRegisteredError(RepositoryError):
    """Conflict: a user with this email already exists.

    Attributes:
        email (str): The email that could not be registered.
    """

    def __init__(self, email: str) -> None:
        super().__init__(f"A user with email '{email}' already exists.")
        self.email = email
