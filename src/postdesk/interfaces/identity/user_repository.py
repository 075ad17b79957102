"""Interface for the user store."""

from __future__ import annotations

import abc
from dataclasses import dataclass
from datetime import datetime

from postdesk.domain.model import Principal


@dataclass(frozen=True, slots=True)
class NewUser:
    """Write model for a user about to be registered."""

    name: str
    email: str
    password_hash: str
    created_at: datetime


@dataclass(frozen=True, slots=True)
class UserCredentials:
    """A principal together with its stored password hash."""

    principal: Principal
    password_hash: str


class UserRepository(abc.ABC):
    """Registered users."""

    @abc.abstractmethod
    def add(self, user: NewUser) -> Principal:
        """Insert a user and return its principal.

        Raises:
            EmailAlreadyRegisteredError: If the email is already registered.
        """

    @abc.abstractmethod
    def get(self, user_id: int) -> Principal | None:
        """Return the principal for `user_id`, or ``None``."""

    @abc.abstractmethod
    def email_exists(self, email: str) -> bool:
        """Return True if a user is registered with `email` (case-insensitive)."""

    @abc.abstractmethod
    def get_credentials(self, email: str) -> UserCredentials | None:
        """Return the principal and password hash for `email`, or ``None``."""
