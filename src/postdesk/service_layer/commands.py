"""Module defining Commands.

Every command that acts on behalf of a user carries the acting `Principal`
explicitly; nothing is read from ambient request state.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from postdesk.domain.model import Principal
from postdesk.domain.unsettable import UNSET, Unsettable

# pylint: disable=too-many-instance-attributes

#: Default category names seeded into a fresh database.
DEFAULT_CATEGORY_NAMES = ("noticias", "tecnología", "demo", "tutoriales", "eventos")


@dataclass(frozen=True)
class Command:
    """Base class for all commands."""


# ============================================================================
#                                 Posts
# ============================================================================


@dataclass(frozen=True)
class CreatePost(Command):
    """Create a post owned by `owner`.

    Field values are passed through as received so validation can report
    every problem (missing, wrong type, too long) at once.
    """

    owner: Principal
    title: Any
    excerpt: Any
    content: Any
    categories: Any


@dataclass(frozen=True)
class UpdatePost(Command):
    """Partially update a post. ``UNSET`` fields are left unchanged."""

    requester: Principal
    post_id: int
    title: Unsettable[Any] = UNSET
    excerpt: Unsettable[Any] = UNSET
    content: Unsettable[Any] = UNSET
    categories: Unsettable[Any] = UNSET


@dataclass(frozen=True)
class DeletePost(Command):
    """Delete a post owned by `requester`."""

    requester: Principal
    post_id: int


# ============================================================================
#                                Identity
# ============================================================================


@dataclass(frozen=True)
class RegisterUser(Command):
    """Register a new user account."""

    name: Any
    email: Any
    password: Any

    def __repr__(self) -> str:
        return f"RegisterUser(name={self.name!r}, email={self.email!r})"


@dataclass(frozen=True)
class IssueToken(Command):
    """Check credentials and issue a new bearer token (login)."""

    email: Any
    password: Any
    token_name: str = "api"

    def __repr__(self) -> str:
        # keep passwords out of logs
        return f"IssueToken(email={self.email!r}, token_name={self.token_name!r})"


@dataclass(frozen=True)
class RevokeToken(Command):
    """Revoke a bearer token (logout)."""

    token: str

    def __repr__(self) -> str:
        return "RevokeToken(token=<redacted>)"


# ============================================================================
#                               Categories
# ============================================================================


@dataclass(frozen=True)
class SeedCategories(Command):
    """Create any of `names` that do not exist yet."""

    names: Sequence[str] = DEFAULT_CATEGORY_NAMES
