"""Interface for the bearer access-token store.

Tokens are handed to clients as ``<token id>|<secret>``. Only a SHA-256
digest of the secret is stored, so a leaked table does not leak usable tokens.
"""

from __future__ import annotations

import abc
from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True, slots=True)
class AccessTokenRecord:
    """Stored form of an access token."""

    id: str
    user_id: int
    name: str
    token_hash: str
    created_at: datetime
    last_used_at: datetime | None = None


class AccessTokenRepository(abc.ABC):
    """Bearer access tokens issued to users."""

    @abc.abstractmethod
    def add(self, token: AccessTokenRecord) -> None:
        """Store a newly issued token."""

    @abc.abstractmethod
    def get(self, token_id: str) -> AccessTokenRecord | None:
        """Return the token with `token_id`, or ``None``."""

    @abc.abstractmethod
    def touch(self, token_id: str, used_at: datetime) -> None:
        """Record that the token was used at `used_at`."""

    @abc.abstractmethod
    def delete(self, token_id: str) -> None:
        """Revoke the token. Unknown ids are ignored."""
