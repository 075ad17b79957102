"""Plain-text bearer token format.

A token handed to a client reads ``<token id>|<secret>``. The id locates the
stored record; only the SHA-256 hex digest of the secret is persisted.
"""

from __future__ import annotations

import hashlib
import hmac
import secrets

SEPARATOR = "|"
SECRET_BYTES = 40


def new_secret() -> str:
    """Return a fresh URL-safe random secret."""
    return secrets.token_urlsafe(SECRET_BYTES)


def hash_secret(secret: str) -> str:
    """Return the SHA-256 hex digest stored for `secret`."""
    return hashlib.sha256(secret.encode("utf-8")).hexdigest()


def secret_matches(secret: str, token_hash: str) -> bool:
    """Compare `secret` against a stored digest in constant time."""
    return hmac.compare_digest(hash_secret(secret), token_hash)


def format_token(token_id: str, secret: str) -> str:
    return f"{token_id}{SEPARATOR}{secret}"


def parse_token(token: str) -> tuple[str, str] | None:
    """Split a plain-text token into ``(token_id, secret)``.

    Returns:
        ``None`` if the token is not of the form ``<id>|<secret>``.
    """
    token_id, sep, secret = token.strip().partition(SEPARATOR)
    if not sep or not token_id or not secret:
        return None
    return token_id, secret
