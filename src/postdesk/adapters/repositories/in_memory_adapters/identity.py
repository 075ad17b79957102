"""In-memory user and access-token repositories."""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime

from postdesk.domain.model import Principal
from postdesk.interfaces.identity import (
    AccessTokenRecord,
    AccessTokenRepository,
    EmailAlreadyRegisteredError,
    NewUser,
    UserCredentials,
    UserRepository,
)

from .store import InMemoryBlogData, UserRow


class InMemoryUserRepository(UserRepository):
    """UserRepository backed by `InMemoryBlogData`."""

    def __init__(self, data: InMemoryBlogData) -> None:
        self._data = data

    def add(self, user: NewUser) -> Principal:
        if self.email_exists(user.email):
            raise EmailAlreadyRegisteredError(user.email)
        row = UserRow(
            id=next(self._data.user_ids),
            name=user.name,
            email=user.email,
            password_hash=user.password_hash,
            created_at=user.created_at,
        )
        self._data.users[row.id] = row
        return Principal(id=row.id, name=row.name, email=row.email)

    def get(self, user_id: int) -> Principal | None:
        row = self._data.users.get(user_id)
        return None if row is None else Principal(row.id, row.name, row.email)

    def email_exists(self, email: str) -> bool:
        return self._find(email) is not None

    def get_credentials(self, email: str) -> UserCredentials | None:
        if (row := self._find(email)) is None:
            return None
        return UserCredentials(
            principal=Principal(row.id, row.name, row.email),
            password_hash=row.password_hash,
        )

    def _find(self, email: str) -> UserRow | None:
        wanted = email.lower()
        return next(
            (row for row in self._data.users.values() if row.email == wanted), None
        )


class InMemoryAccessTokenRepository(AccessTokenRepository):
    """AccessTokenRepository backed by `InMemoryBlogData`."""

    def __init__(self, data: InMemoryBlogData) -> None:
        self._data = data

    def add(self, token: AccessTokenRecord) -> None:
        self._data.tokens[token.id] = token

    def get(self, token_id: str) -> AccessTokenRecord | None:
        return self._data.tokens.get(token_id)

    def touch(self, token_id: str, used_at: datetime) -> None:
        if (token := self._data.tokens.get(token_id)) is not None:
            self._data.tokens[token_id] = replace(token, last_used_at=used_at)

    def delete(self, token_id: str) -> None:
        self._data.tokens.pop(token_id, None)
