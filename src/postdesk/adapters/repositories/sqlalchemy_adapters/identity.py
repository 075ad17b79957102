"""SQLAlchemy-backed user and access-token repositories."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import delete, insert, select, update
from sqlalchemy.exc import DBAPIError, IntegrityError

from postdesk.adapters.db.schema import access_tokens, users
from postdesk.domain.model import Principal
from postdesk.interfaces.identity import (
    AccessTokenRecord,
    AccessTokenRepository,
    EmailAlreadyRegisteredError,
    NewUser,
    UserCredentials,
    UserRepository,
)

from .errors import error_message, raise_storage_error

if TYPE_CHECKING:
    from sqlalchemy.engine import Connection

EMAIL_VIOLATION_MARKERS = ("users.email", "uq_users_email")  # pragma: no mutate


class SqlAlchemyUserRepository(UserRepository):
    """UserRepository over the ``users`` table."""

    def __init__(self, connection: Connection):
        self.connection = connection

    def add(self, user: NewUser) -> Principal:
        stmt = (
            insert(users)
            .values(
                name=user.name,
                email=user.email,
                password_hash=user.password_hash,
                created_at=user.created_at,
                updated_at=user.created_at,
            )
            .returning(users.c.id)
        )
        try:
            new_id = self.connection.execute(stmt).scalar_one()
        except IntegrityError as e:
            if any(marker in error_message(e) for marker in EMAIL_VIOLATION_MARKERS):
                raise EmailAlreadyRegisteredError(user.email) from e
            raise_storage_error(e)
        except DBAPIError as e:
            raise_storage_error(e)
        return Principal(id=int(new_id), name=user.name, email=user.email)

    def get(self, user_id: int) -> Principal | None:
        row = self.connection.execute(
            select(users.c.id, users.c.name, users.c.email).where(users.c.id == user_id)
        ).one_or_none()
        return None if row is None else Principal(row.id, row.name, row.email)

    def email_exists(self, email: str) -> bool:
        stmt = select(users.c.id).where(users.c.email == email.lower()).limit(1)
        return self.connection.execute(stmt).first() is not None

    def get_credentials(self, email: str) -> UserCredentials | None:
        row = self.connection.execute(
            select(users).where(users.c.email == email.lower())
        ).one_or_none()
        if row is None:
            return None
        return UserCredentials(
            principal=Principal(row.id, row.name, row.email),
            password_hash=row.password_hash,
        )


class SqlAlchemyAccessTokenRepository(AccessTokenRepository):
    """AccessTokenRepository over the ``access_tokens`` table."""

    def __init__(self, connection: Connection):
        self.connection = connection

    def add(self, token: AccessTokenRecord) -> None:
        try:
            self.connection.execute(
                insert(access_tokens).values(
                    id=token.id,
                    user_id=token.user_id,
                    name=token.name,
                    token_hash=token.token_hash,
                    created_at=token.created_at,
                    last_used_at=token.last_used_at,
                )
            )
        except DBAPIError as e:
            raise_storage_error(e)

    def get(self, token_id: str) -> AccessTokenRecord | None:
        row = (
            self.connection.execute(
                select(access_tokens).where(access_tokens.c.id == token_id)
            )
            .mappings()
            .one_or_none()
        )
        return None if row is None else AccessTokenRecord(**row)

    def touch(self, token_id: str, used_at: datetime) -> None:
        try:
            self.connection.execute(
                update(access_tokens)
                .where(access_tokens.c.id == token_id)
                .values(last_used_at=used_at)
            )
        except DBAPIError as e:
            raise_storage_error(e)

    def delete(self, token_id: str) -> None:
        try:
            self.connection.execute(
                delete(access_tokens).where(access_tokens.c.id == token_id)
            )
        except DBAPIError as e:
            raise_storage_error(e)
