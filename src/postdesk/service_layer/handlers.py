"""Service layer command handlers.

Each handler runs its use case inside the given unit of work and commits
only when every step succeeded. Authorization and validation errors are
raised before anything is written.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timezone

from postdesk.domain.errors import (
    PostForbiddenError,
    PostNotFoundError,
    SlugConflictError,
    ValidationError,
)
from postdesk.domain.model import Category, Post, Principal, is_storable_id
from postdesk.domain.slugs import generate_unique_slug
from postdesk.domain.unsettable import supplied_fields
from postdesk.domain.validation import (
    POST_FIELDS,
    TAKEN_MSG,
    validate_credentials,
    validate_new_post,
    validate_post_changes,
    validate_registration,
)
from postdesk.interfaces.id_generator import IdGenerator
from postdesk.interfaces.identity import (
    AccessTokenRecord,
    EmailAlreadyRegisteredError,
    InvalidCredentialsError,
    NewUser,
    UnauthenticatedError,
)
from postdesk.interfaces.password_hasher import PasswordHasher
from postdesk.interfaces.post_repository import (
    NewPost,
    PostChanges,
    SlugAlreadyTakenError,
)
from postdesk.interfaces.unit_of_work import AbstractUnitOfWork

from . import commands, tokens

logger = logging.getLogger(__name__)

#: How many times creation looks for a free slug again after losing an insert race.
MAX_SLUG_ATTEMPTS = 5


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


# ============================================================================
#                               Post Handlers
# ============================================================================


def create_post(cmd: commands.CreatePost, uow: AbstractUnitOfWork) -> Post:
    """Validate, derive a unique slug, and persist a new post with its categories.

    The slug lookup and the insert are not atomic: a concurrent writer may
    claim the same slug in between. The ``UNIQUE(slug)`` constraint catches
    that, the unit of work is rolled back, and the whole sequence is retried
    with a fresh slug lookup.

    Raises:
        ValidationError: If any field is missing or invalid.
        SlugConflictError: If no slug could be claimed in `MAX_SLUG_ATTEMPTS` tries.
    """
    fields = {
        "title": cmd.title,
        "excerpt": cmd.excerpt,
        "content": cmd.content,
        "categories": cmd.categories,
    }

    slug = ""
    for attempt in range(1, MAX_SLUG_ATTEMPTS + 1):
        with uow:
            values = validate_new_post(fields, uow.categories.find_missing)
            slug = generate_unique_slug(values["title"], uow.posts.slug_exists)
            now = utcnow()
            try:
                post_id = uow.posts.add(
                    NewPost(
                        owner_id=cmd.owner.id,
                        title=values["title"],
                        slug=slug,
                        excerpt=values["excerpt"],
                        content=values["content"],
                        created_at=now,
                        updated_at=now,
                    )
                )
            except SlugAlreadyTakenError:
                logger.warning(
                    "Slug %r was claimed concurrently (attempt %d of %d); retrying",
                    slug,
                    attempt,
                    MAX_SLUG_ATTEMPTS,
                )
                continue

            uow.posts.attach_categories(post_id, values["categories"])
            post = _require_post(uow, post_id)
            uow.commit()

        logger.info("Post %d created by user %d as %r", post.id, cmd.owner.id, slug)
        return post

    raise SlugConflictError(slug, MAX_SLUG_ATTEMPTS)


def update_post(cmd: commands.UpdatePost, uow: AbstractUnitOfWork) -> Post:
    """Overwrite the supplied fields of a post owned by the requester.

    Checks run in order: existence, ownership, then validation. The slug is
    never recomputed, even when the title changes.

    Raises:
        PostNotFoundError: If the post does not exist.
        PostForbiddenError: If the requester does not own the post.
        ValidationError: If a supplied field is invalid.
    """
    fields = supplied_fields(cmd, POST_FIELDS)

    with uow:
        current = _get_owned_post(uow, cmd.post_id, cmd.requester)
        values = validate_post_changes(fields, uow.categories.find_missing)

        uow.posts.update(
            current.id,
            PostChanges(
                updated_at=utcnow(),
                title=values.get("title"),
                excerpt=values.get("excerpt"),
                content=values.get("content"),
            ),
        )
        if "categories" in values:
            uow.posts.replace_categories(current.id, values["categories"])

        post = _require_post(uow, current.id)
        uow.commit()

    logger.debug("Post %d updated fields %s", post.id, sorted(values))
    return post


def delete_post(cmd: commands.DeletePost, uow: AbstractUnitOfWork) -> None:
    """Delete a post owned by the requester together with its category links.

    Raises:
        PostNotFoundError: If the post does not exist.
        PostForbiddenError: If the requester does not own the post.
    """
    with uow:
        post = _get_owned_post(uow, cmd.post_id, cmd.requester)
        uow.posts.delete(post.id)
        uow.commit()

    logger.info("Post %d deleted by user %d", cmd.post_id, cmd.requester.id)


def _get_owned_post(
    uow: AbstractUnitOfWork, post_id: int, requester: Principal
) -> Post:
    post = uow.posts.get(post_id) if is_storable_id(post_id) else None
    if post is None:
        raise PostNotFoundError(post_id)
    if not post.is_owned_by(requester):
        raise PostForbiddenError(post_id, requester.id)
    return post


def _require_post(uow: AbstractUnitOfWork, post_id: int) -> Post:
    if (post := uow.posts.get(post_id)) is None:
        raise PostNotFoundError(post_id)  # pragma: no cover
    return post


# ============================================================================
#                             Identity Handlers
# ============================================================================


@dataclass(frozen=True, slots=True)
class IssuedToken:
    """A freshly issued bearer token. `plain_text` is only available once."""

    principal: Principal
    plain_text: str

    def __repr__(self) -> str:
        return f"IssuedToken(principal={self.principal!r}, plain_text=<redacted>)"


def register_user(
    cmd: commands.RegisterUser,
    uow: AbstractUnitOfWork,
    password_hasher: PasswordHasher,
) -> Principal:
    """Register a new user.

    Raises:
        ValidationError: If a field is invalid or the email is already taken.
    """
    fields = {"name": cmd.name, "email": cmd.email, "password": cmd.password}

    with uow:
        values = validate_registration(fields, uow.users.email_exists)
        try:
            principal = uow.users.add(
                NewUser(
                    name=values["name"],
                    email=values["email"],
                    password_hash=password_hasher.hash(values["password"]),
                    created_at=utcnow(),
                )
            )
        except EmailAlreadyRegisteredError as e:
            # lost a race against a concurrent registration
            raise ValidationError(
                {"email": [TAKEN_MSG.format(field="email")]}
            ) from e
        uow.commit()

    logger.info("User %d registered", principal.id)
    return principal


def issue_token(
    cmd: commands.IssueToken,
    uow: AbstractUnitOfWork,
    password_hasher: PasswordHasher,
    token_id_generator: IdGenerator,
) -> IssuedToken:
    """Check the credentials and issue a new bearer token.

    Raises:
        ValidationError: If email or password is missing or malformed.
        InvalidCredentialsError: If they do not match a registered user.
    """
    values = validate_credentials({"email": cmd.email, "password": cmd.password})

    with uow:
        credentials = uow.users.get_credentials(values["email"])
        if credentials is None or not password_hasher.verify(
            credentials.password_hash, values["password"]
        ):
            logger.info("Rejected login for %r", values["email"])
            raise InvalidCredentialsError()

        token_id = token_id_generator.new_id()
        secret = tokens.new_secret()
        uow.tokens.add(
            AccessTokenRecord(
                id=token_id,
                user_id=credentials.principal.id,
                name=cmd.token_name,
                token_hash=tokens.hash_secret(secret),
                created_at=utcnow(),
            )
        )
        uow.commit()

    logger.info("Token %s issued to user %d", token_id, credentials.principal.id)
    return IssuedToken(
        principal=credentials.principal,
        plain_text=tokens.format_token(token_id, secret),
    )


def revoke_token(cmd: commands.RevokeToken, uow: AbstractUnitOfWork) -> None:
    """Revoke the presented bearer token.

    Raises:
        UnauthenticatedError: If the token does not resolve.
    """
    if (parsed := tokens.parse_token(cmd.token)) is None:
        raise UnauthenticatedError()
    token_id, secret = parsed

    with uow:
        record = uow.tokens.get(token_id)
        if record is None or not tokens.secret_matches(secret, record.token_hash):
            raise UnauthenticatedError()
        uow.tokens.delete(token_id)
        uow.commit()

    logger.info("Token %s revoked", token_id)


# ============================================================================
#                             Category Handlers
# ============================================================================


def seed_categories(
    cmd: commands.SeedCategories, uow: AbstractUnitOfWork
) -> list[Category]:
    """Create the named categories that do not exist yet (idempotent).

    Returns:
        The categories created by this call, in the order given.
    """
    created: list[Category] = []
    with uow:
        for name in dict.fromkeys(cmd.names):
            if uow.categories.get_by_name(name) is not None:
                logger.debug("SeedCategories %r: already present; noop", name)
                continue
            created.append(uow.categories.add(name))
        uow.commit()
    return created


COMMAND_HANDLERS: dict[type, Callable[..., object]] = {
    commands.CreatePost: create_post,
    commands.UpdatePost: update_post,
    commands.DeletePost: delete_post,
    commands.RegisterUser: register_user,
    commands.IssueToken: issue_token,
    commands.RevokeToken: revoke_token,
    commands.SeedCategories: seed_categories,
}
