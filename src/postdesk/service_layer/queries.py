"""Read-side queries.

Queries open their own unit of work, never commit (except `authenticate`,
which records token usage) and return domain read models.
"""

import logging

from postdesk.domain.errors import PostNotFoundError
from postdesk.domain.model import (
    Category,
    Post,
    PostSummary,
    Principal,
    is_storable_id,
)
from postdesk.interfaces.identity import UnauthenticatedError
from postdesk.interfaces.unit_of_work import AbstractUnitOfWork

from . import tokens
from .handlers import utcnow

logger = logging.getLogger(__name__)


def list_posts(
    uow: AbstractUnitOfWork, owner: Principal, search: str | None = None
) -> list[PostSummary]:
    """List the owner's posts in creation order, optionally filtered.

    Args:
        uow: Unit of work to read through.
        owner: Only this principal's posts are listed.
        search: Keep posts whose title or content contains this text
            (case-insensitive). Surrounding whitespace is stripped first, the
            way request input is trimmed, so ``"Post "`` matches like
            ``"Post"``. Blank or ``None`` disables filtering.
    """
    term = search.strip() if search else None
    with uow:
        posts = uow.posts.list_by_owner(owner.id, term or None)
    return [post.summarize() for post in posts]


def get_post(uow: AbstractUnitOfWork, requester: Principal, post_id: int) -> Post:
    """Fetch one of the requester's posts.

    Posts owned by someone else are reported exactly like missing ones.

    Raises:
        PostNotFoundError: If the post does not exist or is not the requester's.
    """
    if not is_storable_id(post_id):
        raise PostNotFoundError(post_id)
    with uow:
        post = uow.posts.get(post_id)
    if post is None or not post.is_owned_by(requester):
        raise PostNotFoundError(post_id)
    return post


def list_categories(uow: AbstractUnitOfWork) -> list[Category]:
    """Return every category ordered by id."""
    with uow:
        return uow.categories.list_all()


def authenticate(uow: AbstractUnitOfWork, token: str | None) -> Principal:
    """Resolve a plain-text bearer token to its principal.

    Records the time of use on the token.

    Raises:
        UnauthenticatedError: If the token is missing, malformed, unknown or
            does not match the stored digest.
    """
    if not token or (parsed := tokens.parse_token(token)) is None:
        raise UnauthenticatedError()
    token_id, secret = parsed

    with uow:
        record = uow.tokens.get(token_id)
        if record is None or not tokens.secret_matches(secret, record.token_hash):
            logger.debug("Rejected bearer token %s", token_id)
            raise UnauthenticatedError()
        principal = uow.users.get(record.user_id)
        if principal is None:
            raise UnauthenticatedError()  # pragma: no cover
        uow.tokens.touch(token_id, utcnow())
        uow.commit()
    return principal
