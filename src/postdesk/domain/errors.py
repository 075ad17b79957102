"""Domain-layer error definitions."""

from collections.abc import Mapping, Sequence

# ============================================================================
#                           General domain errors
# ============================================================================


class DomainError(Exception):
    """Base class for domain-layer errors."""


class ValidationError(DomainError):
    """Raised when input fields are missing or malformed.

    Attributes:
        errors: Mapping of field name to the list of messages for that field.
    """

    def __init__(self, errors: Mapping[str, Sequence[str]]) -> None:
        self.errors = {field: list(messages) for field, messages in errors.items()}
        super().__init__(_summarize(self.errors))

    @property
    def fields(self) -> list[str]:
        """Names of the invalid fields, in the order they were reported."""
        return list(self.errors)


class NotFoundError(DomainError):
    """Base class for errors raised when a resource id does not resolve."""


class ForbiddenError(DomainError):
    """Raised when an authenticated principal acts on a resource it does not own."""


class ConflictError(DomainError):
    """Base class for uniqueness conflicts that could not be resolved."""


# ============================================================================
#                           Post related errors
# ============================================================================


class PostNotFoundError(NotFoundError):
    """Raised when a post id does not resolve (for the requesting principal)."""

    def __init__(self, post_id: int) -> None:
        super().__init__(f"Post {post_id} not found.")
        self.post_id = post_id


class PostForbiddenError(ForbiddenError):
    """Raised when a principal tries to change or delete someone else's post."""

    def __init__(self, post_id: int, principal_id: int) -> None:
        super().__init__(f"User {principal_id} is not the owner of post {post_id}.")
        self.post_id = post_id
        self.principal_id = principal_id


class SlugConflictError(ConflictError):
    """Raised when a unique slug could not be claimed after repeated attempts."""

    def __init__(self, slug: str, attempts: int) -> None:
        super().__init__(
            f"Could not claim a unique slug for '{slug}' after {attempts} attempts."
        )
        self.slug = slug
        self.attempts = attempts


def _summarize(errors: Mapping[str, Sequence[str]]) -> str:
    messages = [message for field_messages in errors.values() for message in field_messages]
    if not messages:
        return "The given data was invalid."
    if len(messages) == 1:
        return messages[0]
    extra = len(messages) - 1
    return f"{messages[0]} (and {extra} more error{'s' if extra > 1 else ''})"
