"""Unit tests for domain errors."""

import pytest

from postdesk.domain import errors


class TestValidationError:
    """Tests for the ValidationError domain error."""

    @staticmethod
    def test_single_message_is_the_summary() -> None:
        """With one message, str() is that message."""
        error = errors.ValidationError({"title": ["The title field is required."]})
        assert str(error) == "The title field is required."

    @staticmethod
    @pytest.mark.parametrize(
        ("field_errors", "expected"),
        [
            ({"title": ["A"], "content": ["B"]}, "A (and 1 more error)"),
            ({"title": ["A"], "content": ["B", "C"]}, "A (and 2 more errors)"),
        ],
    )
    def test_summary_counts_remaining_messages(field_errors, expected) -> None:
        """Additional messages are counted, with correct pluralization."""
        assert str(errors.ValidationError(field_errors)) == expected

    @staticmethod
    def test_empty_errors_have_generic_summary() -> None:
        """An error without messages still has a readable summary."""
        assert str(errors.ValidationError({})) == "The given data was invalid."

    @staticmethod
    def test_errors_are_copied() -> None:
        """Later mutation of the input does not leak into the error."""
        source = {"title": ["A"]}
        error = errors.ValidationError(source)
        source["title"].append("B")
        assert error.errors == {"title": ["A"]}
        assert error.fields == ["title"]


class TestPostNotFoundError:
    """Tests for the PostNotFoundError domain error."""

    @staticmethod
    def test_attributes_and_message() -> None:
        """The post id is kept and named in the message."""
        error = errors.PostNotFoundError(7)
        assert error.post_id == 7
        assert str(error) == "Post 7 not found."
        assert isinstance(error, errors.NotFoundError)


class TestPostForbiddenError:
    """Tests for the PostForbiddenError domain error."""

    @staticmethod
    def test_attributes_and_message() -> None:
        """Both the post and the principal are recorded."""
        error = errors.PostForbiddenError(post_id=7, principal_id=3)
        assert (error.post_id, error.principal_id) == (7, 3)
        assert str(error) == "User 3 is not the owner of post 7."
        assert isinstance(error, errors.ForbiddenError)


class TestSlugConflictError:
    """Tests for the SlugConflictError domain error."""

    @staticmethod
    def test_attributes_and_message() -> None:
        """The last slug tried and the attempt count are recorded."""
        error = errors.SlugConflictError("hello-world", 5)
        assert (error.slug, error.attempts) == ("hello-world", 5)
        assert str(error) == (
            "Could not claim a unique slug for 'hello-world' after 5 attempts."
        )
        assert isinstance(error, errors.ConflictError)


def test_all_errors_are_domain_errors() -> None:
    """Every concrete error derives from DomainError."""
    for cls in (
        errors.ValidationError,
        errors.PostNotFoundError,
        errors.PostForbiddenError,
        errors.SlugConflictError,
    ):
        assert issubclass(cls, errors.DomainError)
