"""Input validation for post fields.

Validation collects every problem before raising, so a single
`ValidationError` names all invalid fields at once. Messages follow the
"The <field> field is required." style clients of the API already expect.

Unknown category ids need a storage lookup; callers pass a
``find_missing_categories`` callable that returns the subset of ids that do
not resolve, keeping this module free of persistence concerns.
"""

from __future__ import annotations

from collections.abc import Callable, Collection, Mapping
from dataclasses import dataclass
from typing import Any

from .errors import ValidationError
from .model import is_storable_id

TITLE_MAX_LENGTH = 255

TEXT_FIELDS = ("title", "excerpt", "content")
CATEGORIES_FIELD = "categories"
POST_FIELDS = (*TEXT_FIELDS, CATEGORIES_FIELD)

MAX_LENGTHS = {"title": TITLE_MAX_LENGTH, "name": 255, "email": 255}

REQUIRED_MSG = "The {field} field is required."
STRING_MSG = "The {field} field must be a string."
MAX_LENGTH_MSG = "The {field} field must not be greater than {max} characters."
ARRAY_MSG = "The {field} field must be an array."
MIN_ITEMS_MSG = "The {field} field must have at least 1 items."
INVALID_SELECTION_MSG = "The selected {field} is invalid."

FindMissing = Callable[[Collection[int]], Collection[int]]


@dataclass(slots=True)
class _Errors:
    messages: dict[str, list[str]]

    def add(self, field: str, template: str, **params: Any) -> None:
        self.messages.setdefault(field, []).append(
            template.format(field=field, **params)
        )

    def raise_if_any(self) -> None:
        if self.messages:
            raise ValidationError(self.messages)


def validate_new_post(
    values: Mapping[str, Any], find_missing_categories: FindMissing
) -> dict[str, Any]:
    """Validate the fields of a post about to be created.

    All of ``title``, ``excerpt``, ``content`` and ``categories`` are required.

    Args:
        values: Raw field values keyed by field name. Absent keys count as missing.
        find_missing_categories: Returns the ids (of those given) that do not exist.

    Returns:
        Cleaned values: stripped strings and a de-duplicated list of category ids.

    Raises:
        ValidationError: Naming every invalid field.
    """
    return _validate(values, POST_FIELDS, find_missing_categories)


def validate_post_changes(
    values: Mapping[str, Any], find_missing_categories: FindMissing
) -> dict[str, Any]:
    """Validate a partial update; only the supplied fields are checked.

    A supplied field is held to the same rules as on creation, so an explicit
    ``None`` or an empty category list is rejected.

    Raises:
        ValidationError: Naming every invalid supplied field.
    """
    supplied = tuple(field for field in POST_FIELDS if field in values)
    return _validate(values, supplied, find_missing_categories)


def _validate(
    values: Mapping[str, Any],
    fields: tuple[str, ...],
    find_missing_categories: FindMissing,
) -> dict[str, Any]:
    errors = _Errors({})
    cleaned: dict[str, Any] = {}

    for field in fields:
        if field == CATEGORIES_FIELD:
            continue
        if (text := _clean_text(field, values.get(field), errors)) is not None:
            cleaned[field] = text

    category_ids: list[int] | None = None
    if CATEGORIES_FIELD in fields:
        category_ids = _clean_category_ids(values.get(CATEGORIES_FIELD), errors)

    # Only hit storage when the shape of the input is already valid.
    if category_ids is not None and CATEGORIES_FIELD not in errors.messages:
        missing = set(find_missing_categories(category_ids))
        for position, raw in enumerate(values[CATEGORIES_FIELD]):
            if _as_id(raw) in missing:
                errors.add(f"{CATEGORIES_FIELD}.{position}", INVALID_SELECTION_MSG)
        if missing:
            errors.add(CATEGORIES_FIELD, INVALID_SELECTION_MSG)
        cleaned[CATEGORIES_FIELD] = category_ids

    errors.raise_if_any()
    return cleaned


def _clean_text(field: str, value: Any, errors: _Errors) -> str | None:
    if value is None:
        errors.add(field, REQUIRED_MSG)
        return None
    if not isinstance(value, str):
        errors.add(field, STRING_MSG)
        return None
    text = value.strip()
    if not text:
        errors.add(field, REQUIRED_MSG)
        return None
    if (limit := MAX_LENGTHS.get(field)) is not None and len(text) > limit:
        errors.add(field, MAX_LENGTH_MSG, max=limit)
        return None
    return text


def _clean_category_ids(value: Any, errors: _Errors) -> list[int] | None:
    if value is None:
        errors.add(CATEGORIES_FIELD, REQUIRED_MSG)
        return None
    if not isinstance(value, (list, tuple)):
        errors.add(CATEGORIES_FIELD, ARRAY_MSG)
        return None
    if not value:
        errors.add(CATEGORIES_FIELD, MIN_ITEMS_MSG)
        return None

    ids: list[int] = []
    malformed = False
    for position, raw in enumerate(value):
        if (category_id := _as_id(raw)) is None:
            errors.add(f"{CATEGORIES_FIELD}.{position}", INVALID_SELECTION_MSG)
            malformed = True
        elif category_id not in ids:
            ids.append(category_id)

    if malformed:
        errors.add(CATEGORIES_FIELD, INVALID_SELECTION_MSG)
        return None
    return ids


def _as_id(raw: Any) -> int | None:
    if isinstance(raw, bool):
        return None
    if isinstance(raw, str) and raw.isascii() and raw.isdigit():
        raw = int(raw)
    if isinstance(raw, int) and is_storable_id(raw):
        return raw
    return None


# ============================================================================
#                           Identity validation
# ============================================================================

PASSWORD_MIN_LENGTH = 8

EMAIL_MSG = "The {field} field must be a valid email address."
MIN_LENGTH_MSG = "The {field} field must be at least {min} characters."
TAKEN_MSG = "The {field} has already been taken."


def validate_registration(
    values: Mapping[str, Any], email_taken: Callable[[str], bool]
) -> dict[str, Any]:
    """Validate a new user's name, email and password.

    Emails are stripped and lowercased before the uniqueness check.

    Raises:
        ValidationError: Naming every invalid field.
    """
    errors = _Errors({})
    cleaned: dict[str, Any] = {}

    if (name := _clean_text("name", values.get("name"), errors)) is not None:
        cleaned["name"] = name

    if (email := _clean_email(values.get("email"), errors)) is not None:
        if email_taken(email):
            errors.add("email", TAKEN_MSG)
        else:
            cleaned["email"] = email

    if (password := _clean_password(values.get("password"), errors)) is not None:
        if len(password) < PASSWORD_MIN_LENGTH:
            errors.add("password", MIN_LENGTH_MSG, min=PASSWORD_MIN_LENGTH)
        else:
            cleaned["password"] = password

    errors.raise_if_any()
    return cleaned


def validate_credentials(values: Mapping[str, Any]) -> dict[str, Any]:
    """Validate the shape of login credentials (not their correctness).

    Raises:
        ValidationError: If email or password is missing or malformed.
    """
    errors = _Errors({})
    email = _clean_email(values.get("email"), errors)
    password = _clean_password(values.get("password"), errors)
    errors.raise_if_any()
    return {"email": email, "password": password}


def _clean_email(value: Any, errors: _Errors) -> str | None:
    if (email := _clean_text("email", value, errors)) is None:
        return None
    local, sep, domain = email.partition("@")
    if not sep or not local or not domain or "@" in domain or " " in email:
        errors.add("email", EMAIL_MSG)
        return None
    return email.lower()


def _clean_password(value: Any, errors: _Errors) -> str | None:
    if value is None or value == "":
        errors.add("password", REQUIRED_MSG)
        return None
    if not isinstance(value, str):
        errors.add("password", STRING_MSG)
        return None
    return value
