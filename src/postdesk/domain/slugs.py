"""Unique, URL-safe slug generation for post titles.

A slug is derived from a title in two steps:

1. The title is normalized with `python-slugify`: lowercased, diacritics
   transliterated, runs of non-alphanumeric characters collapsed into a single
   hyphen and leading/trailing hyphens trimmed. A title that normalizes to the
   empty string (e.g. only punctuation) falls back to ``FALLBACK_BASE``.
2. The base form is checked against the existing slugs; on collision the
   suffixes ``-1``, ``-2``, ... are tried in order and the first free
   candidate wins.

Examples:
    ```python
    >>> slugify_title('My Test Post: With "Special" Characters!')
    'my-test-post-with-special-characters'
    >>> slugify_title("Mi nueva publicación")
    'mi-nueva-publicacion'
    >>> slugify_title("?!")
    'post'
    ```

The lookup is only a pre-check: the storage layer holds the authoritative
uniqueness constraint, and creation retries when it loses a race.
"""

from collections.abc import Callable, Iterator
from itertools import count

from slugify import slugify

FALLBACK_BASE = "post"

#: Longest base form kept from a title. Leaves room for a numeric suffix
#: inside the 255-character slug column.
MAX_BASE_LENGTH = 240


def slugify_title(title: str) -> str:
    """Normalize a title into its URL-safe base slug.

    Args:
        title: The post title.

    Returns:
        The base slug, never empty.
    """
    base = slugify(
        title,
        lowercase=True,
        max_length=MAX_BASE_LENGTH,
        word_boundary=True,
    ).strip("-")
    return base or FALLBACK_BASE


def slug_candidates(base: str) -> Iterator[str]:
    """Yield ``base``, then ``base-1``, ``base-2``, ... without end."""
    yield base
    for n in count(1):
        yield f"{base}-{n}"


def generate_unique_slug(title: str, slug_exists: Callable[[str], bool]) -> str:
    """Return a slug for `title` that no stored post currently uses.

    Args:
        title: The post title.
        slug_exists: Predicate reporting whether a slug is already taken.

    Returns:
        The first free candidate from `slug_candidates`.
    """
    for candidate in slug_candidates(slugify_title(title)):
        if not slug_exists(candidate):
            return candidate
    raise AssertionError("unreachable")  # pragma: no cover
