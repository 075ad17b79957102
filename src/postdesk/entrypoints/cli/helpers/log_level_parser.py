"""Parsing of ``NAME=LEVEL`` logger-level CLI options.

Values may be repeated or given as one comma/space-separated string (as they
arrive from an environment variable).
"""

import logging
import re

import click

#: Levels applied to noisy libraries unless overridden.
DEFAULT_LIB_LEVELS = {
    "sqlalchemy": logging.WARNING,
    "alembic": logging.WARNING,
    "werkzeug": logging.INFO,
}

_SPLIT = re.compile(r"[,\s]+")


def _normalize_items(value: str | list[str] | tuple[str, ...]) -> list[str]:
    """Flatten one string or a sequence of strings into non-empty items."""
    chunks = value if isinstance(value, (tuple, list)) else [value]
    return [item for chunk in chunks for item in _SPLIT.split(chunk) if item]


def parse_log_level(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | list[str] | tuple[str, ...],
) -> dict[str, int]:
    """Click callback turning NAME=LEVEL pairs into a name->level dict.

    The result starts from `DEFAULT_LIB_LEVELS`; later items win.

    Raises:
        click.BadParameter: If an item is not NAME=LEVEL or LEVEL is unknown.
    """
    levels = dict(DEFAULT_LIB_LEVELS)
    for item in _normalize_items(value):
        name, sep, level_str = item.partition("=")
        if not sep or not name.strip():
            raise click.BadParameter(f"Expected NAME=LEVEL, got {item!r}")
        lvl = logging.getLevelNamesMapping().get(level_str.strip().upper())
        if lvl is None:
            raise click.BadParameter(f"Invalid log level: {level_str}")
        levels[name.strip()] = lvl
    return levels
