"""Terminal message helpers for the Postdesk CLI.

Messages write to stderr so stdout stays machine-readable, and fall back
from emoji to ASCII on terminals that cannot encode them.
"""

import click


def _supports_character(character: str) -> bool:
    """Return True if `character` can be encoded on stderr."""
    stream = click.get_text_stream("stderr")  # pragma: no mutate
    encoding = getattr(stream, "encoding", None) or "ascii"
    try:
        character.encode(encoding)
    except UnicodeEncodeError:
        return False
    return True


def _glyph(emoji: str, fallback: str) -> str:
    return emoji if _supports_character(emoji) else fallback


def caution_glyph() -> str:
    """Return "⚠️", or "[!]" where stderr cannot encode it."""
    return _glyph("⚠️", "[!]")  # pragma: no mutate


def success_glyph() -> str:
    """Return "✅", or "[OK]" where stderr cannot encode it."""
    return _glyph("✅", "[OK]")  # pragma: no mutate


def error_glyph() -> str:
    """Return "❌", or "[X]" where stderr cannot encode it."""
    return _glyph("❌", "[X]")  # pragma: no mutate


def warn(msg: str) -> None:
    """Emit a yellow, bold warning line to **stderr**.

    Example:
        ``⚠️  This will modify your database.``
    """
    click.secho(f"{caution_glyph()}  {msg}", fg="yellow", bold=True, err=True)


def success(msg: str) -> None:
    """Emit a green, bold success line to **stderr**.

    Example:
        ``✅  Upgrade complete!``
    """
    click.secho(f"{success_glyph()}  {msg}", fg="green", bold=True, err=True)


def error(msg: str) -> None:
    """Emit a red, bold error line to **stderr**.

    Example:
        ``❌  Cannot connect to database``
    """
    click.secho(f"{error_glyph()}  {msg}", fg="red", bold=True, err=True)
