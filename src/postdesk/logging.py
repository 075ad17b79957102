"""Logging for the POSTDESK CLI and the API server it runs.

`configure_logging` installs the root handlers every ``postdesk`` subcommand
logs through:

- a Rich console handler on stderr, at the level chosen with ``-v``/``-q``;
- optionally a *flight recorder*: a `MemoryHandler` that keeps the most
  recent records at DEBUG and dumps them to a file once a WARNING arrives.

`configure_request_log` is used by ``postdesk serve``. Werkzeug logs one line
per HTTP request on the ``werkzeug`` logger and, when it finds no handler it
likes, installs a stream handler of its own. The request log is instead
routed through the handlers above, with each line trimmed to
``<client> "<METHOD path protocol>" <status> <size>``.
"""

from __future__ import annotations

import logging
import os
import platform
import re
import sys
from dataclasses import dataclass, field
from importlib.metadata import PackageNotFoundError, version
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import TYPE_CHECKING, Literal, TypeAlias

from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from logging import Handler, Logger

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "postdesk"
REQUEST_LOGGER = "werkzeug"

#: Libraries whose versions are reported at startup (label -> distribution).
REPORTED_LIBRARIES = {
    "Alembic": "alembic",
    "SQLAlchemy": "sqlalchemy",
    "Flask": "flask",
    "Werkzeug": "werkzeug",
}

CONSOLE_FORMAT = "%(prefix)s %(message)s"
DEBUG_CONSOLE_FORMAT = "%(asctime)s %(name)s: %(message)s"
RECORDER_FORMAT = (
    "[%(asctime)s] [%(process)d:%(threadName)s] "
    "%(levelname)s %(name)s:%(lineno)d: %(message)s"
)

ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]

_ANSI_ESCAPE = re.compile(r"\x1b\[[0-9;]*m")
# "<client> - - [<date>] <rest>" as written by werkzeug's request handler
_WERKZEUG_LINE = re.compile(r"^(?P<client>\S+) - - \[[^\]]*\] (?P<rest>.*)$", re.DOTALL)


@dataclass(frozen=True, slots=True)
class LoggingSettings:
    """Logging choices made on the ``postdesk`` command line."""

    level: int = logging.WARNING
    debug: bool = False
    color: bool = True
    flight_recorder: bool = True
    log_path: Path | None = None
    flight_capacity: int = 2000
    force_flush: bool = False
    logger_levels: dict[str, int] = field(default_factory=dict)


def console_level(verbose_count: int, quiet_count: int) -> int:
    """Shift WARNING one level per ``-v``/``-q``, clamped to DEBUG..CRITICAL."""
    level = logging.WARNING - 10 * verbose_count + 10 * quiet_count
    return max(logging.DEBUG, min(logging.CRITICAL, level))


class ThirdPartyPrefixFilter(logging.Filter):
    """Set ``record.prefix`` to ``[library]`` for records from other packages.

    Project records get an empty prefix. Nothing is filtered out.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name.startswith(PROJECT_PREFIX):
            record.prefix = ""
        else:
            record.prefix = f"[{record.name.split('.')[0]}]"
        return True


class RequestLineFilter(logging.Filter):
    """Trim Werkzeug's request lines to client, request line, status and size.

    Werkzeug prefixes each line with an Apache-style timestamp and, on a
    terminal, colours the request with ANSI escapes. Both are dropped: the
    handlers add their own timestamps and Rich does the colouring. Records
    that are not request lines (e.g. the "Running on" banner) pass unchanged.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        message = _ANSI_ESCAPE.sub("", record.getMessage())
        if (match := _WERKZEUG_LINE.match(message)) is not None:
            record.msg = f"{match['client']} {match['rest'].strip()}"
            record.args = None
        return True


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Build the stderr console handler.

    In debug mode the handler accepts DEBUG and shows timestamps, logger names
    and source locations. Otherwise records from other libraries are tagged
    with a ``[library]`` prefix.

    Args:
        level: Minimum level shown (DEBUG in debug mode).
        debug_mode: Enable the developer format.
        color: Colour the output (mirrors click-extra's ``--color``).
    """
    color_system: ColorSystem | None = "auto" if color else None
    handler = RichHandler(
        level=logging.DEBUG if debug_mode else level,
        console=Console(color_system=color_system, stderr=True),
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )
    if debug_mode:
        handler.setFormatter(logging.Formatter(DEBUG_CONSOLE_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        handler.addFilter(ThirdPartyPrefixFilter())
    return handler


def config_flight_recorder(
    path: Path,
    capacity: int = 2000,
    flush_level: int = logging.WARNING,
    flush_on_close: bool = False,
) -> MemoryHandler:
    """Build the in-memory flight recorder writing to `path`.

    Up to `capacity` records are buffered. The buffer is written out when a
    record at `flush_level` or above arrives, and on close if
    `flush_on_close` is set. The file is truncated when the recorder is built.
    """
    file_handler = logging.FileHandler(path, mode="w", encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(RECORDER_FORMAT))
    return MemoryHandler(
        capacity=capacity,
        flushLevel=flush_level,
        target=file_handler,
        flushOnClose=flush_on_close,
    )


def configure_logging(settings: LoggingSettings) -> list[Handler]:
    """Install the root handlers and per-logger levels for one CLI run.

    The root logger passes everything at DEBUG; the console handler and the
    per-logger levels decide what is kept.

    Returns:
        The installed handlers, console first.
    """
    handlers: list[Handler] = [
        config_console_handler(
            level=settings.level, debug_mode=settings.debug, color=settings.color
        )
    ]
    if settings.flight_recorder and settings.log_path is not None:
        handlers.append(
            config_flight_recorder(
                path=settings.log_path,
                capacity=settings.flight_capacity,
                flush_on_close=settings.force_flush,
            )
        )

    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)
    for name, lvl in settings.logger_levels.items():
        logging.getLogger(name).setLevel(lvl)
    return handlers


def configure_request_log() -> Logger:
    """Route Werkzeug's request log through the configured root handlers.

    Safe to call more than once.

    Returns:
        The ``werkzeug`` logger.
    """
    request_logger = logging.getLogger(REQUEST_LOGGER)
    if not any(isinstance(f, RequestLineFilter) for f in request_logger.filters):
        request_logger.addFilter(RequestLineFilter())
    # Werkzeug adds its own stderr handler to a logger that has no handler
    # at its level; a NullHandler counts and leaves output to the root.
    if not any(isinstance(h, logging.NullHandler) for h in request_logger.handlers):
        request_logger.addHandler(logging.NullHandler())
    if request_logger.level == logging.NOTSET:
        request_logger.setLevel(logging.INFO)
    return request_logger


def library_versions() -> dict[str, str]:
    """Installed versions of `REPORTED_LIBRARIES`, keyed by label."""
    versions = {}
    for label, dist in REPORTED_LIBRARIES.items():
        try:
            versions[label] = version(dist)
        except PackageNotFoundError:  # pragma: no cover
            versions[label] = "<not installed>"
    return versions


def log_startup(
    logger: Logger,
    app_version: str,
    settings: LoggingSettings,
    handlers: list[Handler],
) -> None:
    """Log a one-line banner at INFO and environment diagnostics at DEBUG.

    The DEBUG lines end up in the flight recorder even when the console is
    quieter, which makes a dumped log self-describing.
    """
    logger.info(
        "POSTDESK %s - console=%s, flight-recorder=%s",
        app_version,
        logging.getLevelName(settings.level),
        "ON" if settings.flight_recorder else "OFF",
    )

    logger.debug("Python: %s", sys.version.split()[0])
    logger.debug("Platform: %s %s", platform.system(), platform.release())
    logger.debug("PID: %s", os.getpid())
    logger.debug("CWD: %s", Path.cwd())
    for label, lib_version in library_versions().items():
        logger.debug("%s: %s", label, lib_version)
    logger.debug("Handlers: %s", [type(h).__name__ for h in handlers])
    if settings.flight_recorder:
        logger.debug(
            "Flight recorder: path=%s, capacity=%s, flush_on_close=%s",
            settings.log_path or "<none>",
            settings.flight_capacity,
            settings.force_flush,
        )
    logger.debug(
        "Per-logger overrides: %s",
        {
            name: logging.getLevelName(lvl)
            for name, lvl in settings.logger_levels.items()
        }
        or "<none>",
    )
