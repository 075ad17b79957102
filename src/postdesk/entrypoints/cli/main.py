"""Postdesk CLI entry point.

Defines the top-level ``postdesk`` command (via Click-Extra), configures
logging for every subcommand, and registers the subcommands:

- ``postdesk db``: forward-only database management (upgrade/current/heads/history/status).
- ``postdesk categories``: seed and list post categories.
- ``postdesk serve``: run the JSON API.

Examples
    $ postdesk --version
    $ postdesk db upgrade
    $ postdesk categories seed
    $ postdesk -v serve --port 8000
"""

import logging
from pathlib import Path

import click
import click_extra as clickx
from platformdirs import user_log_dir

from postdesk import __version__
from postdesk.logging import (
    LoggingSettings,
    configure_logging,
    console_level,
    log_startup,
)

from .categories import categories as categories_group
from .db import db as db_group
from .helpers.log_level_parser import DEFAULT_LIB_LEVELS, parse_log_level
from .serve import serve as serve_command

logger = logging.getLogger(__name__)


HELP = """POSTDESK command-line interface.

    POSTDESK is a small blog-post API: authenticated users create, list,
    filter, update and delete their own posts, tagged with shared categories,
    with unique URL slugs derived from the titles.
    """


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help=(
        "Increase the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help=(
        "Decrease the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Enable debug mode (enables extra developer diagnostics beyond -vvv).",
    default=False,
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to log file written by the flight recorder.",
    default=Path(user_log_dir("postdesk", appauthor=False, ensure_exists=True))
    / "latest.log",
    envvar="POSTDESK_LOG_PATH",
    show_default=True,
    show_envvar=True,
)
@click.option(
    "--flight-recorder-capacity",
    type=int,
    default=2000,
    hidden=True,
    envvar="POSTDESK_FLIGHT_RECORDER_CAPACITY",
    show_envvar=True,
    help="Capacity of the flight recorder (in number of log records).",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    is_flag=True,
    help=(
        "Enable the in-memory flight recorder. Keeps the last N log records "
        "(tunable via POSTDESK_FLIGHT_RECORDER_CAPACITY) at DEBUG granularity "
        "(unaffected by -v/-q) and writes them to --log-path when a WARNING/ERROR "
        "occurs, or on clean exit if --force-flush is set."
    ),
    default=True,
    envvar="POSTDESK_FLIGHT_RECORDER",
    show_envvar=True,
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush_flight_recorder",
    is_flag=True,
    help=(
        "Force-flush the flight recorder buffer to --log-path on program exit. "
        "Normally the buffer only dumps on WARNING/ERROR."
    ),
    default=False,
    show_default=True,
    envvar="POSTDESK_FORCE_FLUSH_FLIGHT_RECORDER",
    show_envvar=True,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    help=(
        "Set MINIMUM LEVEL for specific LOGGERS (NAME=LEVEL). Applies to both "
        "console and flight recorder. Repeatable (e.g. -L sqlalchemy=INFO "
        "-L werkzeug=WARNING) or via POSTDESK_LOGGER_LEVEL (comma/space list)."
    ),
    default=tuple(
        f"{name}={logging.getLevelName(lvl)}" for name, lvl in DEFAULT_LIB_LEVELS.items()
    ),
    show_default=True,
    envvar="POSTDESK_LOGGER_LEVEL",
    show_envvar=True,
)
@clickx.pass_context
def postdesk(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder_capacity: int,
    flight_recorder: bool,
    force_flush_flight_recorder: bool,
    logger_levels: dict[str, int],
) -> None:
    """POSTDESK command-line interface."""
    settings = LoggingSettings(
        level=console_level(verbose_count, quiet_count),
        debug=debug,
        color=ctx.color is not False,  # None or True => allow color
        flight_recorder=flight_recorder,
        log_path=log_path,
        flight_capacity=flight_recorder_capacity,
        force_flush=force_flush_flight_recorder,
        logger_levels=logger_levels,
    )
    handlers = configure_logging(settings)
    log_startup(logger, __version__, settings, handlers)
    ctx.call_on_close(logging.shutdown)


postdesk.add_command(db_group)
postdesk.add_command(categories_group)
postdesk.add_command(serve_command)
