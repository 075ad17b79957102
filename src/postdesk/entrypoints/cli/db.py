"""POSTDESK DB CLI: forward-only Alembic wrappers.

Destructive operations (``downgrade``, ``stamp``) are intentionally omitted.

Behavior
- Uses programmatic Alembic configuration; human-oriented notices go to
  **stderr**, Alembic output to **stdout**.
- ``upgrade`` prompts for confirmation unless ``--force`` or ``--sql`` is given.

Requirements
- ``POSTDESK_DB_URL`` must be set.
"""

from __future__ import annotations

import sys
from enum import Enum
from typing import TYPE_CHECKING

import click
import click_extra as clickx
from alembic import command
from alembic.runtime.migration import MigrationContext
from alembic.script import ScriptDirectory

from postdesk import config
from postdesk.adapters.db.engine import make_engine

from .helpers import error, require_db_url, sanitize_url, success, warn

if TYPE_CHECKING:
    from alembic.config import Config
    from sqlalchemy.engine import Engine

UPGRADE_SCHEMA_WARNING = (
    "This will upgrade the database schema to the latest version.\n"
    "Please ensure you have a backup before proceeding."
)

UPGRADE_SCHEMA_INSTRUCTIONS = "Run 'postdesk db upgrade' to update the schema."

_verbose_option = click.option(
    "--verbose",
    "-v",
    "verbose",
    is_flag=True,
    help="Show alembic's more verbose output.",
)


@click.group(cls=clickx.ExtraGroup)
def db() -> None:
    """Database management commands."""


@db.command()
@_verbose_option
def current(verbose: bool) -> None:
    """Show current DB revision."""
    cfg = config.build_alembic_config(db_url=require_db_url(), stdout=sys.stdout)
    command.current(cfg, verbose=verbose)


@db.command()
@_verbose_option
def heads(verbose: bool) -> None:
    """Show available head revisions."""
    cfg = config.build_alembic_config(stdout=sys.stdout)
    command.heads(cfg, verbose=verbose)


@db.command()
@_verbose_option
@click.option(
    "--indicate-current",
    "-i",
    "indicate_current",
    is_flag=True,
    help="Indicate the current revision.",
)
def history(verbose: bool, indicate_current: bool) -> None:
    """Show revision history."""
    cfg = (
        config.build_alembic_config(db_url=require_db_url(), stdout=sys.stdout)
        if indicate_current
        else config.build_alembic_config(stdout=sys.stdout)
    )
    command.history(cfg, verbose=verbose, indicate_current=indicate_current)


@db.command()
@click.option("--sql", is_flag=True, help="Generate SQL without executing.")
@click.option("--force", is_flag=True, help="Upgrade without confirmation.")
def upgrade(sql: bool, force: bool) -> None:
    """Upgrade the database to the head revision."""
    url = require_db_url()
    cfg = config.build_alembic_config(db_url=url, stdout=sys.stdout)
    if not force and not sql:
        warn(UPGRADE_SCHEMA_WARNING)
        click.secho(f"db: {click.style(sanitize_url(url), underline=True)}")
        click.confirm("Are you sure you want to proceed?", abort=True)
    command.upgrade(cfg, revision="head", sql=sql)
    success("Upgrade complete!")


class MigrationStatus(Enum):
    """Describes the migration status of the database schema."""

    UP_TO_DATE = "up to date"
    OUT_OF_DATE = "out of date"
    UNINITIALIZED = "uninitialized"


def _get_current_revision(engine: Engine) -> str | None:
    with engine.connect() as conn:
        return MigrationContext.configure(conn).get_current_revision()


def _get_head_revision(cfg: Config) -> str | None:
    if results := ScriptDirectory.from_config(cfg).get_heads():
        return results[0]
    return None  # pragma: nocover


@db.command()
def status() -> None:
    """Show database connection and schema status."""
    try:
        url = require_db_url()
    except click.ClickException as e:
        error("Cannot connect to database")
        click.echo(e.format_message())
        sys.exit(1)

    engine = make_engine(url)
    success("Database reachable")
    click.echo(f"Backend : {engine.dialect.name}")
    click.echo(f"URL     : {sanitize_url(url)}")

    rev = _get_current_revision(engine)
    head = _get_head_revision(config.build_alembic_config(db_url=url))
    engine.dispose()

    if rev == head:
        migration_status = MigrationStatus.UP_TO_DATE
    elif rev is None:
        migration_status = MigrationStatus.UNINITIALIZED
    else:
        migration_status = MigrationStatus.OUT_OF_DATE  # pragma: nocover

    message = f"{rev} ({migration_status.value})" if rev else migration_status.value
    click.echo(f"Schema  : {message}")

    if migration_status != MigrationStatus.UP_TO_DATE:
        warn(UPGRADE_SCHEMA_INSTRUCTIONS)
