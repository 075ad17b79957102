"""``postdesk categories``: seed and list post categories."""

from __future__ import annotations

import click
import click_extra as clickx

from postdesk.bootstrap import bootstrap
from postdesk.service_layer import commands, queries

from .helpers import require_db_url, success


@click.group(cls=clickx.ExtraGroup)
def categories() -> None:
    """Category management commands."""


@categories.command()
@click.argument("names", nargs=-1)
def seed(names: tuple[str, ...]) -> None:
    """Create categories that do not exist yet.

    Without NAMES the default set is seeded: noticias, tecnología, demo,
    tutoriales, eventos.
    """
    container = bootstrap(require_db_url())
    cmd = commands.SeedCategories(names) if names else commands.SeedCategories()
    created = container.message_bus().handle(cmd)
    for category in created:
        click.echo(f"{category.id}\t{category.name}")
    success(f"Seeded {len(created)} new categor{'y' if len(created) == 1 else 'ies'}.")


@categories.command(name="list")
def list_() -> None:
    """List all categories (id and name, tab-separated)."""
    container = bootstrap(require_db_url())
    for category in queries.list_categories(container.uow()):
        click.echo(f"{category.id}\t{category.name}")
