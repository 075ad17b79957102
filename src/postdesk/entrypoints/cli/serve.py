"""``postdesk serve``: run the JSON API on Werkzeug's development server."""

from __future__ import annotations

import logging

import click

from postdesk.bootstrap import bootstrap
from postdesk.entrypoints.http import create_app
from postdesk.logging import configure_request_log

from .helpers import require_db_url, sanitize_url

logger = logging.getLogger(__name__)


@click.command()
@click.option("--host", default="127.0.0.1", show_default=True, help="Bind address.")
@click.option("--port", default=8000, type=int, show_default=True, help="Bind port.")
def serve(host: str, port: int) -> None:
    """Serve the POSTDESK API under /api/v1.

    One line per request is logged at INFO on the ``werkzeug`` logger; use
    ``-v`` to see it on the console. The flight recorder keeps it regardless.
    """
    url = require_db_url()
    app = create_app(bootstrap(url))
    configure_request_log()
    logger.info("Serving on http://%s:%d (db: %s)", host, port, sanitize_url(url))
    app.run(host=host, port=port)
