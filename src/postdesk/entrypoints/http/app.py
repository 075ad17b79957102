"""Flask application factory."""

from __future__ import annotations

import logging

from flask import Blueprint, Flask

from postdesk.bootstrap import AppContainer, bootstrap

from .categories import categories_bp
from .errors import register_error_handlers
from .identity import identity_bp
from .posts import posts_bp

logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"
EXTENSION_KEY = "postdesk"


def create_app(container: AppContainer | None = None) -> Flask:
    """Build the Flask app around an application container.

    Args:
        container: Pre-built wiring (tests pass in-memory or SQLite-backed
            containers). Defaults to `bootstrap()`, which reads
            `POSTDESK_DB_URL`.
    """
    app = Flask(__name__)
    app.json.sort_keys = False
    app.extensions[EXTENSION_KEY] = container or bootstrap()

    api = Blueprint("api", __name__, url_prefix=API_PREFIX)
    api.register_blueprint(identity_bp)
    api.register_blueprint(categories_bp)
    api.register_blueprint(posts_bp)
    app.register_blueprint(api)

    register_error_handlers(app)
    logger.debug("Flask app created with routes under %s", API_PREFIX)
    return app
