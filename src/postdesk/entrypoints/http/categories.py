"""Category routes."""

from __future__ import annotations

from flask import Blueprint

from postdesk.service_layer import queries

from .context import auth_required, container
from .resources import category_resource

categories_bp = Blueprint("categories", __name__, url_prefix="/categories")


@categories_bp.get("")
@auth_required
def index():
    return [category_resource(c) for c in queries.list_categories(container().uow())]
