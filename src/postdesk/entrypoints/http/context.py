"""Request-scoped access to the application container and the principal."""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from flask import current_app, g, request

from postdesk.interfaces.identity import UnauthenticatedError
from postdesk.service_layer import queries

if TYPE_CHECKING:
    from postdesk.bootstrap import AppContainer
    from postdesk.domain.model import Principal

BEARER_PREFIX = "bearer "


def container() -> AppContainer:
    """Return the container the running app was created with."""
    return current_app.extensions["postdesk"]


def bearer_token() -> str | None:
    """Return the token of an ``Authorization: Bearer <token>`` header, if any."""
    header = request.headers.get("Authorization", "")
    if header[: len(BEARER_PREFIX)].lower() != BEARER_PREFIX:
        return None
    return header[len(BEARER_PREFIX) :].strip() or None


def current_principal() -> Principal:
    """Return the principal resolved by `auth_required`."""
    return g.principal


def auth_required(view: Callable[..., Any]) -> Callable[..., Any]:
    """Resolve the bearer token into ``g.principal`` before running `view`.

    Raises:
        UnauthenticatedError: If the token is missing or invalid.
    """

    @functools.wraps(view)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        token = bearer_token()
        if token is None:
            raise UnauthenticatedError()
        g.principal = queries.authenticate(container().uow(), token)
        g.token = token
        return view(*args, **kwargs)

    return wrapper


def json_body() -> dict[str, Any]:
    """Return the request's JSON object body, or ``{}`` if there is none."""
    body = request.get_json(silent=True)
    return body if isinstance(body, dict) else {}
