"""Mapping of the error taxonomy onto JSON HTTP responses.

| Error                              | Status |
|------------------------------------|--------|
| ValidationError                    | 422    |
| UnauthenticatedError               | 401    |
| ForbiddenError                     | 403    |
| NotFoundError                      | 404    |
| ConflictError                      | 409    |
| StorageError / anything unexpected | 500    |
"""

from __future__ import annotations

import logging

from flask import Flask
from werkzeug.exceptions import HTTPException

from postdesk.domain.errors import (
    ConflictError,
    ForbiddenError,
    NotFoundError,
    ValidationError,
)
from postdesk.interfaces.identity import UnauthenticatedError

logger = logging.getLogger(__name__)

SERVER_ERROR_MESSAGE = "Server Error"


def register_error_handlers(app: Flask) -> None:
    """Install the JSON error handlers on `app`."""

    @app.errorhandler(ValidationError)
    def _validation(e: ValidationError):
        return {"message": str(e), "errors": e.errors}, 422

    @app.errorhandler(UnauthenticatedError)
    def _unauthenticated(e: UnauthenticatedError):
        return {"message": str(e)}, 401

    @app.errorhandler(ForbiddenError)
    def _forbidden(e: ForbiddenError):
        return {"message": str(e)}, 403

    @app.errorhandler(NotFoundError)
    def _not_found(e: NotFoundError):
        return {"message": str(e)}, 404

    @app.errorhandler(ConflictError)
    def _conflict(e: ConflictError):
        return {"message": str(e)}, 409

    @app.errorhandler(HTTPException)
    def _http(e: HTTPException):
        return {"message": e.description or e.name}, e.code or 500

    @app.errorhandler(Exception)
    def _unexpected(e: Exception):
        logger.exception("Unhandled error: %s", e)
        return {"message": SERVER_ERROR_MESSAGE}, 500
