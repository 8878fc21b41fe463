# storefront/errors.py
import logging

from flask import jsonify, request
from werkzeug.exceptions import HTTPException

from .utils.api import api_error

logger = logging.getLogger(__name__)


class StoreError(Exception):
    """Expected failure that maps straight onto an HTTP response."""

    status_code = 400

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class InvalidInput(StoreError):
    status_code = 400


class NotFound(StoreError):
    status_code = 404


class BusinessRuleViolation(StoreError):
    status_code = 400


class CatalogError(ValueError):
    """Raised while loading a malformed catalog; aborts app startup."""


def register_error_handlers(app):
    @app.errorhandler(StoreError)
    def handle_store_error(e: StoreError):
        logger.info("%s %s rejected: %s", request.method, request.path, e.message)
        r = jsonify(api_error(e.message))
        r.status_code = e.status_code
        return r

    @app.errorhandler(HTTPException)
    def handle_http_error(e: HTTPException):
        # keep Flask's HTML pages outside the JSON api
        if not request.path.startswith("/api"):
            return e
        r = jsonify(api_error(e.description or e.name))
        r.status_code = e.code or 500
        return r
