"""
File: exceptions.py
Purpose: Error taxonomy shared by services and routes, and its mapping to HTTP responses.
"""
import logging

from flask import jsonify
from werkzeug.exceptions import HTTPException

logger = logging.getLogger(__name__)


class LibraryError(Exception):
    status_code = 500
    default_message = "Server error"

    def __init__(self, message=None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message


class InvalidRequest(LibraryError):
    status_code = 400
    default_message = "Invalid request"


class Unauthenticated(LibraryError):
    status_code = 401
    default_message = "Missing or invalid token"


class Forbidden(LibraryError):
    status_code = 403
    default_message = "Access denied"


class NotFound(LibraryError):
    status_code = 404
    default_message = "Not found"


class StoreFailure(LibraryError):
    """Underlying data-layer error. The driver message is logged, never returned."""
    status_code = 500
    default_message = "Database error"


def register_error_handlers(app):
    """Attaches JSON error handlers for the taxonomy above to a Flask app."""

    @app.errorhandler(LibraryError)
    def handle_library_error(error):
        return jsonify({"message": error.message}), error.status_code

    @app.errorhandler(HTTPException)
    def handle_http_exception(error):
        return jsonify({"message": error.description}), error.code

    @app.errorhandler(Exception)
    def handle_unexpected(error):
        logger.exception("Unhandled error: %s", error)
        return jsonify({"message": "Server error"}), 500
