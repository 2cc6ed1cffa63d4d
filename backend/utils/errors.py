# backend/utils/errors.py
import logging

from flask import jsonify, request
from pymongo.errors import PyMongoError
from werkzeug.exceptions import HTTPException

logger = logging.getLogger(__name__)


class ApiError(Exception):
    status_code = 500

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(ApiError):
    status_code = 400


class UnauthorizedError(ApiError):
    status_code = 401


class NotFoundError(ApiError):
    status_code = 404


def error_response(status_code, message):
    body = {"status": status_code, "message": message, "data": None}
    return jsonify(body), status_code


def register_error_handlers(app):

    @app.errorhandler(ApiError)
    def handle_api_error(exc):
        logger.warning("%s %s -> %s: %s", request.method, request.path, exc.status_code, exc.message)
        return error_response(exc.status_code, exc.message)

    @app.errorhandler(HTTPException)
    def handle_http_error(exc):
        return error_response(exc.code, exc.description)

    @app.errorhandler(PyMongoError)
    def handle_db_error(exc):
        logger.exception("Database error on %s %s", request.method, request.path)
        return error_response(500, "Database error")

    @app.errorhandler(Exception)
    def handle_unexpected(exc):
        logger.exception("Unhandled error on %s %s", request.method, request.path)
        return error_response(500, "Internal server error")

