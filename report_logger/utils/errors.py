from flask import jsonify
from werkzeug.exceptions import HTTPException
from marshmallow import ValidationError as SchemaValidationError
from sqlalchemy.exc import SQLAlchemyError

from report_logger.extensions import db


class ApiError(Exception):
    """
    Generic business error, rendered as ``{"error": message}``.
    """
    status_code = 400

    def __init__(self, message, status_code=None, errors=None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.errors = errors or {}


class ValidationError(ApiError):
    status_code = 400


class AuthError(ApiError):
    status_code = 401


class NotFoundError(ApiError):
    status_code = 404


class StorageError(ApiError):
    status_code = 500


def register_error_handlers(app):

    @app.errorhandler(ApiError)
    def handle_api_error(err: ApiError):
        response = {"error": err.message}
        if err.errors:
            response["errors"] = err.errors
        return jsonify(response), err.status_code

    @app.errorhandler(SchemaValidationError)
    def handle_marshmallow_validation(err: SchemaValidationError):
        messages = err.messages if hasattr(err, "messages") else str(err)
        fields = ", ".join(sorted(messages)) if isinstance(messages, dict) else ""
        response = {
            "error": f"Invalid or missing fields: {fields}" if fields else "Invalid data",
            "errors": messages,
        }
        return jsonify(response), 400

    @app.errorhandler(SQLAlchemyError)
    def handle_database_error(err: SQLAlchemyError):
        db.session.rollback()
        app.logger.exception("Database error: %s", err)
        return jsonify({"error": "Database error"}), 500

    @app.errorhandler(HTTPException)
    def handle_http_exception(err: HTTPException):
        response = {"error": err.description or "HTTP error"}
        return jsonify(response), err.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(err: Exception):
        # Full traceback in the server log, generic body for the client
        app.logger.exception(err)
        return jsonify({"error": "Internal server error"}), 500
