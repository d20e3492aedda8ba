# utils/error_handlers.py
import logging

from flask import request
from mongoengine.errors import ValidationError
from werkzeug.exceptions import HTTPException, NotFound

from services.students_service import StudentServiceError
from utils import response

logger = logging.getLogger(__name__)

SERVICE_ERROR_MESSAGES = {
    404: "Not Found",
    409: "Conflict",
}


def register_error_handlers(app):
    """Convert anything a view lets escape into the standard envelope."""

    @app.errorhandler(StudentServiceError)
    def handle_service_error(exc):
        logger.warning("%s %s failed: %s", request.method, request.path, exc.message)
        if exc.status_code == 404:
            return response.not_found(exc.message)
        return response.error(
            status_code=exc.status_code,
            errors=[exc.message],
            message=SERVICE_ERROR_MESSAGES.get(exc.status_code, "An error occurred")
        )

    @app.errorhandler(ValidationError)
    def handle_model_validation_error(exc):
        logger.warning("%s %s rejected by model: %s", request.method, request.path, exc)
        return response.validation_error([str(exc)])

    @app.errorhandler(NotFound)
    def handle_unknown_route(exc):
        return response.not_found(f"{request.path} does not exist")

    @app.errorhandler(HTTPException)
    def handle_http_error(exc):
        return response.error(status_code=exc.code, errors=[exc.description], message=exc.name)

    @app.errorhandler(Exception)
    def handle_unexpected_error(exc):
        logger.exception("Unhandled error on %s %s", request.method, request.path)
        return response.server_error()
