from fastapi import status

from landra.services.errors import (
    AuthorizationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from .base import build_response


def bad_request_error(error: str = "Bad request"):
    return build_response(
        status.HTTP_400_BAD_REQUEST,
        "failure",
        error="bad_request",
        message=error,
    )


def conflict_error(error: str = "Resource already exists"):
    return build_response(
        status.HTTP_409_CONFLICT,
        "failure",
        error="conflict",
        message=error,
    )


def not_found_error(error: str = "Resource not found or unauthorized"):
    return build_response(
        status.HTTP_404_NOT_FOUND,
        "failure",
        error="not_found",
        message=error,
    )


def unauthorized_error(error: str = "Not authenticated"):
    return build_response(
        status.HTTP_401_UNAUTHORIZED,
        "failure",
        error="unauthorized",
        message=error,
    )


def internal_server_error(error: str = "Something went wrong. Please try again."):
    return build_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "failure",
        error="internal_server_error",
        message=error,
    )


def error_response(error):
    """Render a service-layer error with the matching status code."""
    if isinstance(error, ValidationError):
        return bad_request_error(error.message)
    if isinstance(error, NotFoundError):
        return not_found_error(error.message)
    if isinstance(error, AuthorizationError):
        return unauthorized_error(error.message)
    if isinstance(error, ConflictError):
        return conflict_error(error.message)
    return internal_server_error(error.message)
