"""
Error taxonomy shared by the service layer.

Every error carries a user-facing ``message`` and a short ``code`` that the
routes copy into the ``error`` field of the JSON envelope.
"""
from pydantic import ValidationError as PydanticValidationError


class LandraError(Exception):
    code = "error"
    default_message = "Something went wrong. Please try again."

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(LandraError):
    code = "bad_request"
    default_message = "Invalid input"

    @classmethod
    def from_pydantic(cls, exc: PydanticValidationError) -> "ValidationError":
        """Report only the first offending field."""
        return cls(first_error_message(exc.errors()))


class AuthorizationError(LandraError):
    code = "unauthorized"
    default_message = "Not authenticated"


class NotFoundError(AuthorizationError):
    """Missing and foreign ids both land here with the same wording."""

    code = "not_found"
    default_message = "Resource not found or unauthorized"


class ConflictError(LandraError):
    code = "conflict"
    default_message = "Resource already exists"


class StorageError(LandraError):
    code = "internal_server_error"
    default_message = "Something went wrong. Please try again."


def first_error_message(errors) -> str:
    if not errors:
        return ValidationError.default_message
    error = errors[0]
    message = error.get("msg", ValidationError.default_message)
    if message.startswith("Value error, "):
        message = message[len("Value error, "):]
    field = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
    return f"{field}: {message}" if field else message
