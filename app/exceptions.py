from typing import Any, Mapping, Optional


class AppError(Exception):
    """Base class for errors raised by the lessons and the catalog.

    Attributes:
        message: human-readable message
        details: optional mapping with extra context
        code: optional machine-readable error code
        http_status: suggested HTTP status code for handlers
    """

    http_status = 500
    default_message = "Application error"

    def __init__(self, message: Optional[str] = None, details: Optional[Mapping[str, Any]] = None, code: Optional[str] = None):
        message = message or self.default_message
        super().__init__(message)
        self.message = message
        self.details = details
        self.code = code

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"message": self.message}
        if self.code:
            payload["code"] = self.code
        if self.details:
            payload["details"] = self.details
        return payload

    def __str__(self) -> str:
        return self.message


class ServiceValidationError(AppError):
    """Raised when input data is invalid or a precondition for a call is not met."""

    http_status = 400
    default_message = "Invalid input"


class UnauthorizedError(AppError):
    """Raised when an access check refuses the caller."""

    http_status = 401
    default_message = "Unauthorized"


class NotFoundError(AppError):
    """Raised when a requested lesson, order or saved setting does not exist."""

    http_status = 404
    default_message = "Not found"


class ConflictError(AppError):
    """Raised when an entry with the same key already exists."""

    http_status = 409
    default_message = "Conflict"


class UnsupportedOperationError(AppError):
    """Raised by a subtype that cannot honour an operation its base type promises.

    This is what the problematic Liskov examples throw; the better versions
    never need it.
    """

    http_status = 501
    default_message = "Operation not supported"
