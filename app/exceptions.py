from typing import Any, Mapping, Optional


class AppError(Exception):
    """Base class for errors that map onto an HTTP status.

    Attributes:
        message: human-readable message
        details: optional mapping with extra context (ids, field values)
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
    """Raised when input data is invalid or a precondition for a service call is not met.

    Used for a path id that disagrees with the id in the request body. http_status is 400.
    """

    http_status = 400
    default_message = "Invalid input"


class NotFoundError(AppError):
    """Raised when a requested resource was not found, or vanished before commit. http_status is 404."""

    http_status = 404
    default_message = "Not found"


class ConflictError(AppError):
    """Raised when a resource conflict occurs. http_status is 409."""

    http_status = 409
    default_message = "Conflict"
