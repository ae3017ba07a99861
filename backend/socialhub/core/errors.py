"""Error hierarchy for the SocialHub API.

Every error a handler raises on purpose is an ``AppError``: it carries the
error type, the HTTP status and optional field-level details, and renders
itself into the response envelope with ``to_response()``. Anything that is
not an ``AppError`` is treated as an internal failure by the global handler.
"""

from enum import Enum
from typing import Any, Dict, Optional


class ErrorType(str, Enum):
    BAD_REQUEST = "BAD_REQUEST"
    UNAUTHORIZED = "UNAUTHORIZED"
    FORBIDDEN = "FORBIDDEN"
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"
    VALIDATION = "VALIDATION"
    INTERNAL_SERVER = "INTERNAL_SERVER"


class AppError(Exception):
    """Base exception for all expected, user-facing errors."""

    def __init__(
        self,
        message: str,
        error_type: ErrorType = ErrorType.INTERNAL_SERVER,
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_type = error_type
        self.status_code = status_code
        self.details = details

    def to_response(self) -> dict:
        error = {"message": self.message, "type": self.error_type.value}
        if self.details is not None:
            error["details"] = self.details
        return {"success": False, "error": error}


class BadRequestError(AppError):
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, ErrorType.BAD_REQUEST, 400, details)


class UnauthorizedError(AppError):
    def __init__(self, message: str = "Unauthorized", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, ErrorType.UNAUTHORIZED, 401, details)


class ForbiddenError(AppError):
    def __init__(self, message: str = "Forbidden", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, ErrorType.FORBIDDEN, 403, details)


class NotFoundError(AppError):
    def __init__(self, message: str = "Resource not found", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, ErrorType.NOT_FOUND, 404, details)


class ConflictError(AppError):
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, ErrorType.CONFLICT, 409, details)


class ValidationFailedError(AppError):
    def __init__(self, message: str = "Validation failed", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, ErrorType.VALIDATION, 422, details)
