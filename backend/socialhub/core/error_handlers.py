"""Global exception handlers: every failure leaves the API in the same envelope.

- AppError -> its own status, type and details
- RequestValidationError -> 422 with ``{field: [messages]}`` details
- Starlette HTTPException (unknown route, wrong method) -> its status
- Exception (catch-all) -> 500, details only in the server log
"""

import logging
from typing import Dict, List

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from socialhub.core.errors import AppError, ErrorType
from socialhub.core.responses import UnicodeJSONResponse

logger = logging.getLogger(__name__)

_REQUEST_SOURCES = ("body", "query", "path", "header", "cookie")


def register_error_handlers(app: FastAPI, allowed_origins: List[str]) -> None:
    """Register all global error handlers on the FastAPI app."""

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        logger.warning(
            f"{exc.error_type.value}: {exc.message}",
            extra={"path": request.url.path, "method": request.method, "status_code": exc.status_code},
        )
        return UnicodeJSONResponse(status_code=exc.status_code, content=exc.to_response())

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        details = format_validation_errors(exc.errors())
        logger.info(
            f"Validation failed on {request.method} {request.url.path}: {details}",
            extra={"path": request.url.path, "method": request.method, "status_code": 422},
        )
        return UnicodeJSONResponse(
            status_code=422,
            content={
                "success": False,
                "error": {
                    "message": "Validation failed",
                    "type": ErrorType.VALIDATION.value,
                    "details": details,
                },
            },
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == status.HTTP_404_NOT_FOUND:
            error_type = ErrorType.NOT_FOUND
            message = f"Cannot {request.method} {request.url.path}"
        else:
            error_type = ErrorType.BAD_REQUEST
            message = str(exc.detail)
        return UnicodeJSONResponse(
            status_code=exc.status_code,
            content={"success": False, "error": {"message": message, "type": error_type.value}},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Catch-all, never leaks internal details to the client."""
        logger.error(
            f"Unhandled exception on {request.method} {request.url.path}: {exc}",
            exc_info=exc,
            extra={"path": request.url.path, "method": request.method, "status_code": 500},
        )

        # This handler runs outside the CORS middleware, so add the headers here
        origin = request.headers.get("origin")
        headers = {}
        if origin in allowed_origins:
            headers["Access-Control-Allow-Origin"] = origin
            headers["Access-Control-Allow-Credentials"] = "true"

        return UnicodeJSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "success": False,
                "error": {"message": "Internal server error", "type": ErrorType.INTERNAL_SERVER.value},
            },
            headers=headers,
        )


def format_validation_errors(errors) -> Dict[str, List[str]]:
    """Group pydantic errors by field path, dropping the request-source prefix."""
    details: Dict[str, List[str]] = {}
    for error in errors:
        loc = [str(part) for part in error.get("loc", ())]
        if len(loc) > 1 and loc[0] in _REQUEST_SOURCES:
            loc = loc[1:]
        field = ".".join(loc) or "unknown"

        message = error.get("msg", "Invalid value")
        # Messages from our own field validators arrive as "Value error, <text>"
        if message.startswith("Value error, "):
            message = message[len("Value error, "):]
        details.setdefault(field, []).append(message)
    return details
