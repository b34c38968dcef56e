"""
Centralized error handlers for FastAPI.

Maps domain error kinds to HTTP responses.
No stack traces or internal details are exposed to clients.
All error responses use the ErrorResponse schema.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from dynamo_users.domain.users.errors import ErrorKind, UserDomainError

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_404 = 404
HTTP_500 = 500

STATUS_BY_KIND = {
    ErrorKind.INVALID_INPUT: HTTP_400,
    ErrorKind.NOT_FOUND: HTTP_404,
}

ERROR_BY_KIND = {
    ErrorKind.INVALID_INPUT: "Invalid input",
    ErrorKind.NOT_FOUND: "User not found",
    ErrorKind.CONDITIONAL_FAILURE: "User update precondition failed",
    ErrorKind.STORE_UNAVAILABLE: "Storage error",
    ErrorKind.SERIALIZATION_FAILURE: "Storage error",
}


def _error_response(status_code: int, error: str, detail: str | None = None) -> JSONResponse:
    """Build a consistent JSON error response."""
    body: dict[str, str | None] = {"error": error}
    if detail:
        body["detail"] = detail
    return JSONResponse(status_code=status_code, content=body)


def status_for(kind: ErrorKind) -> int:
    """Return the HTTP status for an error kind. Unlisted kinds are 500."""
    return STATUS_BY_KIND.get(kind, HTTP_500)


def register_error_handlers(app: FastAPI) -> None:
    """Register all error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(RequestValidationError)
    async def handle_malformed_body(
        _request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Malformed or wrongly typed bodies never reach a use case."""
        logger.warning("Rejected malformed request body (%d errors)", len(exc.errors()))
        return _error_response(HTTP_400, "Invalid request body")

    @app.exception_handler(UserDomainError)
    async def handle_user_domain(
        _request: Request, exc: UserDomainError
    ) -> JSONResponse:
        """Translate a users domain error by its kind."""
        status_code = status_for(exc.kind)
        error = ERROR_BY_KIND.get(exc.kind, "Internal server error")
        if status_code < HTTP_500:
            logger.warning("%s: %s", error, exc.message)
            return _error_response(status_code, error, exc.message)
        logger.error("%s: %s", error, exc.message)
        return _error_response(status_code, error)

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return _error_response(HTTP_500, "Internal server error")
