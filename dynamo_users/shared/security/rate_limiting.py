"""
Rate limiting configuration and setup.

Uses slowapi to enforce per-client request limits.
Limits apply to every route once SlowAPIMiddleware is installed.
"""

from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.requests import Request
from starlette.responses import JSONResponse


def build_limiter(default_limit: str) -> Limiter:
    """Return a limiter keyed by client address.

    Args:
        default_limit: slowapi limit string, e.g. "120/minute".
    """
    return Limiter(key_func=get_remote_address, default_limits=[default_limit])


def rate_limit_exceeded_handler(
    _request: Request, exc: RateLimitExceeded
) -> JSONResponse:
    """Handle rate limit exceeded errors with a clean JSON response.

    Synchronous because SlowAPIMiddleware calls it without awaiting.
    """
    return JSONResponse(
        status_code=429,
        content={"error": "Rate limit exceeded", "detail": str(exc.detail)},
    )
