"""
Rate limiting for the customer creation endpoint.

Every POST /customers costs one zip code API call and one store write,
so clients are limited per remote address (settings.rate_limit_default).
Limits live in slowapi's in-process memory storage; counters are not
shared between workers.
"""

from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.requests import Request
from starlette.responses import JSONResponse

from app.core.config import settings

limiter = Limiter(
    key_func=get_remote_address, default_limits=[settings.rate_limit_default]
)


async def rate_limit_exceeded_handler(
    _request: Request, exc: RateLimitExceeded
) -> JSONResponse:
    """Answer 429 in the shared ErrorResponse shape.

    The detail carries the limit that was hit (e.g. "60 per 1 minute"),
    never the client address.
    """
    return JSONResponse(
        status_code=429,
        content={"error": "Rate limit exceeded", "detail": str(exc.detail)},
    )
