from fastapi import FastAPI, Request
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address

from infrastructure.http import StarletteResponseSink, responses
from infrastructure.i18n import translate

limiter = Limiter(
    key_func=get_remote_address,
)


async def rate_limit_handler(request: Request, exc: Exception):
    """Return 429 with the localized rate-limit message in the standard envelope."""
    if isinstance(exc, RateLimitExceeded):
        return responses.custom(
            StarletteResponseSink(),
            429,
            False,
            None,
            translate(request, "too_many_requests"),
        )


def setup_rate_limiter(app: FastAPI):
    """
    Setup rate limiting for the FastAPI application.
    """
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_handler)


def get_limiter():
    """
    Returns the limiter instance.
    """
    return limiter
