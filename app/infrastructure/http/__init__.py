"""HTTP response helpers shared by API routes.

Exports the response sinks, the response formatters (as the ``responses``
module) and the exception handlers wiring them into FastAPI.
"""

from infrastructure.http import responses
from infrastructure.http.handlers import (
    handle_uncaught_exception,
    handle_validation_errors,
    register_exception_handlers,
)
from infrastructure.http.sinks import (
    ResponseAlreadySentError,
    ResponseSink,
    StarletteResponseSink,
)

__all__ = [
    "responses",
    "ResponseSink",
    "StarletteResponseSink",
    "ResponseAlreadySentError",
    "handle_validation_errors",
    "handle_uncaught_exception",
    "register_exception_handlers",
]
