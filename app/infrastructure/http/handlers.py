"""FastAPI exception handlers built on the response formatters."""

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError

from infrastructure.http import responses
from infrastructure.http.sinks import StarletteResponseSink
from infrastructure.logging import get_module_logger

logger = get_module_logger()


async def handle_validation_errors(request: Request, exc: RequestValidationError):
    """Return 400 carrying the collected validation errors as-is."""
    errors = jsonable_encoder(exc.errors())
    logger.info(
        "request_validation_failed",
        path=request.url.path,
        error_count=len(errors),
    )
    sink = StarletteResponseSink()
    if not errors:
        return responses.bad_request(sink, request)
    return responses.bad_request_with_message(sink, errors)


async def handle_uncaught_exception(request: Request, exc: Exception):
    """Terminal handler for errors no route handled: notify, then 500."""
    from infrastructure.services.providers import get_notifier

    return await responses.error(StarletteResponseSink(), exc, notifier=get_notifier())


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the validation and uncaught-error handlers to app."""
    app.add_exception_handler(RequestValidationError, handle_validation_errors)
    app.add_exception_handler(Exception, handle_uncaught_exception)
