"""Uniform API responses.

Every helper writes exactly once to a ResponseSink and returns the finalized
response. Helpers taking a request localize their message through the
request's ``lang`` query parameter.

Envelope:
    {"success": bool, "data": any, "message": any}

Lean shape, for single resources and lists:
    {"data": any}

Usage:
    from infrastructure.http import responses
    from infrastructure.services import ResponseSinkDep

    @router.get("/items/{item_id}")
    def get_item(item_id: str, request: Request, sink: ResponseSinkDep):
        item = repository.get(item_id)
        if item is None:
            return responses.not_found(sink, request)
        return responses.success_with_data(sink, item)
"""

import asyncio
from typing import Any, Optional

from infrastructure.http.sinks import ResponseSink
from infrastructure.i18n.service import translate
from infrastructure.i18n.translator import Translator
from infrastructure.logging import get_module_logger
from infrastructure.notifications.dispatcher import Notifier
from infrastructure.notifications.models import describe_error

logger = get_module_logger()


def custom(
    sink: ResponseSink,
    status_code: int,
    success: bool,
    data: Any = None,
    message: Any = None,
) -> Any:
    """Write the standard envelope with a caller-chosen status."""
    sink.set_status(status_code)
    return sink.write_json({"success": success, "data": data, "message": message})


def custom_data(sink: ResponseSink, data: Any, status_code: Optional[int] = None) -> Any:
    """Write the lean ``{"data": ...}`` shape, 200 unless status_code is given."""
    sink.set_status(status_code or 200)
    return sink.write_json({"data": data})


def bad_request(
    sink: ResponseSink, request: Any, translator: Optional[Translator] = None
) -> Any:
    """400 Bad Request for missing or invalid parameters."""
    return custom(
        sink, 400, False, None, translate(request, "missing_parameters", translator)
    )


def bad_request_with_message(sink: ResponseSink, message: Any) -> Any:
    """400 Bad Request carrying message as given, e.g. a validation error list."""
    return custom(sink, 400, False, None, message)


def conflict(
    sink: ResponseSink, request: Any, translator: Optional[Translator] = None
) -> Any:
    """409 Conflict when the resource already exists."""
    return custom(sink, 409, False, None, translate(request, "already_exist", translator))


def not_found(
    sink: ResponseSink, request: Any, translator: Optional[Translator] = None
) -> Any:
    """404 Not Found.

    Reports ``success: True`` with empty data; existing API consumers rely
    on this pairing.
    """
    return custom(sink, 404, True, {}, translate(request, "not_found", translator))


def success(
    sink: ResponseSink, request: Any, translator: Optional[Translator] = None
) -> Any:
    """201 Created with the operation-succeeded message.

    Reports ``success: False``; existing API consumers rely on this pairing.
    """
    return custom(
        sink, 201, False, None, translate(request, "successfull_operation", translator)
    )


def success_with_payload(sink: ResponseSink, data: Any) -> Any:
    """201 Created returning data in the lean shape."""
    return custom_data(sink, data, 201)


def forbidden(
    sink: ResponseSink, request: Any, translator: Optional[Translator] = None
) -> Any:
    """403 Forbidden as a plain text body."""
    sink.set_status(403)
    return sink.write_text(translate(request, "forbidden", translator))


def unauthorized(
    sink: ResponseSink, request: Any, translator: Optional[Translator] = None
) -> Any:
    """401 Unauthorized as a plain text body."""
    sink.set_status(401)
    return sink.write_text(translate(request, "unauthorized", translator))


def unprocessable_content(
    sink: ResponseSink, request: Any, translator: Optional[Translator] = None
) -> Any:
    """422 Unprocessable Content as a plain text body."""
    sink.set_status(422)
    return sink.write_text(translate(request, "422_error", translator))


def success_with_data(sink: ResponseSink, data: Any) -> Any:
    """200 OK with data as the raw JSON body."""
    sink.set_status(200)
    return sink.write_json(data)


def success_with_data_list(sink: ResponseSink, data: Any) -> Any:
    """200 OK with data wrapped under ``data``."""
    return custom_data(sink, data, 200)


async def error(
    sink: ResponseSink,
    err: Any,
    notifier: Optional[Notifier] = None,
    wait_timeout: Optional[float] = None,
) -> Any:
    """500 Internal Server Error, reported on the error webhook first.

    The notification is awaited for at most wait_timeout seconds (the
    notifier's transport timeout by default). Whether it is delivered,
    fails, or is still pending, the 500 response is written.

    An exception is reported in ``message`` as its code, message, cause and
    stack. Any other error value is sent as given.

    Args:
        sink: Response sink.
        err: The uncaught exception, or a raw error value.
        notifier: Notifier to report through. Defaults to the application notifier.
        wait_timeout: Bound on the wait for the notification.
    """
    logger.error("request_failed", error=str(err), error_type=type(err).__name__)

    if notifier is None:
        from infrastructure.services.providers import get_notifier

        notifier = get_notifier()

    try:
        future = notifier.notify_exception(err)
    except Exception as e:  # pylint: disable=broad-except
        logger.error("error_notification_not_submitted", error=str(e))
        future = None

    if future is not None:
        timeout = notifier.timeout if wait_timeout is None else wait_timeout
        try:
            # Shielded so a timeout does not cancel a delivery still queued
            await asyncio.wait_for(asyncio.shield(asyncio.wrap_future(future)), timeout)
        except asyncio.TimeoutError:
            logger.warning("error_notification_wait_timed_out", timeout=timeout)
        except Exception as e:  # pylint: disable=broad-except
            logger.warning("error_notification_wait_failed", error=str(e))

    message = describe_error(err) if isinstance(err, BaseException) else err
    return custom(sink, 500, False, None, message)
