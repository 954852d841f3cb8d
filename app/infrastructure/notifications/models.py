"""Webhook notification payloads.

Payloads are Slack Block Kit documents (``{"blocks": [...]}``) built per
call site and discarded once posted.
"""

import traceback
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

NotificationPayload = Dict[str, Any]

TIMESTAMP_FORMAT = "%d/%m/%Y\t%H:%M:%S"


class NotificationKind(str, Enum):
    """Webhook channel a payload is delivered to."""

    ERROR = "error"
    LOG = "log"


def format_timestamp(now: Optional[datetime] = None) -> str:
    return (now or datetime.now()).strftime(TIMESTAMP_FORMAT)


def section_block(text: str) -> Dict[str, Any]:
    return {"type": "section", "text": {"type": "mrkdwn", "text": text}}


def context_block(text: str) -> Dict[str, Any]:
    return {"type": "context", "elements": [{"type": "mrkdwn", "text": text}]}


def timestamp_block(now: Optional[datetime] = None) -> Dict[str, Any]:
    return section_block(f"`{format_timestamp(now)}`")


def blocks_payload(blocks: List[Dict[str, Any]]) -> NotificationPayload:
    return {"blocks": blocks}


def describe_error(error: Any) -> Dict[str, Any]:
    """Extract code, message, cause and stack from an error value.

    Non-exception values are reported through their string form only.
    """
    if not isinstance(error, BaseException):
        return {"code": None, "message": str(error), "cause": None, "stack": None}

    code = getattr(error, "code", None)
    if code is None:
        code = getattr(error, "errno", None)
    cause = error.__cause__ or error.__context__
    return {
        "code": code,
        "message": str(error),
        "cause": repr(cause) if cause is not None else None,
        "stack": "".join(
            traceback.format_exception(type(error), error, error.__traceback__)
        ),
    }


def build_error_payload(
    error: Any, environment: str, now: Optional[datetime] = None
) -> NotificationPayload:
    """Payload reporting an uncaught server error."""
    details = describe_error(error)
    text = (
        f"*ERROR {details['code']} - ENV {environment}* \n"
        f" MESSAGE: {details['message']}\n"
        f" CAUSE: {details['cause']} \n"
        f" STACK: {details['stack']}"
    )
    return blocks_payload([timestamp_block(now), context_block(text)])


def build_failure_payload(
    detail: Any, now: Optional[datetime] = None
) -> NotificationPayload:
    """Payload reporting that a previous notification could not be delivered."""
    return blocks_payload(
        [
            timestamp_block(now),
            context_block(f"*error while sending notification* \n{detail}"),
        ]
    )


def build_log_payload(
    title: str, text: str = "", now: Optional[datetime] = None
) -> NotificationPayload:
    """Payload for an operational log event."""
    body = f"*{title}*" if not text else f"*{title}* \n{text}"
    return blocks_payload([timestamp_block(now), context_block(body)])
