"""Best-effort webhook notifications.

Usage:
    from infrastructure.notifications import Notifier, build_log_payload

    notifier = Notifier(settings.webhooks, environment=settings.ENVIRONMENT)
    notifier.notify_log(build_log_payload("application_startup"))
"""

from infrastructure.notifications.channels import (
    RequestsWebhookTransport,
    WebhookTransport,
)
from infrastructure.notifications.dispatcher import Notifier
from infrastructure.notifications.models import (
    NotificationKind,
    NotificationPayload,
    blocks_payload,
    build_error_payload,
    build_failure_payload,
    build_log_payload,
    context_block,
    describe_error,
    format_timestamp,
    section_block,
    timestamp_block,
)

__all__ = [
    "Notifier",
    "WebhookTransport",
    "RequestsWebhookTransport",
    "NotificationKind",
    "NotificationPayload",
    "blocks_payload",
    "build_error_payload",
    "build_failure_payload",
    "build_log_payload",
    "context_block",
    "describe_error",
    "format_timestamp",
    "section_block",
    "timestamp_block",
]
