"""Webhook transports."""

from infrastructure.notifications.channels.base import WebhookTransport
from infrastructure.notifications.channels.webhook import RequestsWebhookTransport

__all__ = ["WebhookTransport", "RequestsWebhookTransport"]
