"""Integration settings __init__ - exports all integration settings."""

from infrastructure.configuration.integrations.webhooks import WebhookSettings

__all__ = [
    "WebhookSettings",
]
