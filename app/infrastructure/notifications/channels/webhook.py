"""Webhook transport implementation using requests."""

from typing import Optional

import requests

from infrastructure.logging import get_module_logger
from infrastructure.notifications.channels.base import WebhookTransport
from infrastructure.notifications.models import NotificationPayload

logger = get_module_logger()


class RequestsWebhookTransport(WebhookTransport):
    """POSTs payloads with ``requests``.

    A single attempt per call. Non-2xx responses raise
    ``requests.HTTPError``.
    """

    def __init__(self, timeout: float = 10.0, session: Optional[requests.Session] = None):
        self.timeout = timeout
        self.session = session

    def post(self, url: str, payload: NotificationPayload) -> None:
        client = self.session or requests
        response = client.post(url, json=payload, timeout=self.timeout)
        response.raise_for_status()
        logger.debug(
            "webhook_posted",
            status_code=response.status_code,
            block_count=len(payload.get("blocks", [])),
        )
