"""Webhook transport abstract base class.

Transports perform a single POST and raise on any failure. Containment of
those failures is the dispatcher's concern.
"""

from abc import ABC, abstractmethod

from infrastructure.notifications.models import NotificationPayload


class WebhookTransport(ABC):
    """Delivers one JSON payload to one webhook URL."""

    @abstractmethod
    def post(self, url: str, payload: NotificationPayload) -> None:
        """POST payload as JSON to url.

        Raises:
            Exception: Any transport or HTTP status failure.
        """
