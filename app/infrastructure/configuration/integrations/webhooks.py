"""Webhook notification settings."""

from pydantic import Field

from infrastructure.configuration.base import IntegrationSettings


class WebhookSettings(IntegrationSettings):
    """Slack incoming-webhook notification configuration.

    Environment Variables:
        ALLOW_NOTIF: Gates every outbound notification (default: false)
        ALLOW_LOG_NOTIF: Additionally gates log notifications (default: false)
        ERROR_HOOK: Webhook URL receiving error notifications
        LOG_HOOK: Webhook URL receiving log notifications
        WEBHOOK_TIMEOUT_SECONDS: Transport timeout for a single POST
        WEBHOOK_MAX_WORKERS: Size of the background dispatch pool

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        if settings.webhooks.ALLOW_NOTIF:
            hook = settings.webhooks.ERROR_HOOK
        ```
    """

    ALLOW_NOTIF: bool = False
    ALLOW_LOG_NOTIF: bool = False
    ERROR_HOOK: str = ""
    LOG_HOOK: str = ""
    WEBHOOK_TIMEOUT_SECONDS: float = Field(default=10.0, gt=0)
    WEBHOOK_MAX_WORKERS: int = Field(default=4, ge=1)
