"""Best-effort webhook notification dispatcher.

Notifications are posted from a managed thread pool. A delivery failure is
re-reported once on the error webhook; a failure of that report is logged
and dropped. Nothing raised by a transport ever reaches the caller.
"""

from concurrent.futures import Executor, Future, ThreadPoolExecutor
from threading import Lock
from typing import Optional

from infrastructure.configuration import WebhookSettings
from infrastructure.logging import get_module_logger
from infrastructure.notifications.channels import (
    RequestsWebhookTransport,
    WebhookTransport,
)
from infrastructure.notifications.models import (
    NotificationKind,
    NotificationPayload,
    build_error_payload,
    build_failure_payload,
)

logger = get_module_logger()


class Notifier:
    """Fire-and-forget delivery of payloads to the configured webhooks.

    Attributes:
        settings: Webhook URLs, enablement flags and transport timeout.
        environment: Runtime environment name reported in error payloads.
        transport: WebhookTransport performing the POST.
    """

    def __init__(
        self,
        settings: WebhookSettings,
        environment: str = "development",
        transport: Optional[WebhookTransport] = None,
        executor: Optional[Executor] = None,
    ):
        self.settings = settings
        self.environment = environment
        self.transport = transport or RequestsWebhookTransport(
            timeout=settings.WEBHOOK_TIMEOUT_SECONDS
        )
        self._executor = executor
        self._owns_executor = executor is None
        self._executor_lock = Lock()
        self._shutdown = False

    @property
    def timeout(self) -> float:
        """Upper bound of a single delivery, as enforced by the transport."""
        return self.settings.WEBHOOK_TIMEOUT_SECONDS

    def notify(
        self, hook_url: str, payload: NotificationPayload
    ) -> Optional["Future[bool]"]:
        """Submit payload for delivery to hook_url.

        Returns immediately. The returned future resolves to True when the
        payload was delivered and False otherwise; it never raises. None is
        returned when nothing was submitted (notifications disabled, no URL,
        or the notifier was shut down).
        """
        if not self.settings.ALLOW_NOTIF:
            return None

        if not hook_url:
            logger.warning("notification_hook_missing")
            return None

        executor = self._get_or_create_executor()
        if executor is None:
            logger.warning("notification_dropped_after_shutdown")
            return None

        try:
            return executor.submit(self._deliver, hook_url, payload)
        except RuntimeError as e:
            # Executor shut down between the check and the submission
            logger.warning("notification_submit_failed", error=str(e))
            return None

    def notify_error(self, payload: NotificationPayload) -> Optional["Future[bool]"]:
        """Deliver payload to the error webhook."""
        return self.notify(self.settings.ERROR_HOOK, payload)

    def notify_log(self, payload: NotificationPayload) -> Optional["Future[bool]"]:
        """Deliver payload to the log webhook when log notifications are enabled."""
        if not self.settings.ALLOW_LOG_NOTIF:
            return None
        return self.notify(self.settings.LOG_HOOK, payload)

    def notify_exception(self, error: object) -> Optional["Future[bool]"]:
        """Report an uncaught error on the error webhook."""
        return self.notify_error(build_error_payload(error, self.environment))

    def shutdown(self, wait: bool = True) -> None:
        """Stop accepting notifications and release the owned thread pool.

        Idempotent.
        """
        executor = None
        with self._executor_lock:
            self._shutdown = True
            if self._owns_executor:
                executor, self._executor = self._executor, None

        if executor is not None:
            executor.shutdown(wait=wait)
            logger.info("notifier_shutdown", wait=wait)

    def _get_or_create_executor(self) -> Optional[Executor]:
        with self._executor_lock:
            if self._shutdown:
                return None
            if self._executor is None:
                self._executor = ThreadPoolExecutor(
                    max_workers=self.settings.WEBHOOK_MAX_WORKERS,
                    thread_name_prefix="notifier",
                )
                logger.debug(
                    "created_notification_executor",
                    max_workers=self.settings.WEBHOOK_MAX_WORKERS,
                )
            return self._executor

    def _deliver(self, hook_url: str, payload: NotificationPayload) -> bool:
        try:
            self.transport.post(hook_url, payload)
        except Exception as e:  # pylint: disable=broad-except
            logger.warning("notification_delivery_failed", error=str(e))
            self._report_failure(e)
            return False

        logger.debug("notification_delivered")
        return True

    def _report_failure(self, failure: Exception) -> None:
        """Single attempt to report a failed delivery on the error webhook."""
        hook_url = self.settings.ERROR_HOOK
        if not hook_url:
            logger.error("failure_notification_skipped", reason="no error hook")
            return

        try:
            self.transport.post(hook_url, build_failure_payload(failure))
        except Exception as e:  # pylint: disable=broad-except
            logger.error(
                "failure_notification_dropped",
                kind=NotificationKind.ERROR.value,
                error=str(e),
                original_error=str(failure),
            )
