"""Unit tests for the Notifier.

Tests cover:
- No transport calls while notifications are disabled
- Background delivery returning a future
- Exactly one secondary report per failed delivery, never raised
- Log notification gating, empty hooks and shutdown
"""

import threading
from concurrent.futures import Future
from unittest.mock import MagicMock, call

import pytest
import requests

from infrastructure.configuration import WebhookSettings
from infrastructure.notifications import (
    Notifier,
    RequestsWebhookTransport,
    WebhookTransport,
    build_log_payload,
)

ERROR_HOOK = "https://hooks.example.com/services/error"
LOG_HOOK = "https://hooks.example.com/services/log"
OTHER_HOOK = "https://hooks.example.com/services/other"
PAYLOAD = {"blocks": [{"type": "section", "text": {"type": "mrkdwn", "text": "hi"}}]}


@pytest.mark.unit
class TestDisabledNotifier:
    """ALLOW_NOTIF=False performs no transport call whatever the input."""

    @pytest.fixture
    def disabled(self, mock_transport):
        settings = WebhookSettings(
            ALLOW_NOTIF=False, ALLOW_LOG_NOTIF=True, ERROR_HOOK=ERROR_HOOK, LOG_HOOK=LOG_HOOK
        )
        instance = Notifier(settings, transport=mock_transport)
        yield instance
        instance.shutdown()

    @pytest.mark.parametrize("hook_url", [OTHER_HOOK, "", "not a url"])
    @pytest.mark.parametrize("payload", [PAYLOAD, {}, {"blocks": []}])
    def test_notify_is_noop(self, disabled, mock_transport, hook_url, payload):
        assert disabled.notify(hook_url, payload) is None
        mock_transport.post.assert_not_called()

    def test_all_entry_points_are_noops(self, disabled, mock_transport):
        assert disabled.notify_error(PAYLOAD) is None
        assert disabled.notify_log(PAYLOAD) is None
        assert disabled.notify_exception(ValueError("boom")) is None
        mock_transport.post.assert_not_called()

    def test_no_executor_is_created(self, disabled):
        disabled.notify(OTHER_HOOK, PAYLOAD)

        assert disabled._executor is None


@pytest.mark.unit
class TestDelivery:
    def test_notify_returns_future_resolving_true(self, notifier, mock_transport):
        future = notifier.notify(OTHER_HOOK, PAYLOAD)

        assert isinstance(future, Future)
        assert future.result(timeout=5) is True
        mock_transport.post.assert_called_once_with(OTHER_HOOK, PAYLOAD)

    def test_notify_error_uses_error_hook(self, notifier, mock_transport):
        notifier.notify_error(PAYLOAD).result(timeout=5)

        mock_transport.post.assert_called_once_with(ERROR_HOOK, PAYLOAD)

    def test_notify_log_uses_log_hook(self, notifier, mock_transport):
        notifier.notify_log(PAYLOAD).result(timeout=5)

        mock_transport.post.assert_called_once_with(LOG_HOOK, PAYLOAD)

    def test_notify_exception_posts_error_payload(self, notifier, mock_transport):
        notifier.notify_exception(ValueError("boom")).result(timeout=5)

        url, payload = mock_transport.post.call_args.args
        assert url == ERROR_HOOK
        text = payload["blocks"][1]["elements"][0]["text"]
        assert text.startswith("*ERROR None - ENV test* \n MESSAGE: boom")

    def test_notify_returns_before_delivery_completes(self, notifier, mock_transport):
        """The caller is not blocked by a slow transport."""
        release = threading.Event()
        mock_transport.post.side_effect = lambda *args: release.wait(5)

        future = notifier.notify(OTHER_HOOK, PAYLOAD)

        assert future.done() is False
        release.set()
        assert future.result(timeout=5) is True

    def test_timeout_matches_transport_timeout(self, notifier):
        assert notifier.timeout == 2

    def test_default_transport_uses_configured_timeout(self, webhook_settings):
        instance = Notifier(webhook_settings)

        assert isinstance(instance.transport, RequestsWebhookTransport)
        assert instance.transport.timeout == 2


@pytest.mark.unit
class TestFailureContainment:
    def test_failed_delivery_is_reported_once_on_error_hook(
        self, notifier, mock_transport
    ):
        mock_transport.post.side_effect = [requests.ConnectionError("refused"), None]

        future = notifier.notify(OTHER_HOOK, PAYLOAD)

        assert future.result(timeout=5) is False
        assert mock_transport.post.call_count == 2
        first, second = mock_transport.post.call_args_list
        assert first == call(OTHER_HOOK, PAYLOAD)
        url, payload = second.args
        assert url == ERROR_HOOK
        text = payload["blocks"][1]["elements"][0]["text"]
        assert text == "*error while sending notification* \nrefused"

    def test_failed_secondary_report_is_dropped(self, notifier, mock_transport):
        """Exactly two attempts, no third, nothing raised."""
        mock_transport.post.side_effect = requests.HTTPError("500 Server Error")

        future = notifier.notify(OTHER_HOOK, PAYLOAD)

        assert future.result(timeout=5) is False
        assert future.exception() is None
        assert mock_transport.post.call_count == 2

    def test_failed_error_notification_reports_once(self, notifier, mock_transport):
        """A failure on the error hook itself is re-reported once, not looped."""
        mock_transport.post.side_effect = RuntimeError("hook gone")

        assert notifier.notify_error(PAYLOAD).result(timeout=5) is False
        assert mock_transport.post.call_count == 2
        assert [c.args[0] for c in mock_transport.post.call_args_list] == [
            ERROR_HOOK,
            ERROR_HOOK,
        ]

    def test_failure_without_error_hook_is_not_reported(self, mock_transport):
        settings = WebhookSettings(ALLOW_NOTIF=True, LOG_HOOK=LOG_HOOK)
        instance = Notifier(settings, transport=mock_transport)
        mock_transport.post.side_effect = RuntimeError("down")

        try:
            assert instance.notify(OTHER_HOOK, PAYLOAD).result(timeout=5) is False
        finally:
            instance.shutdown()

        mock_transport.post.assert_called_once()


@pytest.mark.unit
class TestGating:
    def test_log_notifications_disabled(self, mock_transport):
        settings = WebhookSettings(
            ALLOW_NOTIF=True, ALLOW_LOG_NOTIF=False, ERROR_HOOK=ERROR_HOOK, LOG_HOOK=LOG_HOOK
        )
        instance = Notifier(settings, transport=mock_transport)

        try:
            assert instance.notify_log(build_log_payload("startup")) is None
            instance.notify_error(PAYLOAD).result(timeout=5)
        finally:
            instance.shutdown()

        mock_transport.post.assert_called_once_with(ERROR_HOOK, PAYLOAD)

    def test_empty_hook_is_noop(self, notifier, mock_transport):
        assert notifier.notify("", PAYLOAD) is None
        mock_transport.post.assert_not_called()

    def test_missing_log_hook_is_noop(self, mock_transport):
        settings = WebhookSettings(ALLOW_NOTIF=True, ALLOW_LOG_NOTIF=True)
        instance = Notifier(settings, transport=mock_transport)

        assert instance.notify_log(PAYLOAD) is None
        mock_transport.post.assert_not_called()


@pytest.mark.unit
class TestShutdown:
    def test_notify_after_shutdown_is_noop(self, notifier, mock_transport):
        notifier.shutdown()

        assert notifier.notify(OTHER_HOOK, PAYLOAD) is None
        mock_transport.post.assert_not_called()

    def test_shutdown_is_idempotent(self, notifier):
        notifier.notify(OTHER_HOOK, PAYLOAD).result(timeout=5)

        notifier.shutdown()
        notifier.shutdown()

    def test_shutdown_waits_for_pending_deliveries(self, notifier, mock_transport):
        future = notifier.notify(OTHER_HOOK, PAYLOAD)

        notifier.shutdown(wait=True)

        assert future.done()
        mock_transport.post.assert_called_once()

    def test_injected_executor_is_not_shut_down(self, webhook_settings):
        executor = MagicMock()
        instance = Notifier(
            webhook_settings, transport=MagicMock(spec=WebhookTransport), executor=executor
        )

        instance.notify(OTHER_HOOK, PAYLOAD)
        instance.shutdown()

        executor.submit.assert_called_once()
        executor.shutdown.assert_not_called()

    def test_submit_rejected_by_executor_is_noop(self, webhook_settings):
        executor = MagicMock()
        executor.submit.side_effect = RuntimeError("cannot schedule new futures")
        instance = Notifier(
            webhook_settings, transport=MagicMock(spec=WebhookTransport), executor=executor
        )

        assert instance.notify(OTHER_HOOK, PAYLOAD) is None
