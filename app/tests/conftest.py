import sys
from pathlib import Path
from typing import Any, Optional
from unittest.mock import MagicMock

# Ensure the application package root is on sys.path so importing application
# modules (e.g. `infrastructure.http`) works during pytest collection.
project_root = str(Path(__file__).resolve().parents[1])
if project_root not in sys.path:
    sys.path.insert(0, project_root)

import pytest  # noqa: E402

from api.dependencies.rate_limits import get_limiter  # noqa: E402
from infrastructure.configuration import WebhookSettings  # noqa: E402
from infrastructure.i18n import Translator  # noqa: E402
from infrastructure.notifications import Notifier, WebhookTransport  # noqa: E402
from infrastructure.services import providers  # noqa: E402

ERROR_HOOK = "https://hooks.example.com/services/error"
LOG_HOOK = "https://hooks.example.com/services/log"


class RecordingSink:
    """ResponseSink double recording what the formatters write."""

    def __init__(self) -> None:
        self.status_code: Optional[int] = None
        self.body: Any = None
        self.kind: Optional[str] = None
        self.writes = 0

    def set_status(self, status_code: int) -> None:
        self.status_code = status_code

    def write_json(self, body: Any) -> "RecordingSink":
        self.writes += 1
        self.kind = "json"
        self.body = body
        return self

    def write_text(self, body: str) -> "RecordingSink":
        self.writes += 1
        self.kind = "text"
        self.body = body
        return self


class FakeRequest:
    """Request double exposing Starlette-style ``query_params``."""

    def __init__(self, **query_params: str) -> None:
        self.query_params = query_params


@pytest.fixture(autouse=True)
def reset_providers():
    """Drop cached settings, translator and notifier between tests."""
    providers.get_settings.cache_clear()
    providers.get_translator.cache_clear()
    providers.get_notifier.cache_clear()
    yield
    providers.get_settings.cache_clear()
    providers.get_translator.cache_clear()
    providers.get_notifier.cache_clear()


@pytest.fixture(autouse=True)
def reset_rate_limits():
    """Start every test with an empty rate-limit window."""
    get_limiter().reset()
    yield


@pytest.fixture
def locale_table():
    return {
        "eng": {
            "missing_parameters": "Missing parameters",
            "already_exist": "Already exists",
            "not_found": "Not found",
            "successfull_operation": "Done",
            "forbidden": "Forbidden",
            "unauthorized": "Unauthorized",
            "422_error": "Unprocessable",
            "greeting": "Hello",
        },
        "fra": {
            "missing_parameters": "Paramètres manquants",
            "not_found": "Introuvable",
            "greeting": "Bonjour",
        },
    }


@pytest.fixture
def translator(locale_table):
    return Translator(locale_table)


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def make_request():
    """Build a request double carrying the given query parameters."""
    return FakeRequest


@pytest.fixture
def webhook_settings():
    return WebhookSettings(
        ALLOW_NOTIF=True,
        ALLOW_LOG_NOTIF=True,
        ERROR_HOOK=ERROR_HOOK,
        LOG_HOOK=LOG_HOOK,
        WEBHOOK_TIMEOUT_SECONDS=2,
        WEBHOOK_MAX_WORKERS=2,
    )


@pytest.fixture
def mock_transport():
    return MagicMock(spec=WebhookTransport)


@pytest.fixture
def notifier(webhook_settings, mock_transport):
    """Enabled notifier posting through a mocked transport."""
    instance = Notifier(webhook_settings, environment="test", transport=mock_transport)
    yield instance
    instance.shutdown(wait=True)
