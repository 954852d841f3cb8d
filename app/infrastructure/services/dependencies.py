"""
Type aliases for FastAPI dependency injection.

Provides annotated type hints for common infrastructure dependencies.
"""

from typing import Annotated

from fastapi import Depends

from infrastructure.configuration import Settings
from infrastructure.http.sinks import ResponseSink, StarletteResponseSink
from infrastructure.i18n.translator import Translator
from infrastructure.notifications.dispatcher import Notifier
from infrastructure.services.providers import (
    get_notifier,
    get_settings,
    get_translator,
)


def get_response_sink() -> ResponseSink:
    """Fresh response sink for each request."""
    return StarletteResponseSink()


# Settings dependency
SettingsDep = Annotated[Settings, Depends(get_settings)]

# Translator dependency
TranslatorDep = Annotated[Translator, Depends(get_translator)]

# Notifier dependency
NotifierDep = Annotated[Notifier, Depends(get_notifier)]

# Per-request response sink
ResponseSinkDep = Annotated[ResponseSink, Depends(get_response_sink)]

__all__ = [
    "SettingsDep",
    "TranslatorDep",
    "NotifierDep",
    "ResponseSinkDep",
    "get_response_sink",
]
