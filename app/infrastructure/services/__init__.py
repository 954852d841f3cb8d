"""
Dependency injection services.

Provides type aliases and provider functions for FastAPI dependency injection.
"""

from infrastructure.services.dependencies import (
    NotifierDep,
    ResponseSinkDep,
    SettingsDep,
    TranslatorDep,
    get_response_sink,
)
from infrastructure.services.providers import (
    get_notifier,
    get_settings,
    get_translator,
)

__all__ = [
    "SettingsDep",
    "TranslatorDep",
    "NotifierDep",
    "ResponseSinkDep",
    "get_settings",
    "get_translator",
    "get_notifier",
    "get_response_sink",
]
