"""Infrastructure configuration module - public API.

This module provides centralized configuration management for the
application using Pydantic BaseSettings with domain-based organization.

Exports:
    Settings: Main settings class (for testing/overrides)
    WebhookSettings: Notification settings class (for testing)
    I18nSettings: Translation settings class (for testing)

Example:
    ```python
    from infrastructure.services import get_settings

    settings = get_settings()

    # Access settings
    error_hook = settings.webhooks.ERROR_HOOK
    default_locale = settings.i18n.DEFAULT_LOCALE

    # Check environment
    if settings.is_production:
        # Production-specific logic...
    ```
"""

from infrastructure.configuration.settings import Settings
from infrastructure.configuration.infrastructure import I18nSettings, ServerSettings
from infrastructure.configuration.integrations import WebhookSettings

__all__ = ["Settings", "WebhookSettings", "I18nSettings", "ServerSettings"]
