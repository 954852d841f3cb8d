"""
Factory functions for dependency injection.

Provides application-scoped singleton providers for core infrastructure services.
"""

from functools import lru_cache
from pathlib import Path

from infrastructure.configuration import Settings
from infrastructure.i18n.factory import create_translator
from infrastructure.i18n.translator import Translator
from infrastructure.notifications.dispatcher import Notifier


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    The @lru_cache decorator ensures only ONE instance is created per process.

    Infrastructure packages should use this directly:
        from infrastructure.services.providers import get_settings
        settings = get_settings()

    Application code should use the DI type alias for testability:
        from infrastructure.services import SettingsDep
        @router.get("/config")
        def get_config(settings: SettingsDep):
            return settings.model_dump()

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


@lru_cache
def get_translator() -> Translator:
    """
    Get application-scoped translator singleton.

    The locale table is read once, from ``TRANSLATIONS_PATH`` or the
    bundled ``locales/lang.json``.

    Returns:
        Translator: Cached translator over the immutable locale table.
    """
    i18n = get_settings().i18n
    path = Path(i18n.TRANSLATIONS_PATH) if i18n.TRANSLATIONS_PATH else None
    return create_translator(path, default_locale=i18n.DEFAULT_LOCALE)


@lru_cache
def get_notifier() -> Notifier:
    """
    Get application-scoped notifier singleton.

    Returns:
        Notifier: Cached notifier configured with the webhook settings.
    """
    settings = get_settings()
    return Notifier(settings.webhooks, environment=settings.ENVIRONMENT)
