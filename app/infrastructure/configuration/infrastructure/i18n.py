"""Locale resolution and translation catalogue settings."""

from infrastructure.configuration.base import InfrastructureSettings


class I18nSettings(InfrastructureSettings):
    """Translation configuration.

    Environment Variables:
        DEFAULT_LOCALE: Locale used when the request does not pick one (default: eng)
        LOCALE_QUERY_PARAM: Query parameter carrying the locale (default: lang)
        TRANSLATIONS_PATH: JSON file or YAML directory holding the locale table.
            Empty means the bundled ``locales/lang.json``.

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()
        default_locale = settings.i18n.DEFAULT_LOCALE
        ```
    """

    DEFAULT_LOCALE: str = "eng"
    LOCALE_QUERY_PARAM: str = "lang"
    TRANSLATIONS_PATH: str = ""
