"""Request-level translation helpers used by response formatting."""

from typing import Any, Optional

from infrastructure.i18n.resolvers import request_locale as _request_locale
from infrastructure.i18n.translator import Translator


def request_locale(request: Any) -> str:
    """Resolve the request locale using the configured parameter and default."""
    from infrastructure.services.providers import get_settings

    i18n = get_settings().i18n
    return _request_locale(request, i18n.LOCALE_QUERY_PARAM, i18n.DEFAULT_LOCALE)


def translate(
    request: Any, key: str, translator: Optional[Translator] = None
) -> Optional[str]:
    """Translate key into the locale requested by request.

    Args:
        request: LocaleSource or FastAPI request carrying the ``lang`` query parameter.
        key: Message key.
        translator: Translator to use. Defaults to the application translator.

    Returns:
        The localized message, the default-locale message, or None when even
        the default locale lacks key.
    """
    if translator is None:
        from infrastructure.services.providers import get_translator

        translator = get_translator()
    return translator.translate(key, request_locale(request))
