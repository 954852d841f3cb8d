"""Locale resolution from the incoming request.

The locale is carried by a query parameter (``?lang=fra``). Anything that
cannot provide one resolves to the default locale.
"""

from typing import Any, Optional, Protocol, runtime_checkable

from infrastructure.logging import get_module_logger
from infrastructure.i18n.models import DEFAULT_LOCALE, LOCALE_QUERY_PARAM

logger = get_module_logger()


@runtime_checkable
class LocaleSource(Protocol):
    """Anything able to report the locale requested by the caller."""

    def locale(self) -> str: ...


def request_locale(
    request: Any,
    param: str = LOCALE_QUERY_PARAM,
    default: str = DEFAULT_LOCALE,
) -> str:
    """Return the locale requested by request, or default when absent or empty.

    Accepts a LocaleSource or any object exposing Starlette-style
    ``query_params``. Never raises.
    """
    if request is None:
        return default

    value: Optional[str]
    try:
        if isinstance(request, LocaleSource):
            value = request.locale()
        else:
            value = request.query_params.get(param)
    except Exception as e:  # pylint: disable=broad-except
        logger.warning("locale_resolution_failed", error=str(e))
        return default

    return value or default

