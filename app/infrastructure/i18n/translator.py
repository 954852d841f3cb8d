"""Translation service resolving message keys against the locale table."""

from types import MappingProxyType
from typing import Any, Mapping, Optional

from infrastructure.i18n.models import DEFAULT_LOCALE, LocaleTable
from infrastructure.logging import get_module_logger

logger = get_module_logger()


class Translator:
    """Read-only lookup of localized messages.

    The table is frozen on construction. Lookups in an unknown locale, or
    for a key the locale does not define, fall back to the default locale.
    There is no further fallback: a key missing from the default locale
    resolves to None.

    Attributes:
        default_locale: Locale used as the fallback catalogue.
    """

    def __init__(self, table: LocaleTable, default_locale: str = DEFAULT_LOCALE):
        if default_locale not in table:
            raise ValueError(
                f"Default locale '{default_locale}' missing from translations"
            )
        self.default_locale = default_locale
        self._table: Mapping[str, Mapping[str, str]] = MappingProxyType(
            {
                locale: MappingProxyType(dict(messages))
                for locale, messages in table.items()
            }
        )

    def translate(self, key: str, locale: Optional[Any] = None) -> Optional[str]:
        """Return the message for key in locale, or the default-locale message.

        Never raises.
        """
        message = None
        if locale is not None and locale != self.default_locale:
            try:
                message = self._table[locale][key]
            except (KeyError, TypeError):
                message = None

            if message is None:
                logger.debug(
                    "used_fallback_translation",
                    key=key,
                    requested_locale=str(locale),
                    fallback_locale=self.default_locale,
                )

        if message is None:
            message = self._table[self.default_locale].get(key)

        if message is None:
            logger.warning(
                "translation_not_found",
                key=key,
                locale=str(locale),
                fallback_locale=self.default_locale,
            )

        return message

    def has_message(self, key: str, locale: str) -> bool:
        """Check whether locale itself (without fallback) defines key."""
        return key in self._table.get(locale, {})

    def available_locales(self) -> list[str]:
        """Return the locale codes present in the table."""
        return sorted(self._table)

    def catalog(self, locale: str) -> dict[str, str]:
        """Return the messages of locale merged over the default locale."""
        merged = dict(self._table[self.default_locale])
        merged.update(self._table.get(locale, {}))
        return merged
