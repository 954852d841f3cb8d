"""i18n system - locale resolution and message lookup.

Main components:
- models: LocaleTable type and default constants
- loader: TranslationLoader, JSONTranslationLoader, YAMLTranslationLoader
- translator: Translator with default-locale fallback
- resolvers: LocaleSource, request_locale
- service: translate() for request handlers
"""

from infrastructure.i18n.factory import create_translator
from infrastructure.i18n.loader import (
    JSONTranslationLoader,
    TranslationLoader,
    YAMLTranslationLoader,
)
from infrastructure.i18n.models import DEFAULT_LOCALE, LOCALE_QUERY_PARAM, LocaleTable
from infrastructure.i18n.resolvers import LocaleSource
from infrastructure.i18n.service import request_locale, translate
from infrastructure.i18n.translator import Translator

__all__ = [
    "DEFAULT_LOCALE",
    "LOCALE_QUERY_PARAM",
    "LocaleTable",
    "TranslationLoader",
    "JSONTranslationLoader",
    "YAMLTranslationLoader",
    "Translator",
    "LocaleSource",
    "create_translator",
    "request_locale",
    "translate",
]
