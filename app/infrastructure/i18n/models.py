"""Translation data types for the i18n system."""

from typing import Dict, Mapping

DEFAULT_LOCALE = "eng"
LOCALE_QUERY_PARAM = "lang"

# locale code -> message key -> localized text
LocaleTable = Mapping[str, Mapping[str, str]]
MutableLocaleTable = Dict[str, Dict[str, str]]
