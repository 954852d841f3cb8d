"""Translation loading interface and implementations.

Defines the contract for loading the locale table and provides a JSON
loader (single ``lang.json`` keyed by locale) and a YAML loader (one
``<locale>.yml`` file per locale).
"""

import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

import yaml

from infrastructure.logging import get_module_logger
from infrastructure.i18n.models import DEFAULT_LOCALE, MutableLocaleTable

logger = get_module_logger()


class TranslationLoader(ABC):
    """Abstract base for locale table loaders."""

    def __init__(self, default_locale: str = DEFAULT_LOCALE):
        self.default_locale = default_locale

    @abstractmethod
    def read(self) -> MutableLocaleTable:
        """Read the raw locale table from the underlying resource.

        Raises:
            FileNotFoundError: If the resource does not exist.
            ValueError: If the resource cannot be parsed.
        """

    def load(self) -> MutableLocaleTable:
        """Read and validate the locale table.

        Returns:
            Mapping of locale code to mapping of message key to text.

        Raises:
            ValueError: If the default locale is missing from the table.
        """
        table = self.read()
        if self.default_locale not in table:
            raise ValueError(
                f"Default locale '{self.default_locale}' missing from translations"
            )
        logger.info(
            "loaded_translations",
            locales=sorted(table),
            default_locale=self.default_locale,
            key_count=len(table[self.default_locale]),
        )
        return table

    @staticmethod
    def _coerce_messages(locale: str, messages: Any) -> dict[str, str]:
        if not isinstance(messages, dict):
            raise ValueError(f"Translations for locale '{locale}' must be a mapping")
        return {str(key): str(value) for key, value in messages.items()}


class JSONTranslationLoader(TranslationLoader):
    """Loader for a single JSON document keyed by locale code.

    Expected format::

        {"eng": {"not_found": "Not found"}, "fra": {"not_found": "Introuvable"}}
    """

    def __init__(self, path: Path, default_locale: str = DEFAULT_LOCALE):
        super().__init__(default_locale)
        self.path = Path(path)

    def read(self) -> MutableLocaleTable:
        if not self.path.is_file():
            raise FileNotFoundError(f"Translation file not found: {self.path}")

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            logger.error("json_parse_error", file=str(self.path), error=str(e))
            raise ValueError(f"Failed to parse {self.path}: {e}") from e

        if not isinstance(data, dict):
            raise ValueError(f"Translation file {self.path} must contain a mapping")

        return {
            str(locale): self._coerce_messages(locale, messages)
            for locale, messages in data.items()
        }


class YAMLTranslationLoader(TranslationLoader):
    """Loader for a directory of ``<locale>.yml`` files.

    Each file holds a flat mapping of message key to text for its locale.
    """

    def __init__(self, translations_dir: Path, default_locale: str = DEFAULT_LOCALE):
        super().__init__(default_locale)
        self.translations_dir = Path(translations_dir)

    def read(self) -> MutableLocaleTable:
        if not self.translations_dir.is_dir():
            raise FileNotFoundError(
                f"Translations directory not found: {self.translations_dir}"
            )

        table: MutableLocaleTable = {}
        for yaml_file in sorted(self.translations_dir.glob("*.yml")):
            try:
                with open(yaml_file, "r", encoding="utf-8") as f:
                    data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                logger.error("yaml_parse_error", file=str(yaml_file), error=str(e))
                raise ValueError(f"Failed to parse {yaml_file}: {e}") from e

            table[yaml_file.stem] = self._coerce_messages(yaml_file.stem, data)

        return table
