"""Factory functions for creating i18n components."""

from pathlib import Path
from typing import Optional

from infrastructure.logging import get_module_logger
from infrastructure.i18n.loader import (
    JSONTranslationLoader,
    TranslationLoader,
    YAMLTranslationLoader,
)
from infrastructure.i18n.models import DEFAULT_LOCALE
from infrastructure.i18n.translator import Translator

logger = get_module_logger()

# This file is at .../app/infrastructure/i18n/factory.py
DEFAULT_TRANSLATIONS_PATH = Path(__file__).resolve().parents[2] / "locales" / "lang.json"


def get_loader(
    translations_path: Optional[Path] = None,
    default_locale: str = DEFAULT_LOCALE,
) -> TranslationLoader:
    """Pick the loader matching translations_path.

    A directory is read as per-locale YAML files, anything else as a JSON
    document. No path means the bundled ``locales/lang.json``.
    """
    path = Path(translations_path) if translations_path else DEFAULT_TRANSLATIONS_PATH
    if path.is_dir():
        return YAMLTranslationLoader(path, default_locale=default_locale)
    return JSONTranslationLoader(path, default_locale=default_locale)


def create_translator(
    translations_path: Optional[Path] = None,
    default_locale: str = DEFAULT_LOCALE,
) -> Translator:
    """Load the locale table once and wrap it in a Translator.

    Raises:
        FileNotFoundError: If the translations resource does not exist.
        ValueError: If it cannot be parsed or lacks the default locale.

    Usage:
        translator = create_translator()
        translator = create_translator(Path("/srv/locales"), default_locale="fra")
    """
    loader = get_loader(translations_path, default_locale)
    translator = Translator(loader.load(), default_locale=default_locale)
    logger.info(
        "translator_created",
        translations_path=str(translations_path or DEFAULT_TRANSLATIONS_PATH),
        locales=translator.available_locales(),
    )
    return translator
