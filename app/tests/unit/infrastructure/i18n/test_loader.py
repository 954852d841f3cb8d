"""Unit tests for translation loaders and the translator factory."""

import json

import pytest
import yaml

from infrastructure.i18n import (
    JSONTranslationLoader,
    YAMLTranslationLoader,
    create_translator,
)
from infrastructure.i18n.factory import DEFAULT_TRANSLATIONS_PATH, get_loader


@pytest.fixture
def json_translations(tmp_path):
    path = tmp_path / "lang.json"
    path.write_text(
        json.dumps(
            {
                "eng": {"not_found": "Not found", "forbidden": "Forbidden"},
                "fra": {"not_found": "Introuvable"},
            }
        ),
        encoding="utf-8",
    )
    return path


@pytest.fixture
def yaml_translations_dir(tmp_path):
    directory = tmp_path / "locales"
    directory.mkdir()
    with open(directory / "eng.yml", "w", encoding="utf-8") as f:
        yaml.dump({"not_found": "Not found", "forbidden": "Forbidden"}, f)
    with open(directory / "fra.yml", "w", encoding="utf-8") as f:
        yaml.dump({"not_found": "Introuvable"}, f, allow_unicode=True)
    return directory


@pytest.mark.unit
class TestJSONTranslationLoader:
    def test_load_returns_table(self, json_translations):
        table = JSONTranslationLoader(json_translations).load()

        assert table["eng"]["forbidden"] == "Forbidden"
        assert table["fra"] == {"not_found": "Introuvable"}

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            JSONTranslationLoader(tmp_path / "missing.json").load()

    def test_malformed_json_raises_value_error(self, tmp_path):
        path = tmp_path / "lang.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(ValueError, match="Failed to parse"):
            JSONTranslationLoader(path).load()

    def test_non_mapping_document_raises(self, tmp_path):
        path = tmp_path / "lang.json"
        path.write_text('["eng"]', encoding="utf-8")

        with pytest.raises(ValueError, match="mapping"):
            JSONTranslationLoader(path).load()

    def test_non_mapping_locale_raises(self, tmp_path):
        path = tmp_path / "lang.json"
        path.write_text('{"eng": "Not found"}', encoding="utf-8")

        with pytest.raises(ValueError, match="eng"):
            JSONTranslationLoader(path).load()

    def test_missing_default_locale_raises(self, tmp_path):
        path = tmp_path / "lang.json"
        path.write_text('{"fra": {"not_found": "Introuvable"}}', encoding="utf-8")

        with pytest.raises(ValueError, match="Default locale 'eng'"):
            JSONTranslationLoader(path).load()


@pytest.mark.unit
class TestYAMLTranslationLoader:
    def test_load_uses_file_stem_as_locale(self, yaml_translations_dir):
        table = YAMLTranslationLoader(yaml_translations_dir).load()

        assert sorted(table) == ["eng", "fra"]
        assert table["fra"]["not_found"] == "Introuvable"

    def test_empty_file_is_empty_locale(self, yaml_translations_dir):
        (yaml_translations_dir / "deu.yml").write_text("", encoding="utf-8")

        table = YAMLTranslationLoader(yaml_translations_dir).load()

        assert table["deu"] == {}

    def test_missing_directory_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            YAMLTranslationLoader(tmp_path / "missing").load()

    def test_malformed_yaml_raises_value_error(self, yaml_translations_dir):
        (yaml_translations_dir / "deu.yml").write_text(
            "key: [unclosed", encoding="utf-8"
        )

        with pytest.raises(ValueError, match="Failed to parse"):
            YAMLTranslationLoader(yaml_translations_dir).load()

    def test_missing_default_locale_raises(self, yaml_translations_dir):
        (yaml_translations_dir / "eng.yml").unlink()

        with pytest.raises(ValueError):
            YAMLTranslationLoader(yaml_translations_dir).load()


@pytest.mark.unit
class TestTranslatorFactory:
    def test_get_loader_picks_yaml_for_directory(self, yaml_translations_dir):
        assert isinstance(get_loader(yaml_translations_dir), YAMLTranslationLoader)

    def test_get_loader_picks_json_for_file(self, json_translations):
        assert isinstance(get_loader(json_translations), JSONTranslationLoader)

    def test_get_loader_defaults_to_bundled_table(self):
        loader = get_loader()

        assert isinstance(loader, JSONTranslationLoader)
        assert loader.path == DEFAULT_TRANSLATIONS_PATH

    def test_create_translator_from_json(self, json_translations):
        translator = create_translator(json_translations)

        assert translator.translate("forbidden", "fra") == "Forbidden"

    def test_create_translator_from_yaml(self, yaml_translations_dir):
        translator = create_translator(yaml_translations_dir)

        assert translator.translate("not_found", "fra") == "Introuvable"

    def test_bundled_table_defines_response_messages(self):
        """Every message used by the response formatters exists in eng."""
        translator = create_translator()

        for key in (
            "missing_parameters",
            "already_exist",
            "not_found",
            "successfull_operation",
            "forbidden",
            "unauthorized",
            "422_error",
            "too_many_requests",
        ):
            assert translator.has_message(key, "eng")
