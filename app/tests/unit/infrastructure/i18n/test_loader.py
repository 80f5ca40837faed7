"""Tests for feedfind.infrastructure.i18n.loader module."""

import pytest
import yaml

from feedfind.infrastructure.i18n import (
    DictTranslationLoader,
    Locale,
    YAMLTranslationLoader,
)
from feedfind.infrastructure.i18n.loader import locale_from_filename


@pytest.mark.unit
class TestYAMLTranslationLoader:
    """Tests for YAMLTranslationLoader."""

    def test_loader_initialization(self, temp_translations_dir):
        loader = YAMLTranslationLoader(temp_translations_dir)
        assert loader.translations_dir == temp_translations_dir
        assert loader.use_cache is True
        assert loader.cache == {}

    def test_loader_initialization_nonexistent_directory(self, tmp_path):
        """YAMLTranslationLoader raises ValueError for missing directory."""
        with pytest.raises(ValueError, match="not found"):
            YAMLTranslationLoader(tmp_path / "nonexistent")

    def test_load_merges_namespaces(self, yaml_loader):
        catalog = yaml_loader.load(Locale.EN)

        assert catalog.locale == Locale.EN
        assert catalog.resolve("common.save") == "Save"
        assert catalog.resolve("search.resultsCount_one") == "{{count}} result found"
        assert catalog.loaded_at is not None

    def test_load_non_ascii(self, yaml_loader):
        catalog = yaml_loader.load(Locale.ES)
        assert catalog.resolve("common.welcome") == "¡Bienvenido, {{name}}!"

    def test_load_missing_locale_raises_error(self, yaml_loader):
        with pytest.raises(FileNotFoundError):
            yaml_loader.load(Locale.HE)

    def test_load_same_namespace_across_files(self, tmp_path):
        """Files sharing a namespace are deep-merged."""
        with open(tmp_path / "a.en.yml", "w", encoding="utf-8") as f:
            yaml.safe_dump({"errors": {"validation": {"required": "Required"}}}, f)
        with open(tmp_path / "b.en.yml", "w", encoding="utf-8") as f:
            yaml.safe_dump({"errors": {"validation": {"email": "Bad email"}}}, f)

        catalog = YAMLTranslationLoader(tmp_path).load(Locale.EN)

        assert catalog.resolve("errors.validation.required") == "Required"
        assert catalog.resolve("errors.validation.email") == "Bad email"

    def test_load_invalid_yaml_raises_value_error(self, tmp_path):
        (tmp_path / "broken.en.yml").write_text("common: [unclosed", encoding="utf-8")
        with pytest.raises(ValueError, match="Failed to parse"):
            YAMLTranslationLoader(tmp_path).load(Locale.EN)

    def test_load_skips_invalid_structures(self, tmp_path):
        (tmp_path / "list.en.yml").write_text("- a\n- b\n", encoding="utf-8")
        (tmp_path / "scalar.en.yml").write_text('common: "flat"\n', encoding="utf-8")
        (tmp_path / "ok.en.yml").write_text('search:\n  title: "Find"\n', encoding="utf-8")

        catalog = YAMLTranslationLoader(tmp_path).load(Locale.EN)

        assert catalog.messages == {"search": {"title": "Find"}}

    def test_load_empty_file(self, tmp_path):
        (tmp_path / "empty.en.yml").write_text("", encoding="utf-8")
        catalog = YAMLTranslationLoader(tmp_path).load(Locale.EN)
        assert catalog.messages == {}

    def test_load_caches_results(self, yaml_loader_with_cache):
        first = yaml_loader_with_cache.load(Locale.EN)
        second = yaml_loader_with_cache.load(Locale.EN)
        assert first is second
        assert Locale.EN in yaml_loader_with_cache.cache

    def test_load_without_cache(self, yaml_loader):
        first = yaml_loader.load(Locale.EN)
        second = yaml_loader.load(Locale.EN)
        assert first is not second
        assert yaml_loader.cache == {}

    def test_clear_cache(self, yaml_loader_with_cache):
        yaml_loader_with_cache.load(Locale.EN)
        yaml_loader_with_cache.clear_cache()
        assert yaml_loader_with_cache.cache == {}

    def test_load_all(self, yaml_loader):
        catalogs = yaml_loader.load_all()
        assert list(catalogs) == [Locale.EN, Locale.ES]

    def test_load_all_ignores_unsupported_and_non_lowercase(self, temp_translations_dir):
        (temp_translations_dir / "common.fr.yml").write_text(
            'common:\n  save: "Enregistrer"\n', encoding="utf-8"
        )
        (temp_translations_dir / "common.HE.yml").write_text(
            'common:\n  save: "שמירה"\n', encoding="utf-8"
        )
        (temp_translations_dir / "README.yml").write_text("x: 1\n", encoding="utf-8")

        catalogs = YAMLTranslationLoader(temp_translations_dir).load_all()

        assert set(catalogs) == {Locale.EN, Locale.ES}

    def test_load_all_empty_directory_raises(self, tmp_path):
        with pytest.raises(ValueError, match="No translation files"):
            YAMLTranslationLoader(tmp_path).load_all()


@pytest.mark.unit
class TestDictTranslationLoader:
    """Tests for DictTranslationLoader."""

    def test_load(self, translation_tables):
        loader = DictTranslationLoader(translation_tables)
        catalog = loader.load(Locale.ES)
        assert catalog.locale == Locale.ES
        assert catalog.resolve("common.save") == "Guardar"

    def test_load_returns_copy(self, translation_tables):
        loader = DictTranslationLoader(translation_tables)
        catalog = loader.load(Locale.EN)
        catalog.set_message("common.save", "Changed")
        assert translation_tables["en"]["common"]["save"] == "Save"
        assert loader.load(Locale.EN).resolve("common.save") == "Save"

    def test_load_missing_locale(self, translation_tables):
        with pytest.raises(FileNotFoundError):
            DictTranslationLoader(translation_tables).load(Locale.HE)

    def test_accepts_locale_members_and_tags(self):
        loader = DictTranslationLoader(
            {Locale.EN: {"a": "A"}, "es-MX": {"a": "Á"}, "fr": {"a": "À"}}
        )
        assert set(loader.tables) == {Locale.EN, Locale.ES}

    def test_load_all(self, translation_tables):
        catalogs = DictTranslationLoader(translation_tables).load_all()
        assert set(catalogs) == {Locale.EN, Locale.ES, Locale.AR}


@pytest.mark.unit
class TestLocaleFromFilename:
    @pytest.mark.parametrize(
        "name,expected",
        [
            ("search.es.yml", Locale.ES),
            ("errors.validation.he.yml", Locale.HE),
            ("common.fr.yml", None),
            ("common.HE.yml", None),
            ("en.yml", None),
            ("README.yml", None),
        ],
    )
    def test_parses_locale_tag(self, tmp_path, name, expected):
        assert locale_from_filename(tmp_path / name) == expected


@pytest.mark.unit
class TestDiscoverLocales:
    def test_declaration_order(self, tmp_path):
        for name in ("a.he.yml", "a.en.yml", "a.ar.yml"):
            (tmp_path / name).write_text("a:\n  b: c\n", encoding="utf-8")
        assert YAMLTranslationLoader(tmp_path).discover_locales() == [
            Locale.EN,
            Locale.AR,
            Locale.HE,
        ]
