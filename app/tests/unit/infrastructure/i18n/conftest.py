"""Feature-level fixtures for i18n system tests.

Provides YAML translation directories, in-memory translators and services.
"""

import pytest
import yaml

from feedfind.infrastructure.i18n import (
    InMemoryLocaleStorage,
    YAMLTranslationLoader,
)
from tests.factories.i18n import (
    make_i18n_service,
    make_translation_tables,
    make_translator,
)


def _write_yaml(path, data):
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(data, f, allow_unicode=True)


@pytest.fixture
def temp_translations_dir(tmp_path):
    """Create temporary directory with sample YAML translation files.

    Returns a directory structure like:
    - common.en.yml
    - search.en.yml
    - common.es.yml
    - search.es.yml
    - notes.txt (ignored)
    """
    _write_yaml(
        tmp_path / "common.en.yml",
        {"common": {"save": "Save", "welcome": "Welcome, {{name}}!"}},
    )
    _write_yaml(
        tmp_path / "search.en.yml",
        {
            "search": {
                "title": "Find Food Assistance",
                "resultsCount_one": "{{count}} result found",
                "resultsCount_other": "{{count}} results found",
            }
        },
    )
    _write_yaml(
        tmp_path / "common.es.yml",
        {"common": {"save": "Guardar", "welcome": "¡Bienvenido, {{name}}!"}},
    )
    _write_yaml(
        tmp_path / "search.es.yml",
        {"search": {"title": "Encontrar Asistencia Alimentaria"}},
    )
    (tmp_path / "notes.txt").write_text("not a translation file", encoding="utf-8")
    return tmp_path


@pytest.fixture
def yaml_loader(temp_translations_dir):
    """Create YAMLTranslationLoader for temporary translations directory."""
    return YAMLTranslationLoader(temp_translations_dir, use_cache=False)


@pytest.fixture
def yaml_loader_with_cache(temp_translations_dir):
    """Create YAMLTranslationLoader with caching enabled."""
    return YAMLTranslationLoader(temp_translations_dir, use_cache=True)


@pytest.fixture
def translation_tables():
    return make_translation_tables()


@pytest.fixture
def translator():
    """Translator over the factory tables (en, es, ar) with cache enabled."""
    return make_translator()


@pytest.fixture
def storage():
    return InMemoryLocaleStorage()


@pytest.fixture
def service(storage):
    """I18nService starting in en with an in-memory persistence slot."""
    return make_i18n_service(storage=storage)


@pytest.fixture
def accept_language_headers():
    """Collection of Accept-Language headers for testing."""
    return {
        "simple_en": "en",
        "specific_es": "es-MX",
        "with_quality": "fr-FR,fr;q=0.9,es;q=0.8,en;q=0.7",
        "quality_order": "en;q=0.5,he;q=0.9",
        "wildcard": "*,ar;q=0.8",
        "invalid_quality": "en;q=invalid,es",
        "unsupported": "fr-FR,de;q=0.9",
    }
