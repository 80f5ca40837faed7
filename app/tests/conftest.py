"""Shared fixtures for the FeedFind test suite."""

import pytest

from feedfind.infrastructure.services import providers


@pytest.fixture(autouse=True)
def reset_provider_singletons():
    """Drop cached provider singletons so each test builds its own."""
    providers.get_settings.cache_clear()
    providers.get_i18n_service.cache_clear()
    yield
    providers.get_settings.cache_clear()
    providers.get_i18n_service.cache_clear()


@pytest.fixture
def clean_i18n_env(monkeypatch):
    """Remove I18N_* variables inherited from the environment."""
    for name in (
        "I18N_DEFAULT_LOCALE",
        "I18N_PREFERRED_LANGUAGE",
        "I18N_TRANSLATIONS_DIR",
        "I18N_LOCALE_STORAGE_PATH",
        "I18N_LOCALE_STORAGE_KEY",
        "I18N_CACHE_ENABLED",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
