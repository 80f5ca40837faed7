"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    make_i18n_service,
    make_translation_catalog,
    make_translation_tables,
    make_translator,
)

__all__ = [
    "make_translation_tables",
    "make_translation_catalog",
    "make_translator",
    "make_i18n_service",
]
