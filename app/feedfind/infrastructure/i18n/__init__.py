"""i18n system - translation, pluralization and locale-aware formatting.

Main components:
- models: Locale, TranslationCatalog and the report types
- loader: TranslationLoader, YAMLTranslationLoader, DictTranslationLoader
- translator: Translator with fallback, pluralization and caching
- formatters: Babel-backed date, time, number, currency, distance and
  relative time formatting
- service: I18nService, the current-locale facade used by the app
- factory: create_translator and create_i18n_service
"""

from feedfind.infrastructure.i18n.document import DocumentAttributes
from feedfind.infrastructure.i18n.factory import create_i18n_service, create_translator
from feedfind.infrastructure.i18n.formatters import (
    format_currency,
    format_date,
    format_distance,
    format_number,
    format_relative_time,
    format_time,
)
from feedfind.infrastructure.i18n.helpers import (
    LanguageOption,
    available_languages,
    select_plural_form,
)
from feedfind.infrastructure.i18n.loader import (
    DictTranslationLoader,
    TranslationLoader,
    YAMLTranslationLoader,
)
from feedfind.infrastructure.i18n.models import (
    CacheStats,
    Locale,
    MissingTranslations,
    TranslationCatalog,
    TranslationStats,
    is_rtl,
)
from feedfind.infrastructure.i18n.observers import LocaleObserverRegistry
from feedfind.infrastructure.i18n.resolvers import LocaleResolver
from feedfind.infrastructure.i18n.service import I18nService
from feedfind.infrastructure.i18n.storage import (
    InMemoryLocaleStorage,
    JSONFileLocaleStorage,
    LocaleStorage,
)
from feedfind.infrastructure.i18n.translator import Translator

__all__ = [
    "Locale",
    "TranslationCatalog",
    "MissingTranslations",
    "TranslationStats",
    "CacheStats",
    "TranslationLoader",
    "YAMLTranslationLoader",
    "DictTranslationLoader",
    "Translator",
    "LocaleResolver",
    "LocaleObserverRegistry",
    "LocaleStorage",
    "InMemoryLocaleStorage",
    "JSONFileLocaleStorage",
    "DocumentAttributes",
    "I18nService",
    "create_translator",
    "create_i18n_service",
    "format_date",
    "format_time",
    "format_number",
    "format_currency",
    "format_distance",
    "format_relative_time",
    "is_rtl",
    "select_plural_form",
    "available_languages",
    "LanguageOption",
]
