"""Factory functions for creating i18n components.

Builds translators and the i18n service from configuration.
"""

from pathlib import Path

import structlog

from feedfind.infrastructure.configuration import I18nSettings
from feedfind.infrastructure.i18n.loader import YAMLTranslationLoader
from feedfind.infrastructure.i18n.models import Locale
from feedfind.infrastructure.i18n.service import I18nService
from feedfind.infrastructure.i18n.storage import JSONFileLocaleStorage, LocaleStorage
from feedfind.infrastructure.i18n.translator import Translator

logger = structlog.get_logger()

DEFAULT_TRANSLATIONS_DIR = Path(__file__).resolve().parents[2] / "locales"


def create_translator(
    translations_dir: Path | str | None = None,
    fallback_locale: Locale = Locale.EN,
    use_cache: bool = True,
    preload: bool = True,
    cache_enabled: bool = True,
) -> Translator:
    """Create and configure a Translator over YAML tables.

    Args:
        translations_dir: Directory of YAML files (default: packaged feedfind/locales).
        fallback_locale: Baseline locale for missing keys (default: en).
        use_cache: Whether the loader caches parsed YAML.
        preload: Whether to load all locales immediately.
        cache_enabled: Whether translate() results are memoized.

    Raises:
        ValueError: If translations_dir does not exist.

    Usage:
        translator = create_translator()

        # Lazy loading
        translator = create_translator(preload=False)
        translator.load_locale(Locale.ES)
    """
    if translations_dir is None:
        translations_dir = DEFAULT_TRANSLATIONS_DIR

    loader = YAMLTranslationLoader(translations_dir=translations_dir, use_cache=use_cache)
    translator = Translator(
        loader=loader, fallback_locale=fallback_locale, cache_enabled=cache_enabled
    )

    if preload:
        translator.load_all()
        logger.info(
            "translator_created_with_preload",
            translations_dir=str(translations_dir),
            locale_count=len(translator.get_available_locales()),
        )
    else:
        logger.info("translator_created_lazy", translations_dir=str(translations_dir))

    return translator


def create_i18n_service(
    i18n_settings: I18nSettings | None = None,
    storage: LocaleStorage | None = None,
    preferred_language: str | None = None,
    translator: Translator | None = None,
) -> I18nService:
    """Create the i18n service described by settings.

    Args:
        i18n_settings: I18n configuration (default: read from environment).
        storage: Persistence slot. When omitted, a JSON file slot is used
            if I18N_LOCALE_STORAGE_PATH is set; otherwise none.
        preferred_language: Language hint overriding I18N_PREFERRED_LANGUAGE.
        translator: Pre-built translator (default: YAML tables from settings).

    Raises:
        ValueError: If the default locale is not supported, or the
            translations directory does not exist.
    """
    config = i18n_settings or I18nSettings()

    try:
        default_locale = Locale.from_string(config.default_locale)
    except ValueError as e:
        logger.error("invalid_default_locale", default_locale=config.default_locale)
        raise ValueError(
            f"I18N_DEFAULT_LOCALE must be one of {Locale.values()}, got {config.default_locale!r}"
        ) from e

    if translator is None:
        translator = create_translator(
            translations_dir=config.translations_dir,
            fallback_locale=default_locale,
            cache_enabled=config.cache_enabled,
        )

    if storage is None and config.locale_storage_path:
        storage = JSONFileLocaleStorage(config.locale_storage_path)

    return I18nService(
        translator=translator,
        default_locale=default_locale,
        preferred_language=preferred_language or config.preferred_language,
        storage=storage,
        storage_key=config.locale_storage_key,
    )
