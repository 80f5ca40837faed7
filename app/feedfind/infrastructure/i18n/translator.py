"""Translator: catalog resolution, pluralization and the resolution cache.

The translator is total: whatever key or params it is given, it returns a
string. Missing keys fall back to the fallback locale and then to the raw
key itself.
"""

import json
from typing import Any, Dict, List, Optional, Tuple

from feedfind.infrastructure.i18n.interpolation import interpolate
from feedfind.infrastructure.i18n.loader import TranslationLoader
from feedfind.infrastructure.i18n.models import (
    PLURAL_COUNT_PARAM,
    CacheStats,
    Locale,
    MissingTranslations,
    TranslationCatalog,
    TranslationKey,
    TranslationParams,
    TranslationStats,
    plural_count,
)
from feedfind.infrastructure.i18n.plural import plural_category
from feedfind.infrastructure.logging import get_module_logger

logger = get_module_logger()

CacheKey = Tuple[str, str, str]


def _params_fingerprint(params: Optional[TranslationParams]) -> str:
    if not params:
        return "{}"
    try:
        return json.dumps(dict(params), sort_keys=True, default=str)
    except (TypeError, ValueError):
        # Non-string keys cannot be sorted against each other.
        return repr(sorted(params.items(), key=lambda item: repr(item[0])))


class Translator:
    """Resolves dotted keys against per-locale catalogs.

    Attributes:
        loader: TranslationLoader providing the catalogs.
        catalogs: Loaded catalogs by locale.
        fallback_locale: Baseline locale consulted when a key is missing.
        cache_enabled: Whether translate() results are memoized.
    """

    def __init__(
        self,
        loader: TranslationLoader,
        fallback_locale: Locale = Locale.EN,
        cache_enabled: bool = True,
    ):
        self.loader = loader
        self.fallback_locale = fallback_locale
        self.cache_enabled = cache_enabled
        self.catalogs: Dict[Locale, TranslationCatalog] = {}
        self._cache: Dict[CacheKey, str] = {}
        self._hits = 0
        self._misses = 0
        logger.info(
            "initialized_translator",
            fallback_locale=fallback_locale.value,
            cache_enabled=cache_enabled,
        )

    def load_all(self) -> None:
        """Load all available locales from the loader."""
        self.catalogs = self.loader.load_all()
        self.clear_cache()
        logger.info("loaded_all_translations", locale_count=len(self.catalogs))

    def load_locale(self, locale: Locale) -> None:
        """Load a specific locale from the loader.

        Raises:
            FileNotFoundError: If the loader has nothing for the locale.
        """
        self.catalogs[locale] = self.loader.load(locale)
        self.clear_cache()
        logger.info("loaded_locale_translations", locale=locale.value)

    def reload(self) -> None:
        """Reload all translations from the loader."""
        self.catalogs.clear()
        self.load_all()
        logger.info("reloaded_all_translations")

    def resolve(self, key: TranslationKey, locale: Locale) -> Optional[str]:
        """Return the template for key in exactly one locale, or None."""
        catalog = self.catalogs.get(locale)
        if catalog is None:
            return None
        return catalog.resolve(key)

    def translate(
        self,
        key: TranslationKey,
        locale: Locale,
        params: Optional[TranslationParams] = None,
    ) -> str:
        """Translate key for locale, pluralizing on a numeric ``count``.

        Resolution order: plural variant in ``locale``, then the plain key
        in ``locale``, then in the fallback locale, then the key itself.
        All params are interpolated into the chosen template.
        """
        cache_key = (locale.value, key, _params_fingerprint(params))
        if self.cache_enabled:
            cached = self._cache.get(cache_key)
            if cached is not None:
                self._hits += 1
                return cached
            self._misses += 1

        count = plural_count(params)
        message = None
        if count is not None:
            params = {**params, PLURAL_COUNT_PARAM: count}
            message = self._pluralize(key, count, locale)

        if message is None:
            message = self._resolve_with_fallback(key, locale)

        result = interpolate(message, params)
        if self.cache_enabled:
            self._cache[cache_key] = result
        return result

    def _pluralize(self, key: TranslationKey, count: Any, locale: Locale) -> Optional[str]:
        try:
            category = plural_category(count, locale)
        except Exception as e:  # pylint: disable=broad-except
            logger.warning(
                "plural_category_failed", key=key, locale=locale.value, error=str(e)
            )
            return None
        if category not in ("one", "other"):
            exact = self.resolve(f"{key}_{category}", locale)
            if exact:
                return exact
        if category == "one":
            singular = self.resolve(f"{key}_one", locale)
            if singular:
                return singular
        plural = self.resolve(f"{key}_other", locale)
        if plural:
            return plural
        logger.debug(
            "plural_variant_not_found",
            key=key,
            locale=locale.value,
            category=category,
        )
        return None

    def _resolve_with_fallback(self, key: TranslationKey, locale: Locale) -> str:
        message = self.resolve(key, locale)
        if not message and locale != self.fallback_locale:
            message = self.resolve(key, self.fallback_locale)
            if message:
                logger.debug(
                    "used_fallback_translation",
                    key=key,
                    requested_locale=locale.value,
                    fallback_locale=self.fallback_locale.value,
                )
        if not message:
            logger.debug("translation_not_found", key=key, locale=locale.value)
            return key
        return message

    def has_message(self, key: TranslationKey, locale: Locale) -> bool:
        catalog = self.catalogs.get(locale)
        return catalog.has_message(key) if catalog else False

    def clear_cache(self) -> None:
        """Drop memoized translations and reset the hit/miss counters."""
        self._cache.clear()
        self._hits = 0
        self._misses = 0

    def get_cache_stats(self) -> CacheStats:
        return CacheStats(size=len(self._cache), hits=self._hits, misses=self._misses)

    def get_translation_keys(self, locale: Locale) -> List[str]:
        """Dotted paths of every string leaf in the locale's table."""
        catalog = self.catalogs.get(locale)
        if catalog is None:
            return []
        return list(catalog.iter_keys())

    def validate_translations(self) -> List[MissingTranslations]:
        """Report baseline keys each other loaded locale cannot resolve.

        Locales with nothing missing are omitted.
        """
        baseline = self.get_translation_keys(self.fallback_locale)
        report = []
        for locale, catalog in self.catalogs.items():
            if locale == self.fallback_locale:
                continue
            missing = [key for key in baseline if not catalog.has_message(key)]
            if missing:
                report.append(MissingTranslations(locale=locale, missing_keys=missing))
        logger.debug("validated_translations", incomplete_locales=len(report))
        return report

    def get_translation_stats(self) -> Dict[Locale, TranslationStats]:
        """Completeness of every loaded locale against the baseline keys."""
        baseline = self.get_translation_keys(self.fallback_locale)
        stats = {}
        for locale, catalog in self.catalogs.items():
            present = set(catalog.iter_keys())
            missing = sum(1 for key in baseline if key not in present)
            stats[locale] = TranslationStats(total=len(baseline), missing=missing)
        return stats

    def get_available_locales(self) -> List[Locale]:
        return list(self.catalogs.keys())
