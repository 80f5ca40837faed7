"""I18n service: the process-wide locale state and public translation API.

Wraps a Translator with the current locale, change observers, the
persistence slot and the document attributes.

Usage:
    from feedfind.infrastructure.services.providers import get_i18n_service

    i18n = get_i18n_service()
    i18n.set_locale("es")
    i18n.t("search.resultsCount", {"count": 3})  # "3 resultados encontrados"
"""

from contextlib import contextmanager
from datetime import date, datetime, time
from typing import Dict, Generator, List, Optional, Union

from feedfind.infrastructure.i18n import formatters
from feedfind.infrastructure.i18n.document import DocumentAttributes
from feedfind.infrastructure.i18n.models import (
    CacheStats,
    Locale,
    MissingTranslations,
    TranslationKey,
    TranslationParams,
    TranslationStats,
)
from feedfind.infrastructure.i18n.observers import (
    LocaleObserver,
    LocaleObserverRegistry,
    Unregister,
)
from feedfind.infrastructure.i18n.resolvers import LocaleResolver
from feedfind.infrastructure.i18n.storage import LocaleStorage
from feedfind.infrastructure.i18n.translator import Translator
from feedfind.infrastructure.logging import bind_locale_context, get_module_logger

logger = get_module_logger()

DEFAULT_STORAGE_KEY = "feedfind-locale"

LocaleLike = Union[Locale, str, None]


class I18nService:
    """Current locale plus translation and formatting for it.

    Attributes:
        translator: Translator holding the loaded catalogs.
        default_locale: Baseline locale used at startup and for fallback.
        storage: Persistence slot, or None when none is available.
        storage_key: Key of the persisted locale in storage.
        document: Language and direction attributes for the rendering shell.
    """

    def __init__(
        self,
        translator: Translator,
        default_locale: Locale = Locale.EN,
        preferred_language: Optional[str] = None,
        storage: Optional[LocaleStorage] = None,
        storage_key: str = DEFAULT_STORAGE_KEY,
        document: Optional[DocumentAttributes] = None,
        resolver: Optional[LocaleResolver] = None,
    ):
        """Initialize the service.

        Args:
            translator: Translator with catalogs loaded (or loadable).
            default_locale: Locale used when the hint is absent or unsupported.
            preferred_language: Environment language hint such as "es-MX".
            storage: Optional persistence slot.
            storage_key: Key used in storage.
            document: Attributes updated on every locale change.
            resolver: Resolver for the language hint.
        """
        self.translator = translator
        self.default_locale = default_locale
        self.storage = storage
        self.storage_key = storage_key
        self.document = document or DocumentAttributes()
        self.resolver = resolver or LocaleResolver(default_locale=default_locale)
        self._observers = LocaleObserverRegistry()
        # Counts set_locale changes; lets use_locale detect one made inside it.
        self._chosen_changes = 0
        self._locale = self.resolver.resolve_from_hint(preferred_language)
        self.document.apply(self._locale)
        logger.info(
            "initialized_i18n_service",
            locale=self._locale.value,
            default_locale=default_locale.value,
            persistence_enabled=storage is not None,
        )

    def get_locale(self) -> Locale:
        return self._locale

    def set_locale(self, locale: Union[Locale, str]) -> None:
        """Switch the current locale.

        Unsupported values are ignored. Setting the current locale again
        does nothing; otherwise the cache is cleared, observers are
        notified, the locale is persisted and the document updated.
        """
        self._change_locale(locale, persist=True)

    def _change_locale(self, locale: Union[Locale, str], persist: bool) -> bool:
        new_locale = Locale.coerce(locale)
        if new_locale is None:
            logger.warning("unsupported_locale_ignored", requested_locale=str(locale))
            return False
        if new_locale == self._locale:
            return False

        previous = self._locale
        self._locale = new_locale
        self.translator.clear_cache()
        logger.info(
            "locale_changed", previous_locale=previous.value, locale=new_locale.value
        )
        self._observers.notify(new_locale, current=self.get_locale)
        if persist:
            self._chosen_changes += 1
            self._persist_locale(self._locale)
        self.document.apply(self._locale)
        return True

    def _persist_locale(self, locale: Locale) -> None:
        if self.storage is None:
            return
        try:
            self.storage.set_item(self.storage_key, locale.value)
        except (OSError, ValueError) as e:
            logger.warning("locale_persist_failed", locale=locale.value, error=str(e))

    def load_persisted_locale(self) -> Locale:
        """Apply the persisted locale, if any, and return the current locale."""
        if self.storage is None:
            return self._locale
        try:
            saved = self.storage.get_item(self.storage_key)
        except (OSError, ValueError) as e:
            logger.warning("locale_storage_read_failed", error=str(e))
            return self._locale

        locale = Locale.coerce(saved) if saved else None
        if locale is None:
            if saved:
                logger.info("ignored_persisted_locale", saved_locale=saved)
            return self._locale

        self.set_locale(locale)
        return self._locale

    @contextmanager
    def use_locale(self, locale: Union[Locale, str]) -> Generator[Locale, None, None]:
        """Temporarily switch locale; the previous locale is restored on exit.

        The temporary locale is not persisted. A locale chosen with
        set_locale inside the block is kept on exit, so the current and
        persisted locale agree.
        """
        previous = self._locale
        self._change_locale(locale, persist=False)
        active = self._locale
        chosen_before = self._chosen_changes
        try:
            with bind_locale_context(active.value):
                yield active
        finally:
            if self._chosen_changes == chosen_before:
                self._change_locale(previous, persist=False)
            else:
                logger.debug(
                    "kept_locale_changed_in_block",
                    locale=self._locale.value,
                    previous_locale=previous.value,
                )

    def t(self, key: TranslationKey, params: Optional[TranslationParams] = None) -> str:
        """Translate key for the current locale. Never raises."""
        return self.translator.translate(key, self._locale, params)

    def _target(self, locale: LocaleLike) -> Union[Locale, str]:
        return self._locale if locale is None else locale

    def format_date(
        self,
        value: Union[date, datetime],
        locale: LocaleLike = None,
        options: Optional[Dict] = None,
    ) -> str:
        return formatters.format_date(value, self._target(locale), options)

    def format_time(
        self,
        value: Union[time, datetime],
        locale: LocaleLike = None,
        options: Optional[Dict] = None,
    ) -> str:
        return formatters.format_time(value, self._target(locale), options)

    def format_number(
        self,
        number: formatters.Number,
        locale: LocaleLike = None,
        options: Optional[Dict] = None,
    ) -> str:
        return formatters.format_number(number, self._target(locale), options)

    def format_currency(
        self,
        amount: formatters.Number,
        currency: str = "USD",
        locale: LocaleLike = None,
    ) -> str:
        return formatters.format_currency(amount, currency, self._target(locale))

    def format_distance(self, meters: formatters.Number, locale: LocaleLike = None) -> str:
        return formatters.format_distance(meters, self._target(locale))

    def format_relative_time(
        self,
        value: Union[date, datetime],
        locale: LocaleLike = None,
        now: Optional[datetime] = None,
    ) -> str:
        return formatters.format_relative_time(value, self._target(locale), now=now)

    def is_rtl(self, locale: LocaleLike = None) -> bool:
        return formatters.is_rtl(self._target(locale))

    def add_observer(self, callback: LocaleObserver) -> Unregister:
        """Register a locale change callback; returns its unregister handle."""
        return self._observers.add(callback)

    def get_translation_keys(self, locale: LocaleLike = None) -> List[str]:
        target = Locale.coerce(self._target(locale))
        if target is None:
            return []
        return self.translator.get_translation_keys(target)

    def validate_translations(self) -> List[MissingTranslations]:
        return self.translator.validate_translations()

    def get_translation_stats(self) -> Dict[Locale, TranslationStats]:
        return self.translator.get_translation_stats()

    def clear_cache(self) -> None:
        self.translator.clear_cache()

    def get_cache_stats(self) -> CacheStats:
        return self.translator.get_cache_stats()

    def get_document_attributes(self) -> Dict[str, str]:
        return self.document.as_dict()
