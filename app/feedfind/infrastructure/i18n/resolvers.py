"""Picks the startup locale from language signals.

Two signals are understood: a single language hint as a browser or the
``I18N_PREFERRED_LANGUAGE`` variable reports it, and an HTTP
Accept-Language header listing weighted language ranges.
"""

from typing import Iterable, List, Optional, Tuple

from feedfind.infrastructure.i18n.models import Locale
from feedfind.infrastructure.logging import get_module_logger

logger = get_module_logger()

LanguageRange = Tuple[str, float]


def _quality(params: str) -> float:
    # params is everything after the first ";", e.g. "q=0.8"
    for param in params.split(";"):
        name, _, value = param.partition("=")
        if name.strip().lower() == "q":
            try:
                return float(value)
            except ValueError:
                return 1.0
    return 1.0


class LocaleResolver:
    """Maps language signals onto the supported locales.

    Only the primary subtag of a signal matters ("es-MX" is Spanish).
    Signals that match nothing resolve to ``default_locale``.
    """

    def __init__(
        self,
        default_locale: Locale = Locale.EN,
        supported_locales: Optional[Iterable[Locale]] = None,
    ):
        self.default_locale = default_locale
        self.supported_locales: List[Locale] = list(supported_locales or Locale)
        self.log = logger.bind(default_locale=default_locale.value)

    def _match(self, tag: str) -> Optional[Locale]:
        locale = Locale.coerce(tag)
        if locale in self.supported_locales:
            return locale
        return None

    def resolve_from_hint(self, hint: Optional[str]) -> Locale:
        """Locale for a hint such as "es-MX" or "he_IL.UTF-8"."""
        if not hint or not hint.strip():
            return self.default_locale

        locale = self._match(hint)
        if locale is None:
            self.log.info("unsupported_language_hint", hint=hint)
            return self.default_locale
        self.log.debug("resolved_from_hint", hint=hint, locale=locale.value)
        return locale

    def resolve_from_header(self, accept_language: Optional[str]) -> Locale:
        """First supported range of an Accept-Language header, by quality."""
        if not accept_language:
            return self.default_locale

        for tag, _ in self.parse_accept_language(accept_language):
            locale = None if tag == "*" else self._match(tag)
            if locale is not None:
                self.log.debug("resolved_from_header", locale=locale.value)
                return locale

        self.log.info("no_matching_locale_in_header", header=accept_language)
        return self.default_locale

    @staticmethod
    def parse_accept_language(accept_language: str) -> List[LanguageRange]:
        """Split "en-US,en;q=0.9,es;q=0.8" into (range, quality) pairs.

        Pairs are ordered by descending quality, ties in header order. A
        quality that is not a number counts as 1.0.
        """
        ranges = []
        for item in accept_language.split(","):
            tag, _, params = item.partition(";")
            tag = tag.strip()
            if tag:
                ranges.append((tag, _quality(params)))
        ranges.sort(key=lambda pair: pair[1], reverse=True)
        return ranges
