"""CLDR plural category selection.

Categories come from Babel's CLDR plural rules, so locales with more than
two buckets (Arabic uses all six) work without code changes.
"""

from functools import lru_cache
from typing import Union

from babel import Locale as BabelLocale
from babel.core import UnknownLocaleError

from feedfind.infrastructure.i18n.models import Locale, primary_subtag

PLURAL_CATEGORIES = ("zero", "one", "two", "few", "many", "other")

_FALLBACK_RULES_LOCALE = "en"


@lru_cache(maxsize=32)
def _babel_locale(language: str) -> BabelLocale:
    try:
        return BabelLocale.parse(language)
    except (UnknownLocaleError, ValueError, TypeError):
        return BabelLocale.parse(_FALLBACK_RULES_LOCALE)


def plural_category(count: Union[int, float], locale: Union[Locale, str]) -> str:
    """Return the CLDR plural category of ``count`` for ``locale``.

    Unknown locales use English rules.

    >>> plural_category(1, "en")
    'one'
    >>> plural_category(3, "ar")
    'few'
    """
    language = locale.value if isinstance(locale, Locale) else primary_subtag(str(locale))
    return _babel_locale(language or _FALLBACK_RULES_LOCALE).plural_form(count)
