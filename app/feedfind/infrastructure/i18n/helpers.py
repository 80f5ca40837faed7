"""Convenience helpers for views: positional plurals, local currency,
preset date/time styles and the language switcher list."""

from dataclasses import dataclass
from datetime import date, datetime, time
from typing import List, Optional, Sequence, Union

from feedfind.infrastructure.i18n import formatters
from feedfind.infrastructure.i18n.models import Locale
from feedfind.infrastructure.i18n.plural import plural_category

LocaleLike = Union[Locale, str, None]

# Positional preference per CLDR category; -1 is the last form.
_FORM_PREFERENCE = {
    "zero": (0, -1),
    "one": (0, -1),
    "two": (1, 0, -1),
    "few": (2, 1, 0, -1),
    "many": (3, 2, 1, 0, -1),
    "other": (-1, 0, 1),
}


@dataclass(frozen=True)
class LanguageOption:
    code: str
    name: str
    native_name: str


def select_plural_form(count: Union[int, float], forms: Sequence[str], locale: LocaleLike = Locale.EN) -> str:
    """Pick one of ``forms`` by the CLDR category of ``count``.

    Forms are positional: zero and one use the first form, two the second,
    few the third, many the fourth and other the last. Missing or empty
    forms fall back to lower positions, then to the last form.

    >>> select_plural_form(3, ["review", "reviews"], "en")
    'reviews'
    """
    if not forms:
        return ""
    category = plural_category(count, locale or Locale.EN)
    for index in _FORM_PREFERENCE.get(category, (0, -1)):
        if -len(forms) <= index < len(forms) and forms[index]:
            return forms[index]
    return ""


def default_currency(locale: LocaleLike) -> str:
    """ISO 4217 code customarily used with the locale (USD when unknown)."""
    supported = Locale.coerce(locale)
    return supported.default_currency if supported else "USD"


def format_local_currency(amount: formatters.Number, locale: LocaleLike = Locale.EN, currency: Optional[str] = None) -> str:
    return formatters.format_currency(amount, currency or default_currency(locale), locale)


def format_short_date(value: Union[date, datetime], locale: LocaleLike = Locale.EN) -> str:
    """Abbreviated month, day and year ("Jan 15, 2024")."""
    return formatters.format_date(value, locale, {"format": "medium"})


def format_long_date(value: Union[date, datetime], locale: LocaleLike = Locale.EN) -> str:
    """Weekday, full month, day and year ("Monday, January 15, 2024")."""
    return formatters.format_date(value, locale, {"format": "full"})


def format_short_time(value: Union[time, datetime], locale: LocaleLike = Locale.EN) -> str:
    return formatters.format_time(value, locale, {"format": "short"})


def format_long_time(value: Union[time, datetime], locale: LocaleLike = Locale.EN) -> str:
    """Hours, minutes, seconds and time zone name."""
    return formatters.format_time(value, locale, {"format": "long"})


def available_languages() -> List[LanguageOption]:
    return [
        LanguageOption(code=locale.value, name=locale.english_name, native_name=locale.native_name)
        for locale in Locale
    ]
