"""Locale-aware formatting built on Babel.

Every function degrades instead of raising: when Babel rejects the input
or the locale, a warning is logged and a locale-naive representation is
returned.
"""

import math
from datetime import date, datetime, time, timedelta
from decimal import Decimal
from functools import lru_cache
from typing import Any, Dict, Optional, Union

from babel import Locale as BabelLocale
from babel import dates, numbers

from feedfind.infrastructure.i18n.models import Locale, intl_tag_for, is_rtl
from feedfind.infrastructure.logging import get_module_logger

logger = get_module_logger()

LocaleLike = Union[Locale, str, None]
Number = Union[int, float, Decimal]
FormatOptions = Optional[Dict[str, Any]]

FEET_PER_METER = 3.28084
FEET_PER_MILE = 5280
METERS_PER_KILOMETER = 1000

# (upper bound in seconds, babel unit, seconds per unit)
RELATIVE_TIME_BUCKETS = (
    (60, "second", 1),
    (3600, "minute", 60),
    (86400, "hour", 3600),
    (math.inf, "day", 86400),
)

# CLDR relative-type-0 for seconds; Babel has no pattern for it.
NOW_PHRASES = {
    Locale.EN: "now",
    Locale.ES: "ahora",
    Locale.AR: "الآن",
    Locale.HE: "עכשיו",
}

__all__ = [
    "babel_locale_for",
    "format_date",
    "format_time",
    "format_number",
    "format_currency",
    "format_distance",
    "format_relative_time",
    "is_rtl",
]


@lru_cache(maxsize=32)
def _parse_intl_tag(tag: str) -> BabelLocale:
    return BabelLocale.parse(tag, sep="-")


def babel_locale_for(locale: LocaleLike) -> BabelLocale:
    """Babel locale for a supported locale; anything else formats as en-US."""
    return _parse_intl_tag(intl_tag_for(locale))


def _locale_label(locale: LocaleLike) -> str:
    return locale.value if isinstance(locale, Locale) else str(locale)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def format_date(
    value: Union[date, datetime],
    locale: LocaleLike = Locale.EN,
    options: FormatOptions = None,
) -> str:
    """Format a date (year, month, day) for the locale.

    ``options`` are passed to ``babel.dates.format_date``; ``format``
    defaults to "medium" (e.g. "Jan 15, 2024").
    """
    kwargs: Dict[str, Any] = {"format": "medium"}
    kwargs.update(options or {})
    try:
        return dates.format_date(value, locale=babel_locale_for(locale), **kwargs)
    except Exception as e:  # pylint: disable=broad-except
        logger.warning(
            "date_formatting_failed", locale=_locale_label(locale), error=str(e)
        )
        return str(value)


def format_time(
    value: Union[time, datetime],
    locale: LocaleLike = Locale.EN,
    options: FormatOptions = None,
) -> str:
    """Format hour and minute for the locale.

    Naive datetimes are taken as UTC and rendered without conversion.
    """
    kwargs: Dict[str, Any] = {"format": "short"}
    kwargs.update(options or {})
    try:
        return dates.format_time(value, locale=babel_locale_for(locale), **kwargs)
    except Exception as e:  # pylint: disable=broad-except
        logger.warning(
            "time_formatting_failed", locale=_locale_label(locale), error=str(e)
        )
        return str(value)


def format_number(
    number: Number,
    locale: LocaleLike = Locale.EN,
    options: FormatOptions = None,
) -> str:
    """Format a number with the locale's grouping and decimal symbols."""
    try:
        return numbers.format_decimal(
            number, locale=babel_locale_for(locale), **(options or {})
        )
    except Exception as e:  # pylint: disable=broad-except
        logger.warning(
            "number_formatting_failed", locale=_locale_label(locale), error=str(e)
        )
        return str(number)


def format_currency(
    amount: Number,
    currency: str = "USD",
    locale: LocaleLike = Locale.EN,
) -> str:
    """Format an amount of ``currency`` (ISO 4217 code) for the locale."""
    try:
        return numbers.format_currency(amount, currency, locale=babel_locale_for(locale))
    except Exception as e:  # pylint: disable=broad-except
        logger.warning(
            "currency_formatting_failed",
            locale=_locale_label(locale),
            currency=currency,
            error=str(e),
        )
        return f"{currency} {amount}"


def format_distance(meters: Number, locale: LocaleLike = Locale.EN) -> str:
    """Format a distance; English uses feet/miles, every other locale metric.

    >>> format_distance(500, "es")
    '500 m'
    >>> format_distance(2000, "en")
    '1.2 mi'
    """
    meters = float(meters)
    if Locale.coerce(locale) == Locale.EN:
        feet = meters * FEET_PER_METER
        if feet < FEET_PER_MILE:
            return f"{_round_half_up(feet)} ft"
        return f"{feet / FEET_PER_MILE:.1f} mi"

    if meters < METERS_PER_KILOMETER:
        return f"{_round_half_up(meters)} m"
    return f"{meters / METERS_PER_KILOMETER:.1f} km"


def format_relative_time(
    value: Union[date, datetime],
    locale: LocaleLike = Locale.EN,
    now: Optional[datetime] = None,
) -> str:
    """Phrase ``value`` relative to ``now`` ("5 minutes ago", "in 2 hours").

    The absolute difference picks the unit (under 60s seconds, under an
    hour minutes, under a day hours, else days) and is rounded down to
    whole units. Less than a second either way reads as "now" ("ahora").
    Falls back to format_date on failure.
    """
    try:
        if not isinstance(value, datetime):
            value = datetime.combine(value, time.min)
        if now is None:
            now = datetime.now(value.tzinfo)
        diff_seconds = (value - now).total_seconds()
        magnitude = abs(diff_seconds)

        for upper_bound, unit, unit_seconds in RELATIVE_TIME_BUCKETS:
            if magnitude < upper_bound:
                break
        amount = math.floor(magnitude / unit_seconds)
        if amount == 0:
            return NOW_PHRASES[Locale.coerce(locale) or Locale.EN]
        signed_seconds = amount * unit_seconds * (-1 if diff_seconds < 0 else 1)

        return dates.format_timedelta(
            timedelta(seconds=signed_seconds),
            granularity=unit,
            threshold=math.inf,
            add_direction=True,
            locale=babel_locale_for(locale),
        )
    except Exception as e:  # pylint: disable=broad-except
        logger.warning(
            "relative_time_formatting_failed",
            locale=_locale_label(locale),
            error=str(e),
        )
        return format_date(value, locale)
