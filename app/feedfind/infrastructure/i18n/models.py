"""Translation models for the i18n system.

Defines core data structures for managing translation tables and locales.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, List, Mapping, Optional, Union

# Nested mapping of dot-path segments; leaves are template strings.
TranslationTable = Dict[str, Any]

# Dotted path into a TranslationTable (e.g. "errors.validation.email").
# Any string is accepted; unresolved keys are simply "missing".
TranslationKey = str

# Placeholder name -> substitution value. A numeric "count" entry
# additionally triggers plural dispatch.
TranslationParams = Mapping[str, Any]

PLURAL_COUNT_PARAM = "count"

# Languages written right-to-left (primary subtags).
RTL_LANGUAGES = frozenset({"ar", "he", "fa", "ur"})


@dataclass(frozen=True)
class LocaleInfo:
    """Static metadata describing a supported locale."""

    intl_tag: str
    english_name: str
    native_name: str
    default_currency: str


_LOCALE_INFO: Dict[str, LocaleInfo] = {
    "en": LocaleInfo("en-US", "English", "English", "USD"),
    "es": LocaleInfo("es-ES", "Spanish", "Español", "USD"),
    "ar": LocaleInfo("ar-SA", "Arabic", "العربية", "SAR"),
    "he": LocaleInfo("he-IL", "Hebrew", "עברית", "ILS"),
}

DEFAULT_INTL_TAG = "en-US"


class Locale(str, Enum):
    """Supported locale identifiers.

    Values are bare language subtags; ``intl_tag`` gives the full
    language-region tag used for formatting.
    """

    EN = "en"
    ES = "es"
    AR = "ar"
    HE = "he"

    @classmethod
    def from_string(cls, locale_str: str) -> "Locale":
        """Convert string to Locale enum.

        Args:
            locale_str: Locale string (e.g., "en", "es").

        Returns:
            Matching Locale enum value.

        Raises:
            ValueError: If locale string is not supported.
        """
        try:
            return cls(locale_str)
        except ValueError as e:
            raise ValueError(f"Unsupported locale: {locale_str}") from e

    @classmethod
    def coerce(cls, value: Union["Locale", str, None]) -> Optional["Locale"]:
        """Best-effort conversion that never raises.

        Accepts Locale members and strings in any case, with or without a
        region suffix ("es-MX", "he_IL"). Only the primary subtag is used.

        Returns:
            Matching Locale, or None when the value is not supported.
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        primary = primary_subtag(value)
        try:
            return cls(primary)
        except ValueError:
            return None

    @classmethod
    def values(cls) -> List[str]:
        """Return the supported tags in declaration order."""
        return [member.value for member in cls]

    @property
    def language(self) -> str:
        """Get the language subtag (same as the value)."""
        return self.value

    @property
    def info(self) -> LocaleInfo:
        return _LOCALE_INFO[self.value]

    @property
    def intl_tag(self) -> str:
        """Get the language-region tag used for formatting (e.g. "es-ES")."""
        return self.info.intl_tag

    @property
    def english_name(self) -> str:
        return self.info.english_name

    @property
    def native_name(self) -> str:
        return self.info.native_name

    @property
    def default_currency(self) -> str:
        return self.info.default_currency

    @property
    def is_rtl(self) -> bool:
        return self.value in RTL_LANGUAGES

    @property
    def direction(self) -> str:
        """Text direction for this locale: "rtl" or "ltr"."""
        return "rtl" if self.is_rtl else "ltr"


def primary_subtag(tag: str) -> str:
    """Extract the lowercase primary subtag of a language tag.

    "es-MX" -> "es", "he_IL.UTF-8" -> "he", "EN" -> "en".
    """
    primary = tag.strip().replace("_", "-").split("-")[0]
    return primary.split(".")[0].lower()


def is_rtl(locale: Union[Locale, str, None]) -> bool:
    """Return True iff the locale's language is written right-to-left.

    Unrecognized or empty values are treated as left-to-right.
    """
    if isinstance(locale, Locale):
        return locale.is_rtl
    if not isinstance(locale, str) or not locale.strip():
        return False
    return primary_subtag(locale) in RTL_LANGUAGES


def intl_tag_for(locale: Union[Locale, str, None]) -> str:
    """Map a locale to its formatting tag; unknown locales format as en-US."""
    supported = Locale.coerce(locale)
    return supported.intl_tag if supported else DEFAULT_INTL_TAG


def plural_count(params: Optional[TranslationParams]) -> Optional[Union[int, float]]:
    """Return ``params["count"]`` when it is a real number, else None.

    Booleans are not counts. Whole floats become ints, so ``1.0`` reads
    as "1" once interpolated.
    """
    if not params or PLURAL_COUNT_PARAM not in params:
        return None
    count = params[PLURAL_COUNT_PARAM]
    if isinstance(count, bool) or not isinstance(count, (int, float)):
        return None
    if isinstance(count, float) and count.is_integer():
        return int(count)
    return count


@dataclass
class TranslationCatalog:
    """Container for the translation table of a single locale.

    Attributes:
        locale: The Locale this catalog is for.
        messages: Nested dict structure {segment: {segment: template}}.
        loaded_at: Timestamp (ISO 8601) when translations were loaded.
    """

    locale: Locale
    messages: TranslationTable = field(default_factory=dict)
    loaded_at: Optional[str] = None

    def resolve(self, key: TranslationKey) -> Optional[str]:
        """Walk the table along the dotted key.

        Returns:
            The template string, or None when a segment is missing or the
            final value is not a string.
        """
        value: Any = self.messages
        for segment in key.split("."):
            if not isinstance(value, dict):
                return None
            value = value.get(segment)
            if value is None:
                return None
        return value if isinstance(value, str) else None

    def has_message(self, key: TranslationKey) -> bool:
        """Check if a non-empty template exists for key."""
        return bool(self.resolve(key))

    def set_message(self, key: TranslationKey, message: str) -> None:
        """Set a template, creating intermediate tables as needed."""
        *parents, leaf = key.split(".")
        node = self.messages
        for segment in parents:
            child = node.get(segment)
            if not isinstance(child, dict):
                child = {}
                node[segment] = child
            node = child
        node[leaf] = message

    def iter_keys(self, strings_only: bool = True) -> Iterator[str]:
        """Yield the dotted path of every leaf in table order.

        Args:
            strings_only: Skip leaves that are not strings.
        """
        yield from _iter_leaf_keys(self.messages, "", strings_only)

    def merge(self, other: "TranslationCatalog") -> None:
        """Deep-merge another catalog into this one; later entries win."""
        _deep_merge(self.messages, other.messages)


def _iter_leaf_keys(node: Mapping[str, Any], prefix: str, strings_only: bool) -> Iterator[str]:
    for segment, value in node.items():
        full_key = f"{prefix}.{segment}" if prefix else str(segment)
        if isinstance(value, dict):
            yield from _iter_leaf_keys(value, full_key, strings_only)
        elif isinstance(value, str) or not strings_only:
            yield full_key


def _deep_merge(target: Dict[str, Any], source: Mapping[str, Any]) -> None:
    for segment, value in source.items():
        existing = target.get(segment)
        if isinstance(value, dict) and isinstance(existing, dict):
            _deep_merge(existing, value)
        elif isinstance(value, dict):
            target[segment] = {}
            _deep_merge(target[segment], value)
        else:
            target[segment] = value


@dataclass(frozen=True)
class MissingTranslations:
    """Keys of the baseline table that a locale cannot resolve."""

    locale: Locale
    missing_keys: List[str]


@dataclass(frozen=True)
class TranslationStats:
    """Per-locale completeness counts against the baseline table."""

    total: int
    missing: int


@dataclass(frozen=True)
class CacheStats:
    """Resolution cache counters since the last clear."""

    size: int
    hits: int
    misses: int

    @property
    def hit_rate(self) -> float:
        lookups = self.hits + self.misses
        return self.hits / lookups if lookups else 0.0
