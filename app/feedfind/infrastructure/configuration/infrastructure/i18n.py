"""Internationalization infrastructure settings."""

from typing import Optional

from pydantic import Field, field_validator

from feedfind.infrastructure.configuration.base import InfrastructureSettings


class I18nSettings(InfrastructureSettings):
    """Translation engine configuration.

    Environment Variables:
        I18N_DEFAULT_LOCALE: Baseline locale used for fallback (default: en)
        I18N_PREFERRED_LANGUAGE: Environment language hint read once at
            startup, e.g. "es-MX" (default: unset)
        I18N_TRANSLATIONS_DIR: Directory with <namespace>.<locale>.yml files
            (default: packaged feedfind/locales)
        I18N_LOCALE_STORAGE_PATH: JSON file holding the persisted locale
            preference. When unset, no persistence slot is available.
        I18N_LOCALE_STORAGE_KEY: Key of the persisted preference
            (default: feedfind-locale)
        I18N_CACHE_ENABLED: Cache resolved translations (default: True)

    Example:
        ```python
        from feedfind.infrastructure.services import get_settings

        settings = get_settings()

        default_locale = settings.i18n.default_locale
        if settings.i18n.locale_storage_path:
            # Restore the previous session's locale...
        ```
    """

    default_locale: str = Field(
        default="en",
        alias="I18N_DEFAULT_LOCALE",
        description="Baseline locale; its tables are the completeness reference",
    )
    preferred_language: Optional[str] = Field(
        default=None,
        alias="I18N_PREFERRED_LANGUAGE",
        description="Language hint consulted at construction (primary subtag only)",
    )
    translations_dir: Optional[str] = Field(
        default=None,
        alias="I18N_TRANSLATIONS_DIR",
        description="Override directory for YAML translation tables",
    )
    locale_storage_path: Optional[str] = Field(
        default=None,
        alias="I18N_LOCALE_STORAGE_PATH",
        description="JSON file used to persist the chosen locale",
    )
    locale_storage_key: str = Field(
        default="feedfind-locale",
        alias="I18N_LOCALE_STORAGE_KEY",
        description="Key of the persisted locale preference",
    )
    cache_enabled: bool = Field(
        default=True,
        alias="I18N_CACHE_ENABLED",
        description="Cache resolved translations until the locale changes",
    )

    @field_validator("default_locale", mode="before")
    @classmethod
    def normalize_default_locale(cls, v: Optional[str]) -> str:
        """Lowercase the default locale tag; empty values fall back to en."""
        if not v:
            return "en"
        return str(v).strip().lower()
