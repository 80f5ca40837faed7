"""Process-wide providers for settings and the i18n service.

Each provider builds its object on first call and returns the same
instance afterwards. Tests reset them with ``provider.cache_clear()``.
"""

from functools import lru_cache

from feedfind.infrastructure.configuration import Settings
from feedfind.infrastructure.i18n import I18nService, create_i18n_service


@lru_cache
def get_settings() -> Settings:
    """Settings read from the environment and ``.env``."""
    return Settings()


@lru_cache
def get_i18n_service() -> I18nService:
    """The shared I18nService, configured from ``get_settings().i18n``.

    A locale saved by a previous session is applied before returning.

    Raises:
        ValueError: If I18N_DEFAULT_LOCALE names an unsupported locale.
    """
    service = create_i18n_service(get_settings().i18n)
    service.load_persisted_locale()
    return service
