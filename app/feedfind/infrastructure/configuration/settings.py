"""FeedFind top-level settings."""

from typing import Any, Dict, Type

from pydantic_settings import BaseSettings

from feedfind.infrastructure.configuration.base import (
    ENV_SETTINGS_CONFIG,
    InfrastructureSettings,
)
from feedfind.infrastructure.configuration.infrastructure import I18nSettings

SECTIONS: Dict[str, Type[InfrastructureSettings]] = {
    "i18n": I18nSettings,
}


class Settings(BaseSettings):
    """Process-wide settings with one attribute per section.

    Environment Variables:
        PREFIX: Deployment prefix; empty in production
        LOG_LEVEL: Logging level name (default: INFO)
        GIT_SHA: Commit of the running build, added to production logs

    Example:
        ```python
        from feedfind.infrastructure.services import get_settings

        i18n_settings = get_settings().i18n
        print(i18n_settings.default_locale)
        ```
    """

    model_config = ENV_SETTINGS_CONFIG

    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"
    GIT_SHA: str = "Unknown"

    i18n: I18nSettings

    def __init__(self, **overrides: Any):
        # Sections not passed explicitly are read from the environment.
        for name, section in SECTIONS.items():
            overrides.setdefault(name, section())
        super().__init__(**overrides)

    @property
    def is_production(self) -> bool:
        """A deployment without a PREFIX is production."""
        return not self.PREFIX


settings = Settings()
