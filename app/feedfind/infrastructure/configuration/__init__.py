"""Infrastructure configuration module - public API.

Centralized configuration management for FeedFind using Pydantic
BaseSettings with domain-based organization.

Exports:
    settings: Singleton Settings instance (main configuration object)
    Settings: Main settings class (for testing/overrides)
    I18nSettings: Translation engine settings class (for testing)
"""

from feedfind.infrastructure.configuration.infrastructure.i18n import I18nSettings
from feedfind.infrastructure.configuration.settings import Settings, settings

__all__ = ["Settings", "I18nSettings", "settings"]
