"""Application-scoped service providers."""

from feedfind.infrastructure.services.providers import get_i18n_service, get_settings

__all__ = ["get_settings", "get_i18n_service"]
