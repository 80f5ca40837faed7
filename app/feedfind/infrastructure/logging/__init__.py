"""Structured logging infrastructure.

Centralized logging configuration for FeedFind using structlog.

Public API:
    - configure_logging(): Initialize logging for the application
    - get_logger(): Get a logger instance with a specific name
    - get_module_logger(): Get a logger for the calling module
    - bind_locale_context(): Context manager binding the active locale to logs
    - get_bound_locale(): Read the locale bound to the logging context

Example:
    from feedfind.infrastructure.logging import get_module_logger

    logger = get_module_logger()
    logger.info("module_initialized")
"""

from feedfind.infrastructure.logging.context import (
    bind_locale_context,
    get_bound_locale,
)
from feedfind.infrastructure.logging.formatters import add_app_info
from feedfind.infrastructure.logging.setup import (
    configure_logging,
    get_logger,
    get_module_logger,
)

__all__ = [
    "configure_logging",
    "get_logger",
    "get_module_logger",
    "bind_locale_context",
    "get_bound_locale",
    "add_app_info",
]
