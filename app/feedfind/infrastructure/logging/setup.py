"""Structlog configuration and logger setup.

Configures structlog over the stdlib logging module. Development output
is rendered for the console, production output as JSON lines carrying
the app name, version and git sha. Output is silenced under pytest.

Usage:
    from feedfind.infrastructure.logging import configure_logging, get_module_logger

    configure_logging()

    logger = get_module_logger()
    logger.info("locale_changed", locale="es")

Dependencies:
    - feedfind.infrastructure.configuration.settings
"""

import inspect
import logging
import sys
from types import FrameType, ModuleType
from typing import List, Optional

import structlog
from structlog.stdlib import BoundLogger
from structlog.typing import Processor

from feedfind import __version__
from feedfind.infrastructure.configuration import settings
from feedfind.infrastructure.logging.formatters import add_app_info

SILENT_LEVEL = logging.CRITICAL + 1


def _is_test_environment() -> bool:
    """Return True when running under pytest."""
    return "pytest" in sys.modules


def _shared_processors() -> List[Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.LINENO,
                structlog.processors.CallsiteParameter.FUNC_NAME,
            ]
        ),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]


def _apply(processors: List[Processor], level: int, force: bool = False) -> BoundLogger:
    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(format="%(message)s", level=level, force=force)
    return structlog.stdlib.get_logger()


def configure_logging(
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> BoundLogger:
    """Configure structured logging.

    Args:
        log_level: Level name overriding settings.LOG_LEVEL.
        is_production: Overrides settings.is_production; selects JSON
            rendering instead of the console renderer.

    Returns:
        Configured logger instance
    """
    if _is_test_environment():
        # Loggers stay usable; the root level drops every record.
        logging.root.setLevel(SILENT_LEVEL)
        return _apply(
            [
                structlog.stdlib.add_log_level,
                structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
            ],
            SILENT_LEVEL,
            force=True,
        )

    production = settings.is_production if is_production is None else is_production
    processors = _shared_processors()
    if production:
        processors.insert(1, add_app_info("feedfind", __version__, settings.GIT_SHA))
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    level_name = (log_level or settings.LOG_LEVEL).upper()
    return _apply(processors, getattr(logging, level_name, logging.INFO))


# Module-level logger (auto-configured on import)
logger: BoundLogger = configure_logging()


def _caller_module(frame: Optional[FrameType]) -> Optional[ModuleType]:
    """Module of the code that called the function owning ``frame``."""
    if frame is None or frame.f_back is None:
        return None
    return inspect.getmodule(frame.f_back)


def get_logger(name: Optional[str] = None) -> BoundLogger:
    """Get a logger bound to ``name``, or to the calling module's name."""
    if name:
        return logger.bind(logger_name=name)

    module = _caller_module(inspect.currentframe())
    return logger.bind(logger_name=module.__name__ if module else "unknown")


def get_module_logger() -> BoundLogger:
    """Get a logger for the calling module with full path context.

    Binds ``component`` (last dotted segment) and ``module_path``.

    Example:
        # In feedfind/infrastructure/i18n/translator.py
        logger = get_module_logger()
        # context: {"component": "translator",
        #           "module_path": "feedfind.infrastructure.i18n.translator"}
    """
    module = _caller_module(inspect.currentframe())
    if module is None:
        return logger.bind(component="unknown")

    return logger.bind(
        component=module.__name__.rsplit(".", 1)[-1],
        module_path=module.__name__,
    )
