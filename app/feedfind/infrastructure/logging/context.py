"""Locale context binding for structured logging.

Binds the active locale to every log entry emitted inside a block, so
that entries written while rendering for a temporary locale can be told
apart.

Usage:
    from feedfind.infrastructure.logging import bind_locale_context

    with bind_locale_context("es"):
        logger.info("rendering_page")  # includes locale="es"
"""

from contextlib import contextmanager
from typing import Any, Generator, Optional

import structlog


@contextmanager
def bind_locale_context(locale: str, **extra_context: Any) -> Generator[None, None, None]:
    """Bind ``locale`` (and any extra fields) for the duration of the block.

    Previously bound values are restored on exit, so blocks can nest.
    """
    with structlog.contextvars.bound_contextvars(locale=locale, **extra_context):
        yield


def get_bound_locale() -> Optional[str]:
    """Return the locale bound to the logging context, if any."""
    return structlog.contextvars.get_contextvars().get("locale")
