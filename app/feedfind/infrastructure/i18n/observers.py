"""Locale change observers.

Callbacks are called synchronously in registration order. A failing
callback is logged and the remaining callbacks still run.
"""

from typing import Callable, List, Optional

from feedfind.infrastructure.i18n.models import Locale
from feedfind.infrastructure.logging import get_module_logger

logger = get_module_logger()

LocaleObserver = Callable[[Locale], None]
Unregister = Callable[[], None]


class LocaleObserverRegistry:
    """Ordered set of locale change callbacks."""

    def __init__(self) -> None:
        self._observers: List[LocaleObserver] = []

    def __len__(self) -> int:
        return len(self._observers)

    def __contains__(self, callback: object) -> bool:
        return callback in self._observers

    def add(self, callback: LocaleObserver) -> Unregister:
        """Register callback and return a handle that removes it.

        Registering the same callback twice keeps a single entry. The
        returned handle may be called any number of times.
        """
        if callback not in self._observers:
            self._observers.append(callback)
            logger.debug(
                "registered_locale_observer",
                observer=getattr(callback, "__name__", "unknown"),
                total_observers=len(self._observers),
            )

        def unregister() -> None:
            self.remove(callback)

        return unregister

    def remove(self, callback: LocaleObserver) -> None:
        if callback in self._observers:
            self._observers.remove(callback)

    def clear(self) -> None:
        self._observers.clear()

    def notify(
        self, locale: Locale, current: Optional[Callable[[], Locale]] = None
    ) -> int:
        """Call every observer with locale.

        Callbacks removed while notification is in progress are skipped.
        When ``current`` stops returning ``locale`` (an observer switched
        locale again), the remaining callbacks are skipped; the nested
        change has already notified them of the newer locale.

        Returns:
            Number of callbacks that completed without raising.
        """
        delivered = 0
        for callback in list(self._observers):
            if current is not None and current() != locale:
                logger.debug("locale_notification_superseded", locale=locale.value)
                break
            if callback not in self._observers:
                continue
            try:
                callback(locale)
                delivered += 1
            except Exception as e:  # pylint: disable=broad-except
                logger.error(
                    "locale_observer_failed",
                    observer=getattr(callback, "__name__", "unknown"),
                    locale=locale.value,
                    error=str(e),
                )
        return delivered
