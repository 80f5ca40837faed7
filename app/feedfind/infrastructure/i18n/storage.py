"""Key-value slots used to persist the selected locale."""

import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional, Union

from feedfind.infrastructure.logging import get_module_logger

logger = get_module_logger()


class LocaleStorage(ABC):
    """Minimal string key-value store, shaped like browser localStorage."""

    @abstractmethod
    def get_item(self, key: str) -> Optional[str]:
        """Return the stored value, or None when the key is absent."""

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value."""


class InMemoryLocaleStorage(LocaleStorage):
    """Process-local storage; shared between engines given the same instance."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self.items: Dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self.items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self.items[key] = value


class JSONFileLocaleStorage(LocaleStorage):
    """Storage backed by a JSON object file.

    The file is read on every access so separate instances (and separate
    processes) see each other's writes. Other keys in the file are kept.

    Raises:
        OSError: On read or write failures other than a missing file.
        ValueError: If the file does not hold a JSON object.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def _read(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        with open(self.path, "r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"Locale storage file is not a JSON object: {self.path}")
        return data

    def get_item(self, key: str) -> Optional[str]:
        value = self._read().get(key)
        return value if isinstance(value, str) else None

    def set_item(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2)
        logger.debug("wrote_locale_storage", path=str(self.path), key=key)
