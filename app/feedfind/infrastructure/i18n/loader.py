"""Translation table sources.

A loader turns some source of translation tables into one
TranslationCatalog per locale. Tables live on disk as YAML files named
``<namespace>.<locale>.yml`` or in memory as plain dicts.
"""

import copy
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

import yaml

from feedfind.infrastructure.i18n.models import Locale, TranslationCatalog
from feedfind.infrastructure.logging import get_module_logger

logger = get_module_logger()

TRANSLATION_FILE_SUFFIX = ".yml"


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def locale_from_filename(path: Path) -> Optional[Locale]:
    """Locale named by a ``<namespace>.<locale>.yml`` file.

    The tag must be a supported locale written in lower case; anything
    else (``README.yml``, ``common.fr.yml``, ``common.HE.yml``) yields None.
    """
    namespace, _, tag = path.stem.rpartition(".")
    if not namespace or tag not in Locale.values():
        return None
    return Locale(tag)


def read_translation_file(path: Path) -> Any:
    """Parse one YAML file.

    Raises:
        ValueError: If the file is not valid YAML.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f)
    except yaml.YAMLError as e:
        logger.error("translation_file_parse_failed", file=str(path), error=str(e))
        raise ValueError(f"Failed to parse {path}: {e}") from e


class TranslationLoader(ABC):
    """Source of per-locale translation catalogs."""

    @abstractmethod
    def load(self, locale: Locale) -> TranslationCatalog:
        """Build the catalog for one locale.

        Raises:
            FileNotFoundError: If the source has nothing for the locale.
            ValueError: If the source data cannot be parsed.
        """

    @abstractmethod
    def load_all(self) -> Dict[Locale, TranslationCatalog]:
        """Build a catalog for every locale the source provides."""


class YAMLTranslationLoader(TranslationLoader):
    """Reads catalogs from a directory of YAML translation files.

    Every ``*.<locale>.yml`` file contributes its top-level namespaces to
    that locale's catalog; files sharing a namespace are deep-merged in
    file name order.

    Attributes:
        translations_dir: Directory holding the YAML files.
        use_cache: Whether loaded catalogs are kept for later calls.
        cache: Catalogs already loaded, by locale.
    """

    def __init__(self, translations_dir: Union[str, Path], use_cache: bool = True):
        """
        Raises:
            ValueError: If ``translations_dir`` does not exist.
        """
        self.translations_dir = Path(translations_dir)
        self.use_cache = use_cache
        self.cache: Dict[Locale, TranslationCatalog] = {}

        if not self.translations_dir.exists():
            raise ValueError(
                f"Translations directory not found: {self.translations_dir}"
            )

        logger.info(
            "initialized_yaml_loader",
            translations_dir=str(self.translations_dir),
            use_cache=use_cache,
        )

    def files_for(self, locale: Locale) -> List[Path]:
        """Translation files of ``locale`` in merge order."""
        return sorted(
            self.translations_dir.glob(f"*.{locale.value}{TRANSLATION_FILE_SUFFIX}")
        )

    def discover_locales(self) -> List[Locale]:
        """Supported locales with at least one file, in declaration order."""
        found = set()
        for path in self.translations_dir.glob(f"*{TRANSLATION_FILE_SUFFIX}"):
            locale = locale_from_filename(path)
            if locale is None:
                logger.debug("skipped_translation_file", file=path.name)
                continue
            found.add(locale)
        return [locale for locale in Locale if locale in found]

    def load(self, locale: Locale) -> TranslationCatalog:
        """
        Raises:
            FileNotFoundError: If no file exists for ``locale``.
            ValueError: If a file is not valid YAML.
        """
        cached = self.cache.get(locale) if self.use_cache else None
        if cached is not None:
            return cached

        files = self.files_for(locale)
        if not files:
            raise FileNotFoundError(
                f"No translation files found for locale {locale.value} in {self.translations_dir}"
            )

        catalog = TranslationCatalog(locale=locale, loaded_at=_now_iso())
        for path in files:
            data = read_translation_file(path)
            if data:
                self._add_namespaces(catalog, data, path)

        logger.info(
            "loaded_translations",
            locale=locale.value,
            file_count=len(files),
            namespace_count=len(catalog.messages),
        )
        if self.use_cache:
            self.cache[locale] = catalog
        return catalog

    def load_all(self) -> Dict[Locale, TranslationCatalog]:
        """
        Raises:
            ValueError: If the directory holds no file for a supported locale.
        """
        locales = self.discover_locales()
        if not locales:
            raise ValueError(f"No translation files found in {self.translations_dir}")

        catalogs = {}
        for locale in locales:
            try:
                catalogs[locale] = self.load(locale)
            except FileNotFoundError:
                logger.warning("could_not_load_locale", locale=locale.value)
        return catalogs

    def _add_namespaces(self, catalog: TranslationCatalog, data: Any, path: Path) -> None:
        # Top level must map namespace names to tables.
        if not isinstance(data, dict):
            logger.warning("invalid_translation_file", file=str(path), expected="dict")
            return

        for namespace, table in data.items():
            if not isinstance(table, dict):
                logger.warning(
                    "invalid_namespace_table",
                    file=str(path),
                    namespace=namespace,
                )
                continue
            catalog.merge(
                TranslationCatalog(locale=catalog.locale, messages={str(namespace): table})
            )

    def clear_cache(self) -> None:
        self.cache.clear()
        logger.info("cleared_loader_cache")


class DictTranslationLoader(TranslationLoader):
    """Loader over translation tables already held in memory.

    Tables are keyed by locale (member or tag). Each load returns a deep
    copy, so callers may mutate catalogs without touching the source.
    Tags that are not supported locales are skipped.
    """

    def __init__(self, tables: Mapping[Union[Locale, str], Mapping[str, Any]]):
        self.tables: Dict[Locale, Mapping[str, Any]] = {}
        for tag, table in tables.items():
            locale = Locale.coerce(tag)
            if locale is None:
                logger.warning("skipped_unsupported_table", locale=str(tag))
                continue
            self.tables[locale] = table

    def load(self, locale: Locale) -> TranslationCatalog:
        if locale not in self.tables:
            raise FileNotFoundError(f"No translation table for locale {locale.value}")
        return TranslationCatalog(
            locale=locale,
            messages=copy.deepcopy(dict(self.tables[locale])),
            loaded_at=_now_iso(),
        )

    def load_all(self) -> Dict[Locale, TranslationCatalog]:
        return {locale: self.load(locale) for locale in self.tables}
