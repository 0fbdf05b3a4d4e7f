"""
Catalog manager for countries, locales and translation tables.
"""

from pathlib import Path
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional
import logging

import yaml
from pydantic import ValidationError

from ..errors import CatalogError
from ..models import CountryConfig, LocaleConfig
from .countries import BUILTIN_COUNTRIES
from .locales import BUILTIN_LOCALES, SELECTABLE_LOCALES
from .translations import TRANSLATIONS, LANGUAGE_TRANSLATIONS

logger = logging.getLogger(__name__)


def load_country_file(path: Path) -> CountryConfig:
    """
    Load a single country record from YAML.

    Args:
        path: YAML file holding one CountryConfig mapping

    Returns:
        The validated CountryConfig

    Raises:
        CatalogError: If the file cannot be parsed or a field is missing
    """
    try:
        with open(path, encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise CatalogError(str(path), str(e)) from e

    if not isinstance(data, dict):
        raise CatalogError(str(path), "expected a mapping at the top level")

    try:
        return CountryConfig.model_validate(data)
    except ValidationError as e:
        raise CatalogError(str(path), str(e)) from e


def load_translation_file(path: Path) -> Dict[str, str]:
    """
    Load a flat key -> string override table from YAML.

    Raises:
        CatalogError: If the file is not a flat string mapping
    """
    try:
        with open(path, encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise CatalogError(str(path), str(e)) from e

    if not isinstance(data, dict):
        raise CatalogError(str(path), "expected a mapping of translation keys")

    bad_keys = [k for k, v in data.items() if not isinstance(k, str) or not isinstance(v, str)]
    if bad_keys:
        raise CatalogError(str(path), f"non-string entries: {bad_keys[:3]}")

    return data


class LocalizationManager:
    """
    Owns the country, locale and translation catalogs.

    The built-in catalogs can be extended from a directory laid out as::

        <localization_dir>/countries/*.yaml        one CountryConfig per file
        <localization_dir>/translations/<code>.yaml  sparse overrides for a locale

    Catalogs are fixed once the manager is constructed.
    """

    def __init__(self, localization_dir: Optional[str] = None):
        """
        Initialize the localization manager.

        Args:
            localization_dir: Optional directory with custom YAML catalogs
        """
        self.localization_dir = Path(localization_dir) if localization_dir else None
        self._countries: Dict[str, CountryConfig] = dict(BUILTIN_COUNTRIES)
        self._locales: Dict[str, LocaleConfig] = dict(BUILTIN_LOCALES)
        self._base: Dict[str, str] = dict(TRANSLATIONS)
        self._overrides: Dict[str, Dict[str, str]] = {
            code: dict(table) for code, table in LANGUAGE_TRANSLATIONS.items()
        }

        if self.localization_dir and self.localization_dir.exists():
            self._load_custom_countries()
            self._load_custom_translations()

    def _load_custom_countries(self) -> None:
        """Load custom country configs from YAML files."""
        for yaml_file in sorted((self.localization_dir / 'countries').glob('*.yaml')):
            try:
                config = load_country_file(yaml_file)
            except CatalogError as e:
                logger.warning(f"Skipping country file: {e}")
                continue

            if config.code in self._countries:
                logger.info(f"Custom config replaces built-in country {config.code}")
            self._countries[config.code] = config
            logger.info(f"Loaded custom country: {config}")

    def _load_custom_translations(self) -> None:
        """Merge per-locale override tables from YAML files."""
        for yaml_file in sorted((self.localization_dir / 'translations').glob('*.yaml')):
            locale_code = yaml_file.stem
            if locale_code not in self._locales:
                logger.warning(f"Skipping translations for unknown locale: {locale_code}")
                continue

            try:
                table = load_translation_file(yaml_file)
            except CatalogError as e:
                logger.warning(f"Skipping translation file: {e}")
                continue

            self._overrides.setdefault(locale_code, {}).update(table)
            logger.info(f"Loaded {len(table)} translations for {locale_code}")

    # Countries

    def get_country(self, code: str) -> Optional[CountryConfig]:
        """Get a country config by code, or None if unknown."""
        return self._countries.get(code)

    def has_country(self, code: str) -> bool:
        return code in self._countries

    def list_countries(self) -> List[CountryConfig]:
        """Get all configured countries in catalog order."""
        return list(self._countries.values())

    # Locales

    def get_locale(self, code: str) -> Optional[LocaleConfig]:
        """Get a locale config by code, or None if unknown."""
        return self._locales.get(code)

    def has_locale(self, code: str) -> bool:
        return code in self._locales

    def list_locales(self) -> List[LocaleConfig]:
        return list(self._locales.values())

    def selectable_locales(self) -> List[LocaleConfig]:
        """Locales offered in the language picker."""
        return [self._locales[code] for code in SELECTABLE_LOCALES if code in self._locales]

    # Translations

    @property
    def base_translations(self) -> Mapping[str, str]:
        return MappingProxyType(self._base)

    def overrides_for(self, locale_code: str) -> Mapping[str, str]:
        """Sparse override table for a locale (empty if it has none)."""
        return MappingProxyType(self._overrides.get(locale_code, {}))

    def resolve(self, key: str, locale_code: str, fallback: Optional[str] = None) -> str:
        """
        Resolve a translation key.

        Lookup order: the locale's override table, the English base table,
        the caller's fallback, then the key itself. Empty strings count as
        missing at every step so the result is never blank.

        Args:
            key: Dot-namespaced translation key
            locale_code: Active locale code
            fallback: Text to use when no table has the key

        Returns:
            The resolved string
        """
        for candidate in (
            self._overrides.get(locale_code, {}).get(key),
            self._base.get(key),
            fallback,
        ):
            if candidate:
                return candidate

        return key

    def missing_keys(self, locale_code: str) -> List[str]:
        """Base keys the locale does not override (useful for translators)."""
        overrides = self._overrides.get(locale_code, {})
        return [key for key in self._base if key not in overrides]
