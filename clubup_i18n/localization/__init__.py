"""
Country, locale and translation catalogs.
"""

from .countries import BUILTIN_COUNTRIES, COUNTRY_LOCALE_MAP, DEFAULT_COUNTRY_CODE, EXCHANGE_RATES
from .locales import BUILTIN_LOCALES, DEFAULT_LOCALE_CODE, SELECTABLE_LOCALES
from .manager import LocalizationManager, load_country_file, load_translation_file
from .translations import TRANSLATIONS, LANGUAGE_TRANSLATIONS

__all__ = [
    "BUILTIN_COUNTRIES",
    "COUNTRY_LOCALE_MAP",
    "DEFAULT_COUNTRY_CODE",
    "EXCHANGE_RATES",
    "BUILTIN_LOCALES",
    "DEFAULT_LOCALE_CODE",
    "SELECTABLE_LOCALES",
    "LocalizationManager",
    "load_country_file",
    "load_translation_file",
    "TRANSLATIONS",
    "LANGUAGE_TRANSLATIONS",
]
