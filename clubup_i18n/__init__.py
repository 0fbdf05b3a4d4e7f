"""
ClubUp Localization

Country pricing, currency conversion, translation lookup and locale-aware
formatting for the ClubUp golf equipment marketplace.
"""

__version__ = "1.0.0"
__author__ = "ClubUp Team"

from .config import Settings
from .core import ClubUpLocalization, CountryState, LocaleState, MemoryPreferenceStore, JsonFilePreferenceStore
from .localization import LocalizationManager
from .models import CountryConfig, LocaleConfig

__all__ = [
    "Settings",
    "ClubUpLocalization",
    "CountryState",
    "LocaleState",
    "MemoryPreferenceStore",
    "JsonFilePreferenceStore",
    "LocalizationManager",
    "CountryConfig",
    "LocaleConfig",
    "__version__",
]
