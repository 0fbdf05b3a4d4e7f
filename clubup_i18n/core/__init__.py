"""
Core state containers and services.
"""

from .storage import (
    COUNTRY_KEY,
    LOCALE_KEY,
    PreferenceStore,
    MemoryPreferenceStore,
    JsonFilePreferenceStore,
)
from .detection import detect_country_code, resolve_timezone_name
from .country_state import CountryState
from .locale_state import LocaleState
from .pricing import PricingService, ShippingInfo, COMMISSION_RATES
from .content import LocalizedContent
from .service import ClubUpLocalization

__all__ = [
    "COUNTRY_KEY",
    "LOCALE_KEY",
    "PreferenceStore",
    "MemoryPreferenceStore",
    "JsonFilePreferenceStore",
    "detect_country_code",
    "resolve_timezone_name",
    "CountryState",
    "LocaleState",
    "PricingService",
    "ShippingInfo",
    "COMMISSION_RATES",
    "LocalizedContent",
    "ClubUpLocalization",
]
