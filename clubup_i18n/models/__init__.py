"""
Data models for ClubUp localization.
"""

from .catalog import (
    CurrencyInfo,
    PricingTiers,
    ShippingRates,
    CountryConfig,
    LocaleConfig,
)

__all__ = [
    "CurrencyInfo",
    "PricingTiers",
    "ShippingRates",
    "CountryConfig",
    "LocaleConfig",
]
