"""
Catalog models for countries and locales.
"""

from pydantic import BaseModel, Field
from typing import Literal


class CurrencyInfo(BaseModel):
    """Currency used for display in a country."""

    model_config = {"frozen": True}

    code: str = Field(description="ISO 4217 currency code")
    symbol: str = Field(description="Display symbol, e.g. £")
    position: Literal["before", "after"] = Field(description="Symbol placement relative to the amount")


class PricingTiers(BaseModel):
    """Monthly subscription prices in the country's currency."""

    model_config = {"frozen": True}

    pro: float = Field(ge=0)
    business: float = Field(ge=0)
    pga_pro: float = Field(ge=0)


class ShippingRates(BaseModel):
    """Shipping thresholds and flat fees in the country's currency."""

    model_config = {"frozen": True}

    free: float = Field(ge=0, description="Order value above which shipping is free")
    standard: float = Field(ge=0, description="Standard flat fee")
    express: float = Field(ge=0, description="Express flat fee")


class CountryConfig(BaseModel):
    """Pricing and currency configuration for one marketplace region."""

    model_config = {"frozen": True}

    code: str = Field(min_length=1, description="Unique catalog key, e.g. GB")
    name: str = Field(min_length=1)
    flag: str = Field(min_length=1)
    currency: CurrencyInfo
    pricing: PricingTiers
    shipping: ShippingRates
    golf_association: str = Field(min_length=1, description="Label for the regional PGA credential")
    locale: str = Field(min_length=1, description="Locale used for number formatting")

    def __str__(self) -> str:
        return f"{self.name} ({self.code})"


class LocaleConfig(BaseModel):
    """Display locale (language + region)."""

    model_config = {"frozen": True}

    code: str = Field(min_length=1, description="BCP 47 code, e.g. en-GB")
    name: str
    native_name: str
    flag: str
    direction: Literal["ltr", "rtl"] = Field(default="ltr")

    @property
    def language(self) -> str:
        """Primary language subtag, e.g. ``en``."""
        return self.code.split("-")[0]

    def __str__(self) -> str:
        return f"{self.native_name} ({self.code})"
