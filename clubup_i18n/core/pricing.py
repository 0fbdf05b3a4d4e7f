"""
Subscription, shipping and commission pricing for the active country.
"""

from typing import Dict

from pydantic import BaseModel, Field

from .country_state import CountryState

# Marketplace commission percentage by subscription tier
COMMISSION_RATES: Dict[str, float] = {
    'free': 5,
    'pro': 3,
    'business': 3,
    'pga-pro': 1,
}
DEFAULT_COMMISSION_RATE = 5

_PLAN_FIELDS = {
    'pro': 'pro',
    'business': 'business',
    'pga_pro': 'pga_pro',
    'pga-pro': 'pga_pro',
    'pgaPro': 'pga_pro',
}


class ShippingInfo(BaseModel):
    """Shipping thresholds in the active currency, raw and formatted."""

    free_shipping_threshold: float
    standard_shipping: float
    express_shipping: float
    formatted: Dict[str, str] = Field(default_factory=dict)


class PricingService:
    """Price lookups that depend on the active country."""

    def __init__(self, country_state: CountryState):
        self.country_state = country_state

    def get_subscription_price(self, plan: str) -> float:
        """
        Monthly price of a paid plan in the active currency.

        Args:
            plan: ``pro``, ``business`` or ``pga_pro`` (``pgaPro`` and
                ``pga-pro`` are accepted too)

        Raises:
            ValueError: If the plan has no price
        """
        field_name = _PLAN_FIELDS.get(plan)
        if field_name is None:
            raise ValueError(f"Unknown subscription plan: {plan!r}")
        return getattr(self.country_state.country.pricing, field_name)

    def get_formatted_subscription_price(self, plan: str) -> str:
        return self.country_state.format_price(self.get_subscription_price(plan))

    def get_shipping_info(self) -> ShippingInfo:
        shipping = self.country_state.country.shipping
        fmt = self.country_state.format_price
        return ShippingInfo(
            free_shipping_threshold=shipping.free,
            standard_shipping=shipping.standard,
            express_shipping=shipping.express,
            formatted={
                'free_threshold': fmt(shipping.free),
                'standard': fmt(shipping.standard),
                'express': fmt(shipping.express),
            },
        )

    def convert_and_format_price(self, price: float, from_currency: str = "GBP") -> str:
        """Convert to the active currency, then format, e.g. ``$127``."""
        return self.country_state.format_price(
            self.country_state.convert_price(price, from_currency)
        )

    @staticmethod
    def get_commission_rate(tier: str) -> float:
        """Commission percentage for a tier; unknown tiers pay the free rate."""
        return COMMISSION_RATES.get(tier, DEFAULT_COMMISSION_RATE)
