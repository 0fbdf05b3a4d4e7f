"""
Built-in country catalog and static exchange rates.
"""

from typing import Dict

from ..models import CountryConfig, CurrencyInfo, PricingTiers, ShippingRates

DEFAULT_COUNTRY_CODE = 'GB'

BUILTIN_COUNTRIES: Dict[str, CountryConfig] = {
    'GB': CountryConfig(
        code='GB',
        name='United Kingdom',
        flag='🇬🇧',
        currency=CurrencyInfo(code='GBP', symbol='£', position='before'),
        pricing=PricingTiers(pro=7, business=22, pga_pro=45),
        shipping=ShippingRates(free=50, standard=5.99, express=15),
        golf_association='PGA Professional',
        locale='en-GB',
    ),
    'US': CountryConfig(
        code='US',
        name='United States',
        flag='🇺🇸',
        currency=CurrencyInfo(code='USD', symbol='$', position='before'),
        pricing=PricingTiers(pro=9, business=29, pga_pro=59),
        shipping=ShippingRates(free=65, standard=7.99, express=19.99),
        golf_association='PGA of America Professional',
        locale='en-US',
    ),
    'AU': CountryConfig(
        code='AU',
        name='Australia',
        flag='🇦🇺',
        currency=CurrencyInfo(code='AUD', symbol='A$', position='before'),
        pricing=PricingTiers(pro=12, business=39, pga_pro=79),
        shipping=ShippingRates(free=75, standard=9.99, express=24.99),
        golf_association='PGA of Australia Professional',
        locale='en-AU',
    ),
    'CA': CountryConfig(
        code='CA',
        name='Canada',
        flag='🇨🇦',
        currency=CurrencyInfo(code='CAD', symbol='C$', position='before'),
        pricing=PricingTiers(pro=11, business=35, pga_pro=69),
        shipping=ShippingRates(free=70, standard=8.99, express=22.99),
        golf_association='PGA of Canada Professional',
        locale='en-CA',
    ),
    'EU': CountryConfig(
        code='EU',
        name='European Union',
        flag='🇪🇺',
        currency=CurrencyInfo(code='EUR', symbol='€', position='before'),
        pricing=PricingTiers(pro=8, business=25, pga_pro=52),
        shipping=ShippingRates(free=55, standard=6.99, express=17.99),
        golf_association='European PGA Professional',
        locale='en-EU',
    ),
}

# Units of each currency per 1 GBP. Not live; refreshed by hand.
EXCHANGE_RATES: Dict[str, float] = {
    'GBP': 1.0,
    'USD': 1.27,
    'EUR': 1.15,
    'CAD': 1.70,
    'AUD': 1.89,
}

# Default display locale per country when the user has not chosen one
COUNTRY_LOCALE_MAP: Dict[str, str] = {
    'GB': 'en-GB',
    'US': 'en-US',
    'AU': 'en-AU',
    'CA': 'en-CA',
    'EU': 'en-GB',
}
