"""
Translated labels for listing conditions, categories and PGA credentials.
"""

from datetime import date, datetime
from typing import Union

from .locale_state import LocaleState

CONDITION_KEYS = {
    'New': 'condition.new',
    'Like New': 'condition.like-new',
    'Excellent': 'condition.excellent',
    'Very Good': 'condition.very-good',
    'Good': 'condition.good',
    'Fair': 'condition.fair',
}

CATEGORY_KEYS = {
    'Drivers': 'category.drivers',
    'Irons': 'category.irons',
    'Putters': 'category.putters',
    'Wedges': 'category.wedges',
    'Fairway Woods': 'category.fairway-woods',
    'Hybrids': 'category.hybrids',
    'Golf Bags': 'category.golf-bags',
    'Apparel': 'category.apparel',
    'Accessories': 'category.accessories',
}

ASSOCIATION_KEYS = {
    'GB': 'golf.association.uk',
    'US': 'golf.association.us',
    'AU': 'golf.association.au',
    'CA': 'golf.association.ca',
    'EU': 'golf.association.eu',
}


class LocalizedContent:
    """Maps stored English labels to translated display text."""

    def __init__(self, locale_state: LocaleState):
        self.locale_state = locale_state

    def condition(self, label: str) -> str:
        # Unmapped labels are used as their own key and fallback
        return self.locale_state.t(CONDITION_KEYS.get(label, label), label)

    def category(self, label: str) -> str:
        return self.locale_state.t(CATEGORY_KEYS.get(label, label), label)

    def golf_association(self, country_code: str) -> str:
        key = ASSOCIATION_KEYS.get(country_code)
        if key is not None:
            return self.locale_state.t(key)

        # Catalog countries outside the built-ins carry their own label
        config = self.locale_state.manager.get_country(country_code)
        if config is not None:
            return self.locale_state.t(f'golf.association.{country_code.lower()}', config.golf_association)

        return self.locale_state.t(ASSOCIATION_KEYS['GB'])

    def timestamp(self, value: Union[date, datetime], relative: bool = False) -> str:
        if relative:
            return self.locale_state.format_relative_time(value)
        return self.locale_state.format_date(value)
