"""
Composition root for the country and locale containers.
"""

from datetime import datetime
from typing import Optional
import logging

from ..config import Settings
from ..localization import LocalizationManager
from ..models import CountryConfig, LocaleConfig
from ..utils.formatting import DateLike
from .content import LocalizedContent
from .country_state import CountryState
from .locale_state import LocaleState
from .pricing import PricingService
from .storage import JsonFilePreferenceStore, PreferenceStore

logger = logging.getLogger(__name__)


class ClubUpLocalization:
    """
    Wires preference storage, country state and locale state together.

    Consumers use this object the way pages use the country and locale
    hooks: read ``country``/``locale``, call the setters, and format prices,
    dates and text through it.
    """

    def __init__(
        self,
        store: PreferenceStore,
        manager: Optional[LocalizationManager] = None,
        timezone_override: Optional[str] = None
    ):
        """
        Build and initialize both containers.

        Args:
            store: Durable preference storage
            manager: Catalog manager (built-in catalogs if omitted)
            timezone_override: Timezone name used for first-run detection
        """
        self.store = store
        self.manager = manager or LocalizationManager()
        self.country_state = CountryState(store, self.manager, timezone_override)
        self.locale_state = LocaleState(self.country_state, store)
        self.pricing = PricingService(self.country_state)
        self.content = LocalizedContent(self.locale_state)

        self.country_state.init()
        self.locale_state.init()
        logger.debug(f"Localization ready: country={self.country.code}, locale={self.locale.code}")

    @classmethod
    def from_settings(cls, settings: Settings) -> "ClubUpLocalization":
        """Build from application settings with file-backed preferences."""
        return cls(
            store=JsonFilePreferenceStore(settings.storage_path),
            manager=LocalizationManager(settings.localization_dir),
            timezone_override=settings.timezone,
        )

    # Country

    @property
    def country(self) -> CountryConfig:
        return self.country_state.country

    def set_country(self, country_code: str) -> bool:
        return self.country_state.set_country(country_code)

    def format_price(self, amount: float) -> str:
        return self.country_state.format_price(amount)

    def convert_price(self, amount: float, from_currency: str = "GBP") -> int:
        return self.country_state.convert_price(amount, from_currency)

    # Locale

    @property
    def locale(self) -> LocaleConfig:
        return self.locale_state.locale

    def set_locale(self, locale_code: str) -> bool:
        return self.locale_state.set_locale(locale_code)

    def t(self, key: str, fallback: Optional[str] = None) -> str:
        return self.locale_state.t(key, fallback)

    def format_date(self, value: DateLike) -> str:
        return self.locale_state.format_date(value)

    def format_time(self, value: datetime) -> str:
        return self.locale_state.format_time(value)

    def format_datetime(self, value: datetime) -> str:
        return self.locale_state.format_datetime(value)

    def format_relative_time(self, value: DateLike, now: Optional[datetime] = None) -> str:
        return self.locale_state.format_relative_time(value, now)
