"""
Active country selection, currency conversion and price formatting.
"""

import math
from typing import Callable, List, Optional
import logging

from ..errors import LocalizationError
from ..localization import DEFAULT_COUNTRY_CODE, EXCHANGE_RATES, LocalizationManager
from ..models import CountryConfig
from ..utils.formatting import format_amount
from .detection import detect_country_code, resolve_timezone_name
from .storage import COUNTRY_KEY, PreferenceStore

logger = logging.getLogger(__name__)

CountryListener = Callable[[CountryConfig], None]


class CountryState:
    """
    Owns the active CountryConfig.

    Starts on the default country (GB). ``init()`` then applies the persisted
    choice or, on first run, a timezone-based guess. ``set_country`` is the
    only way to change the selection afterwards.
    """

    def __init__(
        self,
        store: PreferenceStore,
        manager: Optional[LocalizationManager] = None,
        timezone_override: Optional[str] = None
    ):
        """
        Initialize the country state.

        Args:
            store: Preference store the selection is persisted to
            manager: Catalog manager (built-in catalogs if omitted)
            timezone_override: Timezone name to use instead of the runtime's
        """
        self.store = store
        self.manager = manager or LocalizationManager()
        self.timezone_override = timezone_override
        self._country: CountryConfig = self.manager.get_country(DEFAULT_COUNTRY_CODE)
        self._listeners: List[CountryListener] = []

    @property
    def country(self) -> CountryConfig:
        return self._country

    def init(self) -> CountryConfig:
        """
        Pick the starting country.

        Order: persisted code if it is in the catalog, else the timezone
        heuristic, else the default. The detected country is not persisted.

        Returns:
            The active CountryConfig
        """
        saved = self.store.get(COUNTRY_KEY)
        if saved and self.manager.has_country(saved):
            self._country = self.manager.get_country(saved)
            logger.debug(f"Restored saved country: {saved}")
            return self._country

        detected = self._detect()
        self._country = self.manager.get_country(detected or DEFAULT_COUNTRY_CODE)
        logger.debug(f"Starting country: {self._country.code} (detected={detected})")
        return self._country

    def _detect(self) -> Optional[str]:
        """Guess a country from the timezone; None on no match or failure."""
        try:
            timezone_name = resolve_timezone_name(self.timezone_override)
            code = detect_country_code(timezone_name)
        except LocalizationError as e:
            logger.debug(f"Country detection unavailable: {e}")
            return None

        if code and not self.manager.has_country(code):
            return None
        return code

    def set_country(self, country_code: str) -> bool:
        """
        Select a country by code.

        Unknown codes are ignored and leave the selection unchanged. The
        choice is persisted before it is applied, so a failed write leaves
        the active country as it was.

        Args:
            country_code: Catalog key, e.g. ``US``

        Returns:
            True if the selection was applied, False if the code was ignored

        Raises:
            PreferenceStoreError: If the choice cannot be saved
        """
        config = self.manager.get_country(country_code)
        if config is None:
            logger.debug(f"Ignoring unknown country code: {country_code!r}")
            return False

        self.store.set(COUNTRY_KEY, country_code)
        self._country = config

        for listener in list(self._listeners):
            listener(config)

        return True

    def subscribe(self, listener: CountryListener) -> Callable[[], None]:
        """
        Register a callback run after every applied ``set_country``.

        Returns:
            Function that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def convert_price(self, amount: float, from_currency: str = "GBP") -> int:
        """
        Convert an amount into the active country's currency.

        Uses the static rate table and rounds half up to a whole unit.
        Currencies missing from the table count as rate 1.

        Args:
            amount: Amount in ``from_currency``
            from_currency: ISO code of the source currency

        Returns:
            Whole-unit amount in the active currency
        """
        from_rate = EXCHANGE_RATES.get(from_currency) or 1
        to_rate = EXCHANGE_RATES.get(self._country.currency.code) or 1
        return math.floor(amount * (to_rate / from_rate) + 0.5)

    def format_price(self, amount: float) -> str:
        """Render an amount with the active currency symbol, e.g. ``£1,000``."""
        currency = self._country.currency
        formatted = format_amount(amount, self._country.locale)

        if currency.position == "before":
            return f"{currency.symbol}{formatted}"
        return f"{formatted}{currency.symbol}"
