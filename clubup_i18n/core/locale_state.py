"""
Active display locale, translation lookup and date formatting.
"""

import math
from datetime import datetime, timezone
from typing import Optional
import logging

from ..localization import COUNTRY_LOCALE_MAP, DEFAULT_LOCALE_CODE
from ..models import CountryConfig, LocaleConfig
from ..utils.formatting import (
    DateLike,
    format_long_date,
    format_medium_datetime,
    format_short_time,
)
from .country_state import CountryState
from .storage import LOCALE_KEY, PreferenceStore

logger = logging.getLogger(__name__)

MINUTE = 60
HOUR = 60 * MINUTE
DAY = 24 * HOUR
WEEK = 7 * DAY


class LocaleState:
    """
    Owns the active LocaleConfig.

    The locale follows the active country until the user picks one
    explicitly; from then on the saved choice wins on every country change
    and every load.
    """

    def __init__(self, country_state: CountryState, store: PreferenceStore):
        """
        Initialize the locale state.

        Args:
            country_state: Country container this locale derives from
            store: Preference store the explicit choice is persisted to
        """
        self.country_state = country_state
        self.store = store
        self.manager = country_state.manager
        self._locale: LocaleConfig = self.manager.get_locale(DEFAULT_LOCALE_CODE)
        self._unsubscribe = country_state.subscribe(self._on_country_change)

    @property
    def locale(self) -> LocaleConfig:
        return self._locale

    @property
    def direction(self) -> str:
        return self._locale.direction

    def init(self) -> LocaleConfig:
        """Derive the starting locale from the saved choice or the active country."""
        self._derive(self.country_state.country)
        return self._locale

    def close(self) -> None:
        """Stop following country changes."""
        self._unsubscribe()

    def _on_country_change(self, country: CountryConfig) -> None:
        self._derive(country)

    def _saved_locale(self) -> Optional[LocaleConfig]:
        saved = self.store.get(LOCALE_KEY)
        if saved and self.manager.has_locale(saved):
            return self.manager.get_locale(saved)
        return None

    def _derive(self, country: CountryConfig) -> None:
        saved = self._saved_locale()
        if saved is not None:
            self._locale = saved
            return

        mapped = COUNTRY_LOCALE_MAP.get(country.code)
        if mapped and self.manager.has_locale(mapped):
            self._locale = self.manager.get_locale(mapped)
            logger.debug(f"Locale follows country {country.code}: {mapped}")

    def set_locale(self, locale_code: str) -> bool:
        """
        Select a locale explicitly and persist it.

        Unknown codes are ignored and leave the selection unchanged.

        Returns:
            True if the selection was applied, False if the code was ignored

        Raises:
            PreferenceStoreError: If the choice cannot be saved
        """
        config = self.manager.get_locale(locale_code)
        if config is None:
            logger.debug(f"Ignoring unknown locale code: {locale_code!r}")
            return False

        self.store.set(LOCALE_KEY, locale_code)
        self._locale = config
        return True

    def t(self, key: str, fallback: Optional[str] = None) -> str:
        """
        Translate a key for the active locale.

        Falls back to English, then ``fallback``, then the key itself.
        """
        return self.manager.resolve(key, self._locale.code, fallback)

    def format_date(self, value: DateLike) -> str:
        return format_long_date(value, self._locale.code)

    def format_time(self, value: datetime) -> str:
        return format_short_time(value, self._locale.code)

    def format_datetime(self, value: datetime) -> str:
        return format_medium_datetime(value, self._locale.code)

    def format_relative_time(self, value: DateLike, now: Optional[datetime] = None) -> str:
        """
        Describe how long ago ``value`` was.

        Buckets: under a minute is "just now", then whole minutes, hours and
        days; anything a week or older is shown as a calendar date.

        Args:
            value: Past date or datetime
            now: Reference time (defaults to the current time)

        Returns:
            Relative description or formatted date
        """
        if not isinstance(value, datetime):
            value = datetime(value.year, value.month, value.day)

        if now is None:
            now = datetime.now(timezone.utc) if value.tzinfo else datetime.now()

        elapsed = math.floor((now - value).total_seconds())

        if elapsed < MINUTE:
            return self.t('time.now', 'Just now')
        if elapsed < HOUR:
            return self.t('time.minutesAgo', '{count} minutes ago').format(count=elapsed // MINUTE)
        if elapsed < DAY:
            return self.t('time.hoursAgo', '{count} hours ago').format(count=elapsed // HOUR)
        if elapsed < WEEK:
            return self.t('time.daysAgo', '{count} days ago').format(count=elapsed // DAY)

        return self.format_date(value)
