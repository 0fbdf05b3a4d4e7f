"""Tests for CountryState: selection, persistence, detection and prices."""

import pytest

from clubup_i18n.core import COUNTRY_KEY, CountryState, LocaleState, MemoryPreferenceStore
from clubup_i18n.errors import PreferenceStoreError, TimezoneDetectionError
from clubup_i18n.localization import BUILTIN_COUNTRIES

from .conftest import NEUTRAL_TIMEZONE, ReadOnlyPreferenceStore


class TestSelection:
    """Tests for set_country and persistence."""

    def test_starts_on_default_country(self, country_state):
        assert country_state.country.code == "GB"

    @pytest.mark.parametrize("code", sorted(BUILTIN_COUNTRIES))
    def test_valid_code_is_applied_and_survives_reload(self, country_state, store, code):
        assert country_state.set_country(code) is True
        assert country_state.country.code == code
        assert store.get(COUNTRY_KEY) == code

        reloaded = CountryState(store, timezone_override=NEUTRAL_TIMEZONE)
        reloaded.init()
        assert reloaded.country.code == code

    @pytest.mark.parametrize("bad_code", ["ZZ", "", "gb", "United Kingdom", "en-GB"])
    def test_unknown_code_is_ignored(self, country_state, store, bad_code):
        country_state.set_country("US")

        assert country_state.set_country(bad_code) is False
        assert country_state.country.code == "US"
        assert store.get(COUNTRY_KEY) == "US"

    def test_listeners_are_notified_on_change(self, country_state):
        seen = []
        country_state.subscribe(lambda config: seen.append(config.code))

        country_state.set_country("AU")
        country_state.set_country("nope")
        country_state.set_country("CA")

        assert seen == ["AU", "CA"]

    def test_unsubscribe_stops_notifications(self, country_state):
        seen = []
        unsubscribe = country_state.subscribe(lambda config: seen.append(config.code))

        unsubscribe()
        country_state.set_country("US")

        assert seen == []

    def test_failed_save_leaves_selection_unchanged(self):
        store = ReadOnlyPreferenceStore()
        countries = CountryState(store, timezone_override=NEUTRAL_TIMEZONE)
        countries.init()
        locales = LocaleState(countries, store)
        locales.init()
        seen = []
        countries.subscribe(lambda config: seen.append(config.code))

        with pytest.raises(PreferenceStoreError):
            countries.set_country("US")

        assert countries.country.code == "GB"
        assert locales.locale.code == "en-GB"
        assert seen == []


class TestInitialization:
    """Tests for the first-load algorithm."""

    def test_saved_country_wins_over_detection(self):
        store = MemoryPreferenceStore({COUNTRY_KEY: "CA"})
        state = CountryState(store, timezone_override="Australia/Sydney")

        assert state.init().code == "CA"

    def test_unrecognized_saved_value_is_treated_as_absent(self):
        store = MemoryPreferenceStore({COUNTRY_KEY: "XX"})
        state = CountryState(store, timezone_override="America/New_York")

        assert state.init().code == "US"

    @pytest.mark.parametrize("timezone_name,expected", [
        ("America/New_York", "US"),
        ("America/Los_Angeles", "US"),
        ("Australia/Sydney", "AU"),
        ("Europe/Paris", "EU"),
        ("America/Toronto", "CA"),
        ("Europe/London", "GB"),
        ("Asia/Tokyo", "GB"),
    ])
    def test_detects_country_from_timezone(self, timezone_name, expected):
        state = CountryState(MemoryPreferenceStore(), timezone_override=timezone_name)
        assert state.init().code == expected

    def test_detected_country_is_not_persisted(self):
        store = MemoryPreferenceStore()
        CountryState(store, timezone_override="Australia/Perth").init()

        assert store.get(COUNTRY_KEY) is None

    def test_detection_failure_falls_back_to_gb(self, monkeypatch):
        def broken(override=None):
            raise TimezoneDetectionError("no timezone")

        monkeypatch.setattr("clubup_i18n.core.country_state.resolve_timezone_name", broken)
        state = CountryState(MemoryPreferenceStore())

        assert state.init().code == "GB"


class TestFormatPrice:
    """Tests for currency-aware price rendering."""

    def test_gb_whole_amount(self, country_state):
        assert country_state.format_price(1000) == "£1,000"

    def test_us_whole_amount(self, country_state):
        country_state.set_country("US")
        assert country_state.format_price(1000) == "$1,000"

    def test_fractional_amount_shows_two_decimals(self, country_state):
        assert country_state.format_price(99.5) == "£99.50"
        assert country_state.format_price(5.99) == "£5.99"

    def test_whole_float_shows_no_decimals(self, country_state):
        assert country_state.format_price(45.0) == "£45"

    def test_large_amount_grouping(self, country_state):
        country_state.set_country("AU")
        assert country_state.format_price(1234567.25) == "A$1,234,567.25"

    def test_eu_locale_without_region_data(self, country_state):
        country_state.set_country("EU")
        assert country_state.format_price(1000) == "€1,000"


class TestConvertPrice:
    """Tests for static-rate currency conversion."""

    def test_gbp_to_eur(self, country_state):
        country_state.set_country("EU")
        assert country_state.convert_price(100, "GBP") == 115

    def test_default_source_is_gbp(self, country_state):
        country_state.set_country("US")
        assert country_state.convert_price(100) == 127

    def test_same_currency_is_identity(self, country_state):
        assert country_state.convert_price(250) == 250

    def test_converts_back_to_gbp(self, country_state):
        assert country_state.convert_price(127, "USD") == 100

    def test_rounds_to_whole_units(self, country_state):
        country_state.set_country("CA")
        # 9.99 * 1.70 = 16.983
        assert country_state.convert_price(9.99) == 17

    def test_unknown_source_currency_counts_as_rate_one(self, country_state):
        country_state.set_country("AU")
        assert country_state.convert_price(100, "JPY") == 189
