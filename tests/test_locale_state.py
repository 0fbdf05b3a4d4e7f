"""Tests for LocaleState: derivation, translation fallback and formatting."""

from datetime import date, datetime, timedelta, timezone

import pytest

from clubup_i18n.core import LOCALE_KEY, CountryState, LocaleState, MemoryPreferenceStore
from clubup_i18n.errors import PreferenceStoreError

from .conftest import NEUTRAL_TIMEZONE, NOW, ReadOnlyPreferenceStore


class TestDerivation:
    """Tests for how the locale follows the country."""

    def test_default_locale(self, locale_state):
        assert locale_state.locale.code == "en-GB"
        assert locale_state.direction == "ltr"

    @pytest.mark.parametrize("country,expected", [
        ("US", "en-US"),
        ("AU", "en-AU"),
        ("CA", "en-CA"),
        ("EU", "en-GB"),
        ("GB", "en-GB"),
    ])
    def test_follows_country_without_explicit_choice(self, country_state, locale_state, country, expected):
        country_state.set_country(country)
        assert locale_state.locale.code == expected

    def test_explicit_choice_survives_country_change(self, country_state, locale_state):
        country_state.set_country("US")
        assert locale_state.locale.code == "en-US"

        assert locale_state.set_locale("fr-FR") is True
        country_state.set_country("AU")

        assert locale_state.locale.code == "fr-FR"

    def test_saved_locale_wins_on_load(self):
        store = MemoryPreferenceStore({LOCALE_KEY: "de-DE"})
        countries = CountryState(store, timezone_override="America/New_York")
        countries.init()
        locales = LocaleState(countries, store)

        assert locales.init().code == "de-DE"

    def test_invalid_saved_locale_is_treated_as_absent(self):
        store = MemoryPreferenceStore({LOCALE_KEY: "xx-XX"})
        countries = CountryState(store, timezone_override="Australia/Sydney")
        countries.init()
        locales = LocaleState(countries, store)

        assert locales.init().code == "en-AU"

    def test_unknown_locale_is_ignored(self, locale_state, store):
        assert locale_state.set_locale("klingon") is False
        assert locale_state.locale.code == "en-GB"
        assert store.get(LOCALE_KEY) is None

    def test_close_stops_following_country(self, country_state, locale_state):
        locale_state.close()
        country_state.set_country("US")

        assert locale_state.locale.code == "en-GB"

    def test_explicit_choice_survives_reload(self, store):
        countries = CountryState(store, timezone_override=NEUTRAL_TIMEZONE)
        countries.init()
        LocaleState(countries, store).set_locale("es-ES")

        reloaded_countries = CountryState(store, timezone_override=NEUTRAL_TIMEZONE)
        reloaded_countries.init()
        reloaded = LocaleState(reloaded_countries, store)
        reloaded.init()
        reloaded_countries.set_country("CA")

        assert reloaded.locale.code == "es-ES"

    def test_failed_save_leaves_locale_unchanged(self):
        store = ReadOnlyPreferenceStore()
        countries = CountryState(store, timezone_override=NEUTRAL_TIMEZONE)
        countries.init()
        locales = LocaleState(countries, store)
        locales.init()

        with pytest.raises(PreferenceStoreError):
            locales.set_locale("fr-FR")

        assert locales.locale.code == "en-GB"
        assert locales.t("nav.home") == "Home"


class TestTranslate:
    """Tests for the four-step fallback chain."""

    def test_locale_override(self, locale_state):
        locale_state.set_locale("fr-FR")
        assert locale_state.t("home.hero.title") == "Élevez Votre Jeu de Golf"

    def test_falls_back_to_english_base(self, locale_state):
        locale_state.set_locale("fr-FR")
        assert locale_state.t("footer.helpCenter") == "Help Center"

    def test_falls_back_to_caller_default(self, locale_state):
        assert locale_state.t("nonexistent.key", "Default") == "Default"

    def test_falls_back_to_raw_key(self, locale_state):
        assert locale_state.t("nonexistent.key") == "nonexistent.key"

    def test_locale_without_override_table_uses_base(self, locale_state):
        locale_state.set_locale("it-IT")
        assert locale_state.t("nav.home") == "Home"

    def test_english_base_beats_caller_default(self, locale_state):
        assert locale_state.t("nav.home", "Start") == "Home"


class TestFormatting:
    """Tests for locale-aware date and time formatting."""

    def test_format_date_uk(self, locale_state):
        assert locale_state.format_date(date(2026, 10, 19)) == "19 October 2026"

    def test_format_date_us(self, locale_state):
        locale_state.set_locale("en-US")
        assert locale_state.format_date(date(2026, 10, 19)) == "October 19, 2026"

    def test_format_date_french(self, locale_state):
        locale_state.set_locale("fr-FR")
        assert "octobre" in locale_state.format_date(date(2026, 10, 19))

    def test_format_time_uk_is_24_hour(self, locale_state):
        assert locale_state.format_time(NOW) == "14:05"

    def test_format_time_us_is_12_hour(self, locale_state):
        locale_state.set_locale("en-US")
        formatted = locale_state.format_time(NOW)

        assert formatted.startswith("02:05")
        assert formatted.endswith("PM")

    def test_format_time_pads_morning_hours(self, locale_state):
        assert locale_state.format_time(datetime(2026, 10, 19, 9, 5)) == "09:05"

    def test_format_datetime_has_date_and_time(self, locale_state):
        formatted = locale_state.format_datetime(NOW)

        assert "Oct" in formatted
        assert "2026" in formatted
        assert "14:05" in formatted

    def test_format_datetime_us(self, locale_state):
        locale_state.set_locale("en-US")
        formatted = locale_state.format_datetime(NOW)

        assert formatted.startswith("Oct 19, 2026")
        assert "02:05" in formatted
        assert formatted.endswith("PM")


class TestRelativeTime:
    """Tests for elapsed-time buckets."""

    def test_just_now(self, locale_state):
        assert locale_state.format_relative_time(NOW - timedelta(seconds=30), now=NOW) == "Just now"

    def test_minutes(self, locale_state):
        value = NOW - timedelta(minutes=5, seconds=20)
        assert locale_state.format_relative_time(value, now=NOW) == "5 minutes ago"

    def test_hours(self, locale_state):
        value = NOW - timedelta(minutes=90)
        assert locale_state.format_relative_time(value, now=NOW) == "1 hours ago"

    def test_days(self, locale_state):
        value = NOW - timedelta(days=3, hours=2)
        assert locale_state.format_relative_time(value, now=NOW) == "3 days ago"

    def test_week_or_older_is_a_calendar_date(self, locale_state):
        value = NOW - timedelta(days=10)
        formatted = locale_state.format_relative_time(value, now=NOW)

        assert formatted == locale_state.format_date(value)
        assert "ago" not in formatted

    @pytest.mark.parametrize("elapsed,expected", [
        (timedelta(seconds=59), "Just now"),
        (timedelta(seconds=60), "1 minutes ago"),
        (timedelta(minutes=59, seconds=59), "59 minutes ago"),
        (timedelta(hours=1), "1 hours ago"),
        (timedelta(hours=23, minutes=59), "23 hours ago"),
        (timedelta(hours=24), "1 days ago"),
        (timedelta(days=6, hours=23), "6 days ago"),
    ])
    def test_bucket_boundaries(self, locale_state, elapsed, expected):
        assert locale_state.format_relative_time(NOW - elapsed, now=NOW) == expected

    def test_aware_datetimes(self, locale_state):
        now = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)
        value = now - timedelta(hours=5)

        assert locale_state.format_relative_time(value, now=now) == "5 hours ago"

    def test_plain_date_is_accepted(self, locale_state):
        assert locale_state.format_relative_time(date(2026, 10, 1), now=NOW) == "1 October 2026"
