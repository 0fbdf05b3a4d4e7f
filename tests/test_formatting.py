"""Tests for the Babel-backed formatting helpers."""

from datetime import datetime

import pytest

from clubup_i18n.utils import formatting
from clubup_i18n.utils.formatting import (
    format_amount,
    format_medium_datetime,
    format_short_time,
    short_time_pattern,
    to_babel_locale,
)

MOMENT = datetime(2026, 10, 19, 14, 5)


class TestLocaleResolution:
    """Tests for mapping locale codes to Babel locales."""

    def test_known_region(self):
        assert str(to_babel_locale("fr-FR")) == "fr_FR"

    def test_unknown_region_uses_language(self):
        assert to_babel_locale("en-EU").language == "en"
        assert format_amount(1000, "en-EU") == "1,000"

    def test_unknown_language_uses_english(self):
        assert str(to_babel_locale("zz-ZZ")) == "en"


class TestTwoDigitHours:
    """Tests for widening hour fields in time patterns."""

    @pytest.mark.parametrize("pattern,expected", [
        ("h:mm a", "hh:mm a"),
        ("H:mm", "HH:mm"),
        ("HH:mm", "HH:mm"),
        ("H 'h' mm", "HH 'h' mm"),
        ("K:mm a", "KK:mm a"),
    ])
    def test_patterns(self, pattern, expected):
        assert formatting._two_digit_hours(pattern) == expected

    def test_locale_patterns(self):
        assert "hh" in short_time_pattern(to_babel_locale("en-US"))
        assert "HH" in short_time_pattern(to_babel_locale("de-DE"))


class TestFormatters:
    """Tests for the time and date-time formatters."""

    def test_short_time(self):
        assert format_short_time(datetime(2026, 10, 19, 8, 30), "en-GB") == "08:30"
        assert format_short_time(MOMENT, "fr-FR") == "14:05"

    def test_medium_datetime_french(self):
        formatted = format_medium_datetime(MOMENT, "fr-FR")

        assert "oct." in formatted
        assert "14:05" in formatted

    def test_glue_literals_are_kept(self, monkeypatch):
        monkeypatch.setattr(
            formatting,
            "get_datetime_format",
            lambda format, locale: "{1} 'o''clock' {0}",
        )

        formatted = format_medium_datetime(MOMENT, "en-GB")

        assert "o'clock" in formatted
        assert formatted.endswith("14:05")
