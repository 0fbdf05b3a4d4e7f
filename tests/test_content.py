"""Tests for translated listing labels."""

from datetime import datetime, timedelta

import pytest
import yaml

from clubup_i18n.core import CountryState, LocaleState, LocalizedContent, MemoryPreferenceStore
from clubup_i18n.localization import LocalizationManager

from .conftest import NEUTRAL_TIMEZONE


@pytest.fixture
def content(locale_state):
    return LocalizedContent(locale_state)


class TestLabels:
    """Tests for condition and category labels."""

    def test_english_passthrough(self, content):
        assert content.condition('Like New') == 'Like New'
        assert content.category('Fairway Woods') == 'Fairway Woods'

    def test_french(self, content, locale_state):
        locale_state.set_locale('fr-FR')

        assert content.condition('Like New') == 'Comme Neuf'
        assert content.category('Irons') == 'Fers'

    def test_partial_override_falls_back(self, content, locale_state):
        locale_state.set_locale('de-DE')

        assert content.condition('New') == 'Neu'
        assert content.condition('Like New') == 'Like New'

    def test_unknown_label_passes_through(self, content, locale_state):
        locale_state.set_locale('fr-FR')
        assert content.condition('Mint') == 'Mint'
        assert content.category('Trolleys') == 'Trolleys'


class TestGolfAssociation:
    """Tests for regional PGA credential labels."""

    @pytest.mark.parametrize("code,expected", [
        ('GB', 'PGA Professional'),
        ('US', 'PGA of America Professional'),
        ('EU', 'European PGA Professional'),
        ('XX', 'PGA Professional'),
    ])
    def test_labels(self, content, code, expected):
        assert content.golf_association(code) == expected

    def test_custom_country_uses_its_own_label(self, tmp_path):
        countries_dir = tmp_path / 'countries'
        countries_dir.mkdir()
        (countries_dir / 'jp.yaml').write_text(
            yaml.safe_dump({
                'code': 'JP',
                'name': 'Japan',
                'flag': '🇯🇵',
                'currency': {'code': 'JPY', 'symbol': '¥', 'position': 'after'},
                'pricing': {'pro': 1200, 'business': 3900, 'pga_pro': 7900},
                'shipping': {'free': 8000, 'standard': 900, 'express': 2500},
                'golf_association': 'PGA of Japan Professional',
                'locale': 'ja-JP',
            }, allow_unicode=True),
            encoding='utf-8',
        )
        store = MemoryPreferenceStore()
        countries = CountryState(store, LocalizationManager(str(tmp_path)), NEUTRAL_TIMEZONE)
        countries.init()
        locales = LocaleState(countries, store)
        locales.init()
        content = LocalizedContent(locales)

        assert content.golf_association('JP') == 'PGA of Japan Professional'
        assert content.golf_association('XX') == 'PGA Professional'


class TestTimestamp:
    """Tests for listing timestamps."""

    def test_calendar_date(self, content):
        assert content.timestamp(datetime(2026, 3, 7, 9, 30)) == '7 March 2026'

    def test_relative(self, content):
        value = datetime.now() - timedelta(minutes=5, seconds=10)
        assert content.timestamp(value, relative=True) == '5 minutes ago'
