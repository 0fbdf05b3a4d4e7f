"""Tests for the composed localization service."""

from datetime import datetime, timedelta

from clubup_i18n import ClubUpLocalization, JsonFilePreferenceStore, MemoryPreferenceStore, Settings
from clubup_i18n.core import COUNTRY_KEY, LOCALE_KEY


class TestStartup:
    """Tests for first load and restore."""

    def test_first_run_detection(self):
        service = ClubUpLocalization(MemoryPreferenceStore(), timezone_override="Australia/Sydney")

        assert service.country.code == "AU"
        assert service.locale.code == "en-AU"
        assert service.format_price(12) == "A$12"

    def test_detection_is_not_persisted(self):
        store = MemoryPreferenceStore()
        ClubUpLocalization(store, timezone_override="America/New_York")

        assert store.get(COUNTRY_KEY) is None
        assert store.get(LOCALE_KEY) is None

    def test_saved_choices_win(self):
        store = MemoryPreferenceStore({COUNTRY_KEY: "US", LOCALE_KEY: "fr-FR"})
        service = ClubUpLocalization(store, timezone_override="Australia/Sydney")

        assert service.country.code == "US"
        assert service.locale.code == "fr-FR"
        assert service.t("nav.home") == "Accueil"
        assert service.format_price(1000) == "$1,000"


class TestDelegation:
    """Tests for the consumer surface."""

    def test_country_change_moves_locale(self):
        service = ClubUpLocalization(MemoryPreferenceStore(), timezone_override="Europe/London")

        assert service.set_country("CA")
        assert service.locale.code == "en-CA"
        assert service.convert_price(100) == 170
        assert not service.set_country("ZZ")
        assert service.country.code == "CA"

    def test_locale_and_formatting(self):
        service = ClubUpLocalization(MemoryPreferenceStore(), timezone_override="Europe/London")
        moment = datetime(2026, 10, 19, 14, 5)

        assert service.set_locale("de-DE")
        assert not service.set_locale("xx-XX")
        assert service.locale.code == "de-DE"
        assert "Oktober" in service.format_date(moment)
        assert service.format_time(moment) == "14:05"
        assert "2026" in service.format_datetime(moment)
        assert service.format_relative_time(moment - timedelta(hours=3), now=moment) == "3 hours ago"

    def test_helpers_share_state(self):
        service = ClubUpLocalization(MemoryPreferenceStore(), timezone_override="Europe/London")
        service.set_country("EU")
        service.set_locale("fr-FR")

        assert service.pricing.get_formatted_subscription_price("pro") == "€8"
        assert service.content.condition("Good") == "Bon"


class TestFromSettings:
    """Tests for building from application settings."""

    def test_file_backed_round_trip(self, tmp_path):
        settings = Settings(storage_path=str(tmp_path / "data" / "preferences.json"), timezone="Europe/London")

        first = ClubUpLocalization.from_settings(settings)
        assert isinstance(first.store, JsonFilePreferenceStore)
        first.set_country("US")
        first.set_locale("es-ES")

        second = ClubUpLocalization.from_settings(settings)
        assert second.country.code == "US"
        assert second.locale.code == "es-ES"

    def test_custom_catalog_directory(self, tmp_path):
        translations = tmp_path / "catalogs" / "translations"
        translations.mkdir(parents=True)
        (translations / "it-IT.yaml").write_text("nav.home: Pagina Iniziale\n", encoding="utf-8")
        settings = Settings(
            storage_path=str(tmp_path / "preferences.json"),
            localization_dir=str(tmp_path / "catalogs"),
            timezone="Europe/London",
        )

        service = ClubUpLocalization.from_settings(settings)
        service.set_locale("it-IT")

        assert service.t("nav.home") == "Pagina Iniziale"
