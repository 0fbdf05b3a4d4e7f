"""Shared fixtures for the localization tests."""

import logging
from datetime import datetime

import pytest

from clubup_i18n.core import CountryState, LocaleState, MemoryPreferenceStore
from clubup_i18n.errors import PreferenceStoreError
from clubup_i18n.localization import LocalizationManager

# Resolves to no detection rule, so first-run country stays GB
NEUTRAL_TIMEZONE = "Europe/London"

NOW = datetime(2026, 10, 19, 14, 5, 0)


class ReadOnlyPreferenceStore(MemoryPreferenceStore):
    """Store whose writes always fail, like a read-only preferences file."""

    def set(self, key, value):
        raise PreferenceStoreError(f"Could not write {key}: read-only")


@pytest.fixture
def store():
    return MemoryPreferenceStore()


@pytest.fixture
def manager():
    return LocalizationManager()


@pytest.fixture
def country_state(store, manager):
    state = CountryState(store, manager, timezone_override=NEUTRAL_TIMEZONE)
    state.init()
    return state


@pytest.fixture
def locale_state(country_state, store):
    state = LocaleState(country_state, store)
    state.init()
    return state


@pytest.fixture
def restore_root_logger():
    """Undo configure_logging's changes to the root logger."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers = handlers
    root.setLevel(level)
