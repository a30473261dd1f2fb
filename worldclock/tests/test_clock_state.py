"""
worldclock/tests/test_clock_state.py

Unit tests for ClockState construction, selection and filtering.
"""

from __future__ import annotations

import unittest

import pytest

from worldclock.exceptions.errors import InvalidConfigKeyError
from worldclock.logic.clock_state import ClockState
from worldclock.models.clock_config import ClockConfig
from worldclock.models.timezone_entry import TimezoneEntry

from .conftest import SAMPLE_IDS


class TestInitialize(unittest.TestCase):
    def test_first_run_activates_only_utc(self) -> None:
        state = ClockState.initialize(SAMPLE_IDS)
        self.assertEqual(state.active_ids(), ["UTC"])

    def test_entries_sorted_by_id(self) -> None:
        state = ClockState.initialize(reversed(SAMPLE_IDS))
        ids = [e.tz_id for e in state.entries]
        self.assertEqual(ids, sorted(SAMPLE_IDS))

    def test_duplicate_catalog_ids_collapse(self) -> None:
        state = ClockState.initialize(["UTC", "UTC", "Asia/Tokyo"])
        self.assertEqual(len(state.entries), 2)

    def test_persisted_ids_win_over_default(self) -> None:
        state = ClockState.initialize(SAMPLE_IDS, ["Asia/Tokyo", "Europe/London"])
        self.assertEqual(state.active_ids(), ["Asia/Tokyo", "Europe/London"])
        self.assertFalse(state.is_active("UTC"))

    def test_persisted_ids_outside_catalog_are_ignored(self) -> None:
        state = ClockState.initialize(SAMPLE_IDS, ["Atlantis/Capital", "Asia/Tokyo"])
        self.assertEqual(state.active_ids(), ["Asia/Tokyo"])
        self.assertIsNone(state.entry("Atlantis/Capital"))

    def test_config_overlay_keeps_defaults_and_ignores_unknown(self) -> None:
        state = ClockState.initialize(SAMPLE_IDS, [], {"show_timezone_abbrev": True, "blink": True})
        self.assertEqual(
            state.config,
            ClockConfig(use_24_hour_format=True, show_city_name=True, show_timezone_abbrev=True),
        )

    def test_config_overlay_accepts_legacy_keys(self) -> None:
        state = ClockState.initialize(SAMPLE_IDS, [], {"format24": False, "showCity": False})
        self.assertFalse(state.config.use_24_hour_format)
        self.assertFalse(state.config.show_city_name)

    def test_rejects_duplicate_entries(self) -> None:
        with self.assertRaises(ValueError):
            ClockState([TimezoneEntry("UTC"), TimezoneEntry("UTC")])


def test_set_active_unknown_id_is_noop() -> None:
    state = ClockState.initialize(SAMPLE_IDS)
    assert state.set_active("Nowhere/Town", True) is False
    assert state.active_ids() == ["UTC"]


def test_set_active_sets_flag() -> None:
    state = ClockState.initialize(SAMPLE_IDS)
    assert state.set_active("Asia/Tokyo", True) is True
    assert state.set_active("UTC", False) is True
    assert state.active_ids() == ["Asia/Tokyo"]


def test_set_config_rejects_unknown_key() -> None:
    state = ClockState.initialize(SAMPLE_IDS)
    before = state.config.as_dict()
    with pytest.raises(InvalidConfigKeyError):
        state.set_config("show_seconds", True)
    assert state.config.as_dict() == before


def test_set_config_known_key() -> None:
    state = ClockState.initialize(SAMPLE_IDS)
    state.set_config("use_24_hour_format", False)
    assert state.config.use_24_hour_format is False


def test_filter_is_case_insensitive_substring() -> None:
    state = ClockState.initialize(SAMPLE_IDS)
    ids = [e.tz_id for e in state.inactive_entries_matching("LON")]
    assert ids == ["Europe/London"]
    assert "America/New_York" not in [e.tz_id for e in state.inactive_entries_matching("lon")]


def test_empty_filter_matches_all_inactive() -> None:
    state = ClockState.initialize(SAMPLE_IDS)
    ids = [e.tz_id for e in state.inactive_entries_matching("")]
    assert ids == sorted(i for i in SAMPLE_IDS if i != "UTC")


def test_filter_excludes_active_entries() -> None:
    state = ClockState.initialize(SAMPLE_IDS, ["Europe/London"])
    assert state.inactive_entries_matching("lon") == []
    assert [e.tz_id for e in state.active_entries()] == ["Europe/London"]


def test_filter_text_reset() -> None:
    state = ClockState.initialize(SAMPLE_IDS)
    state.set_filter("tok")
    assert state.filter_text == "tok"
    state.reset_filter()
    assert state.filter_text == ""


if __name__ == "__main__":
    unittest.main()
