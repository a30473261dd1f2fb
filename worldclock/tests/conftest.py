from __future__ import annotations

from datetime import datetime, timezone

import pytest

from worldclock.core.settings.logic.settings_manager import InMemorySettingsManager
from worldclock.logic.label_formatter import LabelFormatter
from worldclock.logic.time_resolver import ZoneInfoTimeResolver
from worldclock.logic.timezone_catalog import TimezoneCatalog

# Monday, 15 January 2024, 13:05 UTC (no DST anywhere in the sample below
# except the southern hemisphere).
FIXED_UTC = datetime(2024, 1, 15, 13, 5, tzinfo=timezone.utc)

SAMPLE_IDS = [
    "UTC",
    "Europe/London",
    "Europe/Berlin",
    "America/New_York",
    "America/Los_Angeles",
    "Asia/Kolkata",
    "Asia/Tokyo",
]


@pytest.fixture
def catalog() -> TimezoneCatalog:
    return TimezoneCatalog(SAMPLE_IDS)


@pytest.fixture
def formatter() -> LabelFormatter:
    return LabelFormatter(ZoneInfoTimeResolver(lambda: FIXED_UTC))


@pytest.fixture
def settings() -> InMemorySettingsManager:
    return InMemorySettingsManager()
