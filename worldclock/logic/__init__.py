from .clock_settings_repository import ClockSettingsRepository, PersistedClockSettings
from .clock_state import ClockState
from .label_formatter import LabelFormatter
from .selection_controller import SelectionController
from .time_resolver import ZoneInfoTimeResolver
from .timezone_catalog import TimezoneCatalog
from .wall_clock import WallClock, seconds_until_next_tick

__all__ = [
    "ClockSettingsRepository",
    "PersistedClockSettings",
    "ClockState",
    "LabelFormatter",
    "SelectionController",
    "ZoneInfoTimeResolver",
    "TimezoneCatalog",
    "WallClock",
    "seconds_until_next_tick",
]
