"""World clock feature exceptions."""
from __future__ import annotations


class WorldClockError(Exception):
    """Base exception for the world clock feature."""


class UnknownTimezoneError(WorldClockError, KeyError):
    """Raised when the time resolver cannot resolve a timezone identifier."""

    def __init__(self, tz_id: str) -> None:
        super().__init__(tz_id)
        self.tz_id = tz_id

    def __str__(self) -> str:
        return f"unknown timezone: {self.tz_id!r}"


class InvalidConfigKeyError(WorldClockError, KeyError):
    """Raised when a config flag name is not one of the known keys."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"invalid config key: {self.name!r}"


class SettingsUnavailableError(WorldClockError):
    """Raised when the settings store cannot be read or written."""
