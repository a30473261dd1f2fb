from .errors import (
    InvalidConfigKeyError,
    SettingsUnavailableError,
    UnknownTimezoneError,
    WorldClockError,
)

__all__ = [
    "WorldClockError",
    "UnknownTimezoneError",
    "InvalidConfigKeyError",
    "SettingsUnavailableError",
]
