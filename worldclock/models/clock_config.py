"""
Data model for the three display flags of the world clock.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Any, Mapping

from ..exceptions.errors import InvalidConfigKeyError

# Key names written by earlier releases of the panel extension.
LEGACY_KEY_ALIASES: dict[str, str] = {
    "format24": "use_24_hour_format",
    "showCity": "show_city_name",
    "showTimezone": "show_timezone_abbrev",
}


def _to_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "on"}
    return bool(value)


@dataclass
class ClockConfig:
    """
    Encapsulates the user-configurable display options.

    Attributes:
        use_24_hour_format (bool): "13:05" if True, "1:05 PM" if False.
        show_city_name (bool): Prefix each panel entry with its city name.
        show_timezone_abbrev (bool): Insert the abbreviation ("CET") before the time.
    """
    use_24_hour_format: bool = True
    show_city_name: bool = True
    show_timezone_abbrev: bool = False

    @classmethod
    def keys(cls) -> tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

    def set(self, name: str, value: bool) -> None:
        """
        Sets one flag by name.

        Raises:
            InvalidConfigKeyError: ``name`` is not a known flag; nothing changes.
        """
        if name not in self.keys():
            raise InvalidConfigKeyError(name)
        setattr(self, name, _to_bool(value))

    def get(self, name: str) -> bool:
        if name not in self.keys():
            raise InvalidConfigKeyError(name)
        return getattr(self, name)

    def overlay(self, persisted: Mapping[str, Any] | None) -> "ClockConfig":
        """
        Applies persisted values in place. Unknown keys are ignored, legacy
        camelCase keys are mapped, missing keys keep their current value.
        """
        for key, value in (persisted or {}).items():
            name = LEGACY_KEY_ALIASES.get(key, key)
            if name in self.keys():
                setattr(self, name, _to_bool(value))
        return self

    def as_dict(self) -> dict[str, bool]:
        return asdict(self)
