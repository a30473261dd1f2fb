"""
LabelFormatter – renders one timezone as "<name> <abbrev> <time>".

Examples (13:05 UTC):
    full=True                       -> "Europe/London GMT 13:05"
    show_city_name                  -> "London 13:05"
    show_city_name, 12h             -> "London 1:05 PM"
    nothing shown                   -> " 13:05"   (leading space kept)
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from ..models.clock_config import ClockConfig
from .time_resolver import TimeResolver, ZoneInfoTimeResolver


class LabelFormatter:
    """Stateless apart from the resolver it asks for the current time."""

    def __init__(self, resolver: Optional[TimeResolver] = None) -> None:
        self._resolver = resolver or ZoneInfoTimeResolver()

    def format(self, tz_id: str, config: ClockConfig, full: bool = False) -> str:
        """
        Args:
            tz_id (str): IANA identifier.
            config (ClockConfig): Display flags.
            full (bool): Menu rendering (raw id + abbreviation) instead of panel rendering.

        Returns:
            str: Untrimmed label.

        Raises:
            UnknownTimezoneError: The resolver does not know ``tz_id``.
        """
        now = self._resolver.now(tz_id)

        if full:
            name_part = tz_id
        elif config.show_city_name:
            name_part = tz_id.split("/")[-1].replace("_", " ")
        else:
            name_part = ""

        if full or config.show_timezone_abbrev:
            offset_part = f" {now.tzname() or ''} "
        else:
            offset_part = " "

        return f"{name_part}{offset_part}{self.format_time(now, config.use_24_hour_format)}"

    @staticmethod
    def format_time(moment: datetime, use_24h: bool) -> str:
        """Returns "HH:MM" or "H:MM AM/PM"; the meridiem ignores the locale."""
        if use_24h:
            return f"{moment.hour:02d}:{moment.minute:02d}"
        hour = moment.hour % 12 or 12
        meridiem = "AM" if moment.hour < 12 else "PM"
        return f"{hour}:{moment.minute:02d} {meridiem}"

