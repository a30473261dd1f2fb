"""
Time resolver – current wall time for a timezone identifier.

Queried fresh on every label computation; nothing is cached between calls
apart from zoneinfo's own tz file cache.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable, Optional, Protocol

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ..exceptions.errors import UnknownTimezoneError


class TimeResolver(Protocol):
    def now(self, tz_id: str) -> datetime:
        """Aware datetime for the current instant in ``tz_id``."""


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ZoneInfoTimeResolver:
    """Resolves identifiers through :mod:`zoneinfo`."""

    def __init__(self, utc_clock: Optional[Callable[[], datetime]] = None) -> None:
        self._utc_clock = utc_clock or _utc_now

    def now(self, tz_id: str) -> datetime:
        try:
            tz = ZoneInfo(tz_id)
        except (ZoneInfoNotFoundError, ValueError, OSError) as exc:
            raise UnknownTimezoneError(tz_id) from exc
        return self._utc_clock().astimezone(tz)
