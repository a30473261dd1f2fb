"""
TimezoneCatalog – the fixed, sorted list of timezone ids offered for selection.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from zoneinfo import available_timezones

# Entries some tz databases ship that are not real zones.
_EXCLUDED = frozenset({"Factory", "localtime", "posixrules"})


class TimezoneCatalog:
    """Immutable, de-duplicated, ascending tuple of IANA identifiers."""

    def __init__(self, tz_ids: Iterable[str]) -> None:
        self._ids: tuple[str, ...] = tuple(sorted(set(tz_ids)))
        self._lookup = frozenset(self._ids)

    @classmethod
    def from_system(cls) -> "TimezoneCatalog":
        """All zones known to zoneinfo (system tz database or the tzdata package)."""
        ids = {tz for tz in available_timezones() if tz not in _EXCLUDED}
        ids.add("UTC")
        return cls(ids)

    @property
    def ids(self) -> tuple[str, ...]:
        return self._ids

    def __iter__(self) -> Iterator[str]:
        return iter(self._ids)

    def __len__(self) -> int:
        return len(self._ids)

    def __contains__(self, tz_id: object) -> bool:
        return tz_id in self._lookup
