"""
ClockState – in-memory model of the world clock.

Owns the sorted timezone entries, the display config and the transient
filter text. One instance lives between ``enable`` and ``disable`` of the
extension that created it.
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping, Optional

from ..models.clock_config import ClockConfig
from ..models.timezone_entry import TimezoneEntry


class ClockState:
    DEFAULT_ACTIVE_ID = "UTC"

    def __init__(self, entries: Iterable[TimezoneEntry], config: Optional[ClockConfig] = None) -> None:
        ordered = sorted(entries, key=lambda e: e.tz_id)
        index: dict[str, TimezoneEntry] = {}
        for entry in ordered:
            if entry.tz_id in index:
                raise ValueError(f"duplicate timezone id: {entry.tz_id}")
            index[entry.tz_id] = entry

        self._entries: tuple[TimezoneEntry, ...] = tuple(ordered)
        self._index = index
        self._config = config or ClockConfig()
        self._filter_text = ""

    # --- Construction -------------------------------------------------------

    @classmethod
    def initialize(
        cls,
        catalog: Iterable[str],
        persisted_active_ids: Iterable[str] = (),
        persisted_config: Optional[Mapping[str, Any]] = None,
    ) -> "ClockState":
        """
        Builds the state for a catalog and overlays what was persisted.

        An empty ``persisted_active_ids`` means "first run": only UTC is active.
        Otherwise exactly the persisted ids known to the catalog are active.
        """
        wanted = set(persisted_active_ids or ())
        if not wanted:
            wanted = {cls.DEFAULT_ACTIVE_ID}

        entries = [TimezoneEntry(tz_id, active=tz_id in wanted) for tz_id in sorted(set(catalog))]
        return cls(entries, ClockConfig().overlay(persisted_config))

    # --- Read access --------------------------------------------------------

    @property
    def entries(self) -> tuple[TimezoneEntry, ...]:
        return self._entries

    @property
    def config(self) -> ClockConfig:
        return self._config

    @property
    def filter_text(self) -> str:
        return self._filter_text

    def entry(self, tz_id: str) -> Optional[TimezoneEntry]:
        return self._index.get(tz_id)

    def is_active(self, tz_id: str) -> bool:
        entry = self._index.get(tz_id)
        return bool(entry and entry.active)

    def active_entries(self) -> list[TimezoneEntry]:
        return [e for e in self._entries if e.active]

    def inactive_entries_matching(self, needle: str = "") -> list[TimezoneEntry]:
        return [e for e in self._entries if not e.active and e.matches(needle or "")]

    def active_ids(self) -> list[str]:
        return [e.tz_id for e in self._entries if e.active]

    # --- Mutation -----------------------------------------------------------

    def set_active(self, tz_id: str, active: bool) -> bool:
        """Returns False (and changes nothing) for ids outside the catalog."""
        entry = self._index.get(tz_id)
        if entry is None:
            return False
        entry.active = bool(active)
        return True

    def set_config(self, name: str, value: bool) -> None:
        """Raises InvalidConfigKeyError for unknown names; state stays unchanged."""
        self._config.set(name, value)

    def set_filter(self, text: str) -> None:
        self._filter_text = text or ""

    def reset_filter(self) -> None:
        self._filter_text = ""
