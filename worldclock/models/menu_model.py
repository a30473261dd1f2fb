"""Snapshot of what the popup menu renders."""
from __future__ import annotations

from dataclasses import dataclass

from .timezone_entry import TimezoneEntry


@dataclass(frozen=True)
class MenuModel:
    """Active entries and the inactive entries matching the filter, both sorted by id."""

    active: tuple[TimezoneEntry, ...]
    inactive: tuple[TimezoneEntry, ...]
    filter_text: str = ""
