"""
Data model for one selectable timezone.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class TimezoneEntry:
    """
    One row of the catalog as the panel sees it.

    Attributes:
        tz_id (str): IANA timezone identifier, unique within a ClockState.
        active (bool): Whether the zone is part of the panel label.
        cached_label (str | None): Last full label rendered for the menu.
            Derived data, recomputed on every menu refresh.
    """
    tz_id: str
    active: bool = False
    cached_label: Optional[str] = None
    lower_id: str = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self.lower_id = self.tz_id.lower()

    def matches(self, needle: str) -> bool:
        """Case-insensitive substring match; an empty needle matches all."""
        return needle.lower() in self.lower_id
