"""
WallClock – the clock notification the panel subscribes to.

The clock itself does not tick; a host driver (see
``worldclock.gui.tk_wall_clock``) calls :meth:`WallClock.notify` on every
boundary.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from .signals import Signal


class WallClock(Signal):
    """Signal emitted once per tick with no arguments."""

    def __init__(self) -> None:
        super().__init__("clock")

    def notify(self) -> None:
        self.emit()


def seconds_until_next_tick(now: Optional[datetime] = None, granularity: int = 60) -> float:
    """
    Seconds from ``now`` to the next multiple of ``granularity`` seconds
    since the epoch (minute boundaries for the default). Never returns 0,
    a moment exactly on a boundary waits a full period.
    """
    if granularity <= 0:
        raise ValueError("granularity must be positive")
    now = now or datetime.now(timezone.utc)
    elapsed = now.timestamp() % granularity
    return granularity - elapsed
