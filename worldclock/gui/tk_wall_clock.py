"""
Tk driver for the WallClock.

Uses Tk's ``after`` to fire on every tick boundary (minute boundaries by
default) and re-arms itself after each notification, also when a
subscriber raises.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from ..core.config.config_service import config_service
from ..logic.wall_clock import WallClock, seconds_until_next_tick

if TYPE_CHECKING:
    import tkinter as tk


class TkWallClockDriver:
    def __init__(self, widget: tk.Misc, wall_clock: WallClock, granularity: Optional[int] = None) -> None:
        self._widget = widget
        self._wall_clock = wall_clock
        self._granularity = granularity or config_service.clock.tick_seconds
        self._after_id: Optional[str] = None
        self._active = False

    @property
    def running(self) -> bool:
        return self._active

    def start(self) -> None:
        if not self._active:
            self._active = True
            self._schedule_tick()

    def stop(self) -> None:
        self._active = False
        if self._after_id is not None:
            after_id, self._after_id = self._after_id, None
            self._widget.after_cancel(after_id)

    # --- Tick loop ----------------------------------------------------------

    def _schedule_tick(self) -> None:
        delay_ms = int(seconds_until_next_tick(granularity=self._granularity) * 1000) + 1
        self._after_id = self._widget.after(delay_ms, self._on_tick)

    def _on_tick(self) -> None:
        self._after_id = None
        try:
            self._wall_clock.notify()
        finally:
            if self._active:
                self._schedule_tick()
