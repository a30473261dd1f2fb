"""Clock notifications and tick scheduling."""
from __future__ import annotations

from datetime import datetime, timezone

import pytest

from worldclock.logic.signals import Signal
from worldclock.logic.wall_clock import WallClock, seconds_until_next_tick


def test_notify_calls_every_subscriber() -> None:
    clock = WallClock()
    calls: list[str] = []
    clock.connect(lambda: calls.append("a"))
    clock.connect(lambda: calls.append("b"))
    clock.notify()
    assert calls == ["a", "b"]


def test_disconnect_stops_notifications() -> None:
    clock = WallClock()
    calls: list[int] = []
    handle = clock.connect(lambda: calls.append(1))
    assert clock.disconnect(handle) is True
    assert clock.disconnect(handle) is False
    clock.notify()
    assert calls == []


def test_handler_may_disconnect_during_emit() -> None:
    signal = Signal("test")
    calls: list[str] = []
    handles: dict[str, int] = {}

    def first() -> None:
        calls.append("first")
        signal.disconnect(handles["second"])

    handles["first"] = signal.connect(first)
    handles["second"] = signal.connect(lambda: calls.append("second"))
    signal.emit()
    signal.emit()
    assert calls == ["first", "second", "first"]


def test_handles_are_unique() -> None:
    signal = Signal()
    assert signal.connect(print) != signal.connect(print)
    assert len(signal) == 2


@pytest.mark.parametrize(
    "second, micro, expected",
    [(0, 0, 60.0), (30, 0, 30.0), (59, 500000, 0.5)],
)
def test_seconds_until_next_minute(second: int, micro: int, expected: float) -> None:
    now = datetime(2024, 1, 15, 13, 5, second, micro, tzinfo=timezone.utc)
    assert seconds_until_next_tick(now) == pytest.approx(expected)


def test_custom_granularity() -> None:
    now = datetime(2024, 1, 15, 13, 5, 7, tzinfo=timezone.utc)
    assert seconds_until_next_tick(now, granularity=10) == pytest.approx(3.0)


def test_granularity_must_be_positive() -> None:
    with pytest.raises(ValueError):
        seconds_until_next_tick(granularity=0)
