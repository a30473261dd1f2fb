"""
Minimal observer registry with explicit subscription handles.

Handles are plain ints; disconnecting twice or with a foreign handle is a
no-op that returns False.
"""

from __future__ import annotations

from itertools import count
from typing import Any, Callable, Dict


class Signal:
    def __init__(self, name: str = "") -> None:
        self.name = name
        self._handlers: Dict[int, Callable[..., Any]] = {}
        self._ids = count(1)

    def connect(self, handler: Callable[..., Any]) -> int:
        handle = next(self._ids)
        self._handlers[handle] = handler
        return handle

    def disconnect(self, handle: int) -> bool:
        return self._handlers.pop(handle, None) is not None

    def emit(self, *args: Any) -> None:
        # snapshot: handlers may disconnect while being called
        for handler in list(self._handlers.values()):
            handler(*args)

    def __len__(self) -> int:
        return len(self._handlers)
