"""worldclock/core/contracts/settings.py
=====================================

Settings contract used for dependency injection.

Feature code only talks to this interface, so tests can pass an in-memory
implementation and the panel can run against the SQLite store.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Mapping


class ISettingsManager(ABC):
    """High-level settings API (namespaced key-value store)."""

    @abstractmethod
    def get(self, namespace: str, key: str, fallback: Any | None = None) -> Any | None:
        """Return a stored value or fallback."""

    @abstractmethod
    def set(self, namespace: str, key: str, value: Any) -> None:
        """Persist a value, replacing any previous one."""

    @abstractmethod
    def set_many(self, namespace: str, values: Mapping[str, Any]) -> None:
        """Persist several values of one namespace together (all or nothing)."""

    @abstractmethod
    def delete(self, namespace: str, key: str) -> None:
        """Delete a stored value."""
