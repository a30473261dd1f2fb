"""
worldclock/core/settings/logic/settings_manager.py
==================================================

High-level API for settings, backed by :class:`SettingsRepository`.
"""

from __future__ import annotations
from threading import RLock
import copy
from typing import Any, Final, Mapping

from worldclock.core.config.config_service import config_service
from worldclock.core.contracts.settings import ISettingsManager
from worldclock.core.logs.logic.logger import logger
from worldclock.core.settings.logic.settings_repository import SettingsRepository


class SettingsManager(ISettingsManager):
    def __init__(self, repository: SettingsRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------ #
    #  API                                                               #
    # ------------------------------------------------------------------ #
    def get(self, namespace: str, key: str, fallback: Any | None = None) -> Any | None:
        return self._repo.get(namespace, key, fallback)

    def set(self, namespace: str, key: str, value: Any) -> None:
        self._repo.set(namespace, key, value)
        logger.log("SettingsManager", "Set", level="DEBUG", message=f"{namespace}.{key}")

    def set_many(self, namespace: str, values: Mapping[str, Any]) -> None:
        self._repo.set_many(namespace, values)
        logger.log("SettingsManager", "Set", level="DEBUG",
                   message=", ".join(f"{namespace}.{key}" for key in values))

    def delete(self, namespace: str, key: str) -> None:
        self._repo.delete(namespace, key)

    def close(self) -> None:
        self._repo.close()


class InMemorySettingsManager(ISettingsManager):
    """Dict-backed store (tests, previews, read-only sessions)."""

    def __init__(self) -> None:
        self._data: dict[tuple[str, str], Any] = {}

    def get(self, namespace: str, key: str, fallback: Any | None = None) -> Any | None:
        return copy.deepcopy(self._data.get((namespace, key), fallback))

    def set(self, namespace: str, key: str, value: Any) -> None:
        self._data[(namespace, key)] = copy.deepcopy(value)

    def set_many(self, namespace: str, values: Mapping[str, Any]) -> None:
        staged = {(namespace, key): copy.deepcopy(value) for key, value in values.items()}
        self._data.update(staged)

    def delete(self, namespace: str, key: str) -> None:
        self._data.pop((namespace, key), None)


_default: SettingsManager | None = None
_lock: Final[RLock] = RLock()


def get_settings_manager() -> SettingsManager:
    """Process-wide store at the configured ``Database.settings`` path."""
    global _default
    with _lock:
        if _default is None:
            _default = SettingsManager(SettingsRepository(config_service.database.settings))
        return _default
