"""
ClockSettingsRepository
-----------------------
Persistence for the world clock through the namespaced settings store.

Keys (namespace ``worldclock`` unless configured otherwise):
- ``timezones``: list of active timezone ids
- ``config``:    mapping of the three display flags

Strategy:
- A missing, unreadable or malformed store loads as "nothing persisted" so
  the defaults apply.
- Save always writes both keys in full, in one batch, replacing what was
  there. A failed save leaves the previous pair untouched.
"""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass, field
from typing import Any, Optional

from ..core.config.config_service import config_service
from ..core.contracts.settings import ISettingsManager
from ..core.logs.logic.logger import logger
from ..exceptions.errors import SettingsUnavailableError
from .clock_state import ClockState

_STORE_ERRORS = (sqlite3.Error, OSError, ValueError, TypeError)


@dataclass(frozen=True)
class PersistedClockSettings:
    """What the store held at load time."""

    active_ids: tuple[str, ...] = ()
    config: dict[str, Any] = field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        return not self.active_ids and not self.config


class ClockSettingsRepository:
    """
    Loads and saves the active timezone set and the display flags.
    """

    KEY_TIMEZONES = "timezones"
    KEY_CONFIG = "config"

    def __init__(self, settings: ISettingsManager, namespace: Optional[str] = None) -> None:
        self._settings = settings
        self.namespace = namespace or config_service.clock.namespace

    # --- Public API ---------------------------------------------------------

    def load(self) -> PersistedClockSettings:
        """
        Returns the persisted settings, or an empty result if the store is
        unavailable or holds unexpected data.
        """
        try:
            loaded = self._read()
        except SettingsUnavailableError as exc:
            logger.log("WorldClock", "SettingsLoad", level="WARNING",
                       message=f"using defaults: {exc}")
            return PersistedClockSettings()

        logger.log("WorldClock", "SettingsLoad", level="DEBUG",
                   message=f"{len(loaded.active_ids)} active, config={loaded.config}")
        return loaded

    def save(self, state: ClockState) -> None:
        """
        Writes the full active set and config together.

        Raises:
            SettingsUnavailableError: The store rejected the write.
        """
        try:
            self._settings.set_many(self.namespace, {
                self.KEY_TIMEZONES: state.active_ids(),
                self.KEY_CONFIG: state.config.as_dict(),
            })
        except _STORE_ERRORS as exc:
            raise SettingsUnavailableError(f"cannot write settings: {exc}") from exc

    # --- Internal helpers ---------------------------------------------------

    def _read(self) -> PersistedClockSettings:
        try:
            timezones = self._settings.get(self.namespace, self.KEY_TIMEZONES, None)
            config = self._settings.get(self.namespace, self.KEY_CONFIG, None)
        except _STORE_ERRORS as exc:
            raise SettingsUnavailableError(f"cannot read settings: {exc}") from exc

        if timezones is None:
            timezones = []
        if config is None:
            config = {}

        if not isinstance(timezones, list) or not all(isinstance(t, str) for t in timezones):
            raise SettingsUnavailableError(f"malformed '{self.KEY_TIMEZONES}' value: {timezones!r}")
        if not isinstance(config, dict):
            raise SettingsUnavailableError(f"malformed '{self.KEY_CONFIG}' value: {config!r}")

        return PersistedClockSettings(active_ids=tuple(timezones), config=dict(config))
