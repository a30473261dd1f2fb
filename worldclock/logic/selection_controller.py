"""SelectionController - reacts to clicks, ticks and filter input."""

from __future__ import annotations

from typing import Callable, Optional

from ..core.logs.logic.logger import logger
from ..exceptions.errors import InvalidConfigKeyError, SettingsUnavailableError, UnknownTimezoneError
from ..models.menu_model import MenuModel
from .clock_settings_repository import ClockSettingsRepository
from .clock_state import ClockState
from .label_formatter import LabelFormatter
from .signals import Signal


class SelectionController:
    """
    Mutates a ClockState on behalf of the panel and keeps the panel label,
    the menu model and the settings store in step with it.

    Responsibilities:
    - Toggle timezones and config flags, then persist
    - Build the aggregate panel label
    - Build the menu model for the current filter

    The panel subscribes to ``label_changed`` (one ``str`` argument).
    """

    PANEL_SEPARATOR = "    "
    EMPTY_LABEL = "..."

    def __init__(
        self,
        state: ClockState,
        *,
        formatter: Optional[LabelFormatter] = None,
        repository: Optional[ClockSettingsRepository] = None,
    ) -> None:
        self._state = state
        self._formatter = formatter or LabelFormatter()
        self._repo = repository
        self.label_changed = Signal("label-changed")

    @property
    def state(self) -> ClockState:
        return self._state

    # ------------------------------------------------------------------ #
    #  Mutations                                                          #
    # ------------------------------------------------------------------ #
    def toggle(self, tz_id: str) -> bool:
        """
        Flips the active flag of ``tz_id``, republishes the label and saves.

        Returns:
            bool: False if ``tz_id`` is not in the catalog (nothing happens).
        """
        entry = self._state.entry(tz_id)
        if entry is None:
            logger.log("WorldClock", "ToggleUnknown", level="WARNING", reference_id=tz_id)
            return False

        self._state.set_active(tz_id, not entry.active)
        logger.log("WorldClock", "Toggle", reference_id=tz_id,
                   message="active" if entry.active else "inactive")
        self.publish_label()
        self.save()
        return True

    def set_config_flag(self, name: str, value: bool) -> None:
        """
        Raises:
            InvalidConfigKeyError: ``name`` is unknown; nothing is changed or saved.
        """
        try:
            self._state.set_config(name, value)
        except InvalidConfigKeyError:
            logger.log("WorldClock", "ConfigSet", level="ERROR", message=f"rejected key {name!r}")
            raise
        logger.log("WorldClock", "ConfigSet", message=f"{name}={bool(value)}")
        self.publish_label()
        self.save()

    def set_filter(self, text: str) -> MenuModel:
        self._state.set_filter(text)
        return self.refresh_menu_model(self._state.filter_text)

    def open_menu(self) -> MenuModel:
        """Menu opened: the filter starts empty every time."""
        self._state.reset_filter()
        return self.refresh_menu_model("")

    # ------------------------------------------------------------------ #
    #  Rendering                                                          #
    # ------------------------------------------------------------------ #
    def compute_panel_label(self) -> str:
        parts = []
        for entry in self._state.active_entries():
            try:
                parts.append(self._formatter.format(entry.tz_id, self._state.config, full=False))
            except UnknownTimezoneError as exc:
                logger.log("WorldClock", "UnknownTimezone", level="WARNING",
                           reference_id=entry.tz_id, message=str(exc))
        text = self.PANEL_SEPARATOR.join(parts).strip()
        return text or self.EMPTY_LABEL

    def refresh_menu_model(self, filter_text: str = "") -> MenuModel:
        """
        Recomputes every cached label (full form) and partitions the entries.
        Entries whose zone cannot be resolved are left out of both lists.
        """
        for entry in self._state.entries:
            try:
                entry.cached_label = self._formatter.format(entry.tz_id, self._state.config, full=True)
            except UnknownTimezoneError:
                entry.cached_label = None

        active = tuple(e for e in self._state.active_entries() if e.cached_label is not None)
        inactive = tuple(
            e for e in self._state.inactive_entries_matching(filter_text) if e.cached_label is not None
        )
        return MenuModel(active=active, inactive=inactive, filter_text=filter_text)

    def publish_label(self) -> str:
        text = self.compute_panel_label()
        self.label_changed.emit(text)
        return text

    def on_clock_tick(self) -> None:
        """Clock notification: only the panel label is refreshed."""
        self.publish_label()

    # ------------------------------------------------------------------ #
    #  Subscriptions / persistence                                        #
    # ------------------------------------------------------------------ #
    def subscribe_label(self, callback: Callable[[str], None]) -> int:
        return self.label_changed.connect(callback)

    def unsubscribe_label(self, handle: int) -> bool:
        return self.label_changed.disconnect(handle)

    def save(self) -> bool:
        """
        Persists the full state. A failing store is logged; the in-memory
        state stays authoritative.
        """
        if self._repo is None:
            return False
        try:
            self._repo.save(self._state)
        except SettingsUnavailableError as exc:
            logger.log("WorldClock", "SettingsSave", level="ERROR", message=str(exc))
            return False
        logger.log("WorldClock", "SettingsSave", level="DEBUG",
                   message=",".join(self._state.active_ids()) or "-")
        return True
