"""
WorldClockExtension – enable/disable lifecycle of the panel.

enable():  build catalog + state from the settings store, wire the
           controller to the wall clock, create the panel view, render.
disable(): unsubscribe from the wall clock, save, destroy the view, release
           the state.

Neither entry point raises: failures are logged and the panel simply does
not appear (or stays gone).
"""

from __future__ import annotations

from typing import Callable, Optional, Protocol

from .core.config.config_service import config_service
from .core.contracts.settings import ISettingsManager
from .core.logs.logic.logger import logger
from .logic.clock_settings_repository import ClockSettingsRepository
from .logic.clock_state import ClockState
from .logic.label_formatter import LabelFormatter
from .logic.selection_controller import SelectionController
from .logic.timezone_catalog import TimezoneCatalog
from .logic.wall_clock import WallClock

FEATURE = "WorldClock"


class PanelView(Protocol):
    def destroy(self) -> None:
        ...


ViewFactory = Callable[[SelectionController], PanelView]


class WorldClockExtension:
    """
    Owns everything that lives between ``enable`` and ``disable``.

    DI:
        settings: ISettingsManager used through ClockSettingsRepository
        wall_clock: WallClock driven by the host
        view_factory: builds the panel view for a controller (None = headless)
        catalog_factory: returns the timezone catalog (system catalog by default)
        formatter: LabelFormatter (inject a fixed-clock resolver in tests)
    """

    def __init__(
        self,
        *,
        settings: ISettingsManager,
        wall_clock: WallClock,
        view_factory: Optional[ViewFactory] = None,
        catalog_factory: Callable[[], TimezoneCatalog] = TimezoneCatalog.from_system,
        formatter: Optional[LabelFormatter] = None,
    ) -> None:
        self._repo = ClockSettingsRepository(settings)
        self._wall_clock = wall_clock
        self._view_factory = view_factory
        self._catalog_factory = catalog_factory
        self._formatter = formatter or LabelFormatter()

        self._state: Optional[ClockState] = None
        self._controller: Optional[SelectionController] = None
        self._view: Optional[PanelView] = None
        self._tick_handle: Optional[int] = None

    # ------------------------------------------------------------------ #
    #  Lifecycle                                                          #
    # ------------------------------------------------------------------ #
    def init(self) -> None:
        logger.log(FEATURE, "Init", message=self._describe("initializing"))

    def enable(self) -> None:
        logger.log(FEATURE, "Enable", message=self._describe("enabling"))
        try:
            self._enable()
        except Exception as exc:  # noqa: BLE001
            logger.log(FEATURE, "EnableFailed", level="ERROR", message=f"{type(exc).__name__}: {exc}")
            self._teardown(save=False)

    def disable(self) -> None:
        logger.log(FEATURE, "Disable", message=self._describe("disabling"))
        try:
            self._teardown(save=True)
        except Exception as exc:  # noqa: BLE001
            logger.log(FEATURE, "DisableFailed", level="ERROR", message=f"{type(exc).__name__}: {exc}")
            self._state = self._controller = self._view = None
            self._tick_handle = None

    @property
    def enabled(self) -> bool:
        return self._controller is not None

    @property
    def controller(self) -> Optional[SelectionController]:
        return self._controller

    # ------------------------------------------------------------------ #
    #  Internals                                                          #
    # ------------------------------------------------------------------ #
    def _enable(self) -> None:
        if self._controller is not None:
            return

        catalog = self._catalog_factory()
        persisted = self._repo.load()
        self._state = ClockState.initialize(catalog, persisted.active_ids, persisted.config)
        self._controller = SelectionController(
            self._state, formatter=self._formatter, repository=self._repo
        )

        if self._view_factory is not None:
            self._view = self._view_factory(self._controller)

        self._tick_handle = self._wall_clock.connect(self._controller.on_clock_tick)
        self._controller.publish_label()

    def _teardown(self, *, save: bool) -> None:
        # unsubscribe -> save -> destroy view -> release state
        if self._tick_handle is not None:
            self._wall_clock.disconnect(self._tick_handle)
            self._tick_handle = None

        if save and self._controller is not None:
            self._controller.save()

        if self._view is not None:
            view, self._view = self._view, None
            view.destroy()

        self._controller = None
        self._state = None

    @staticmethod
    def _describe(verb: str) -> str:
        general = config_service.general
        return f"{verb} {general.app_name} version {general.version}"
