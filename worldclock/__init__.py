"""
World clock feature package initializer.

Provides factory functions the host window calls to create the extension
and its panel view without hard-coding internals.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from .core.contracts.settings import ISettingsManager
from .extension import WorldClockExtension
from .logic.selection_controller import SelectionController
from .logic.wall_clock import WallClock

if TYPE_CHECKING:
    import tkinter as tk

__version__ = "1.0.0"


def get_feature_name() -> str:
    """
    Human readable feature name (used e.g. for window titles).

    Returns:
        str: The configured application name.
    """
    from .core.config.config_service import config_service

    return config_service.general.app_name


def create_extension(
    parent: tk.Misc,
    *,
    settings: Optional[ISettingsManager] = None,
    wall_clock: Optional[WallClock] = None,
) -> WorldClockExtension:
    """
    Factory for a Tk-hosted extension. Call ``enable()`` to show the panel.

    Args:
        parent (tk.Misc): Container the panel label is packed into.
        settings (ISettingsManager, optional): Store; the SQLite store by default.
        wall_clock (WallClock, optional): Tick source; a new one by default.

    Returns:
        WorldClockExtension: Not yet enabled.
    """
    from .core.settings.logic.settings_manager import get_settings_manager
    from .gui.panel_presenter import PanelPresenter

    def _view(controller: SelectionController) -> PanelPresenter:
        view = PanelPresenter(parent, controller)
        view.pack(side="top", fill="x")
        return view

    return WorldClockExtension(
        settings=settings or get_settings_manager(),
        wall_clock=wall_clock or WallClock(),
        view_factory=_view,
    )
