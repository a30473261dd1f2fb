"""
PanelPresenter (Tkinter)
------------------------
The always-visible panel label plus the popup menu that edits the selection.

UX notes:
- Click the label to open or close the menu.
- "Active clocks": click an entry to remove it.
- "Add more clocks": type to filter, click an entry to add it.
- "Config": three switches, applied immediately.
"""

from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import Optional

from ..logic.selection_controller import SelectionController
from ..models.menu_model import MenuModel

TICK = "✔"

CONFIG_SWITCHES = (
    ("24 hours format", "use_24_hour_format"),
    ("Show city name", "show_city_name"),
    ("Show timezone", "show_timezone_abbrev"),
)


class PanelPresenter(ttk.Frame):
    """
    Renders a SelectionController. Mount this into any container (e.g. a
    toolbar frame); call ``destroy()`` to detach it from the controller.
    """

    def __init__(self, parent: tk.Misc, controller: SelectionController) -> None:
        """
        Args:
            parent (tk.Misc): Tk parent container.
            controller (SelectionController): Model owner; must outlive this view.
        """
        super().__init__(parent)
        self._controller = controller
        self._menu: Optional[tk.Toplevel] = None
        self._active_ids: list[str] = []
        self._inactive_ids: list[str] = []

        self._build_ui()
        self._label_handle = controller.subscribe_label(self._on_label_changed)

    # --- Public API ---------------------------------------------------------

    @property
    def menu_open(self) -> bool:
        return self._menu is not None

    def open_menu(self) -> None:
        if self._menu is None:
            self._build_menu()
        self.filter_var.set("")
        self._render(self._controller.open_menu())

    def close_menu(self) -> None:
        if self._menu is not None:
            menu, self._menu = self._menu, None
            menu.destroy()

    def destroy(self) -> None:
        self._controller.unsubscribe_label(self._label_handle)
        self.close_menu()
        super().destroy()

    # --- UI -----------------------------------------------------------------

    def _build_ui(self) -> None:
        self.columnconfigure(0, weight=1)
        self.label_var = tk.StringVar(value=SelectionController.EMPTY_LABEL)
        self.panel_label = ttk.Label(self, textvariable=self.label_var, anchor="center", foreground="#666666")
        self.panel_label.configure(font=("Segoe UI", 11))
        self.panel_label.grid(row=0, column=0, sticky="ew", padx=8, pady=4)
        self.panel_label.bind("<Button-1>", lambda _e: self._toggle_menu())

        self.filter_var = tk.StringVar(value="")
        self.filter_var.trace_add("write", lambda *_a: self._on_filter_changed())

    def _build_menu(self) -> None:
        menu = tk.Toplevel(self)
        menu.title("World clock")
        menu.transient(self.winfo_toplevel())
        menu.protocol("WM_DELETE_WINDOW", self.close_menu)
        menu.columnconfigure(0, weight=1)
        self._menu = menu

        ttk.Label(menu, text="Active clocks").grid(row=0, column=0, sticky="w", padx=10, pady=(10, 2))
        self.active_list = tk.Listbox(menu, height=6, activestyle="none", exportselection=False)
        self.active_list.grid(row=1, column=0, sticky="ew", padx=10)
        self.active_list.bind("<<ListboxSelect>>", lambda _e: self._on_pick(self.active_list, self._active_ids))

        ttk.Separator(menu).grid(row=2, column=0, sticky="ew", padx=10, pady=8)
        ttk.Label(menu, text="Add more clocks").grid(row=3, column=0, sticky="w", padx=10, pady=(0, 2))
        self.filter_entry = ttk.Entry(menu, textvariable=self.filter_var, width=40)
        self.filter_entry.grid(row=4, column=0, sticky="ew", padx=10, pady=(0, 4))

        inactive_box = ttk.Frame(menu)
        inactive_box.grid(row=5, column=0, sticky="nsew", padx=10)
        inactive_box.columnconfigure(0, weight=1)
        self.inactive_list = tk.Listbox(inactive_box, height=12, activestyle="none", exportselection=False)
        scroll = ttk.Scrollbar(inactive_box, orient="vertical", command=self.inactive_list.yview)
        self.inactive_list.configure(yscrollcommand=scroll.set)
        self.inactive_list.grid(row=0, column=0, sticky="ew")
        scroll.grid(row=0, column=1, sticky="ns")
        self.inactive_list.bind("<<ListboxSelect>>", lambda _e: self._on_pick(self.inactive_list, self._inactive_ids))

        ttk.Separator(menu).grid(row=6, column=0, sticky="ew", padx=10, pady=8)
        ttk.Label(menu, text="Config").grid(row=7, column=0, sticky="w", padx=10, pady=(0, 2))
        config = self._controller.state.config
        self.switch_vars: dict[str, tk.BooleanVar] = {}
        for offset, (text, name) in enumerate(CONFIG_SWITCHES):
            var = tk.BooleanVar(value=config.get(name))
            self.switch_vars[name] = var
            ttk.Checkbutton(
                menu, text=text, variable=var,
                command=lambda n=name, v=var: self._controller.set_config_flag(n, v.get()),
            ).grid(row=8 + offset, column=0, sticky="w", padx=10, pady=2)

        self.filter_entry.focus_set()

    # --- Rendering ----------------------------------------------------------

    def _render(self, model: MenuModel) -> None:
        if self._menu is None:
            return
        self._active_ids = [e.tz_id for e in model.active]
        self.active_list.delete(0, "end")
        for entry in model.active:
            self.active_list.insert("end", f"{TICK} {entry.cached_label}")
        self._render_inactive(model)

    def _render_inactive(self, model: MenuModel) -> None:
        self._inactive_ids = [e.tz_id for e in model.inactive]
        self.inactive_list.delete(0, "end")
        for entry in model.inactive:
            self.inactive_list.insert("end", entry.cached_label)

    # --- Events -------------------------------------------------------------

    def _toggle_menu(self) -> None:
        if self._menu is None:
            self.open_menu()
        else:
            self.close_menu()

    def _on_label_changed(self, text: str) -> None:
        self.label_var.set(text)

    def _on_filter_changed(self) -> None:
        if self._menu is None:
            return
        self._render_inactive(self._controller.set_filter(self.filter_var.get().lower()))

    def _on_pick(self, listbox: tk.Listbox, ids: list[str]) -> None:
        selection = listbox.curselection()
        if not selection:
            return
        tz_id = ids[selection[0]]
        self._controller.toggle(tz_id)
        self._render(self._controller.refresh_menu_model(self._controller.state.filter_text))
