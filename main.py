import logging
import tkinter as tk

from worldclock import create_extension, get_feature_name
from worldclock.gui.tk_wall_clock import TkWallClockDriver
from worldclock.logic.wall_clock import WallClock


class PanelWindow(tk.Tk):
    """Small always-on-top window standing in for a desktop panel."""

    def __init__(self):
        super().__init__()

        self.title(get_feature_name())
        self.attributes("-topmost", True)
        self.resizable(True, False)

        self.wall_clock = WallClock()
        self.driver = TkWallClockDriver(self, self.wall_clock)
        self.extension = create_extension(self, wall_clock=self.wall_clock)

        self.extension.init()
        self.extension.enable()
        self.driver.start()

        self.protocol("WM_DELETE_WINDOW", self.on_close)

    def on_close(self):
        """Stops ticking, disables the extension (saves), then closes."""
        self.driver.stop()
        self.extension.disable()
        self.destroy()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    app = PanelWindow()
    app.mainloop()
