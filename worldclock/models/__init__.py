from .clock_config import ClockConfig
from .menu_model import MenuModel
from .timezone_entry import TimezoneEntry

__all__ = ["ClockConfig", "MenuModel", "TimezoneEntry"]
