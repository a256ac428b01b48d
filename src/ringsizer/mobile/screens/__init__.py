"""Screen modules for Ring Sizer mobile UI."""

from .info_screen import InfoScreen
from .main_screen import MainScreen

__all__ = ["InfoScreen", "MainScreen"]
