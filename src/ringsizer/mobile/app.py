"""
Ring Sizer Kivy Application.

Main entry point for the Kivy-based mobile/desktop application.
"""

import os
import platform as sys_platform

# Prevent Kivy from consuming command-line arguments
os.environ["KIVY_NO_ARGS"] = "1"

from kivy.app import App
from kivy.core.window import Window
from kivy.logger import Logger

from ..core.config import Config
from .screens.main_screen import MainScreen


class RingSizerApp(App):
    """
    Main Ring Sizer Kivy application.

    Builds a single MainScreen which owns all sizing state.
    """

    def __init__(self, app_config: Config | None = None, **kwargs):
        """
        Initialize the app.

        Args:
            app_config: Optional Config object. If not provided, loads from default location.
        """
        super().__init__(**kwargs)

        # app_config avoids clashing with Kivy's own App.config
        if app_config is None:
            app_config = Config()
        self.app_config = app_config

        self.platform_type = self._detect_platform()
        self.main_screen = None

        Logger.info(f"RingSizer: Initialized on {sys_platform.system()} ({self.platform_type})")

    def _detect_platform(self) -> str:
        """Detect current platform type."""
        if sys_platform.system() == "Linux":
            try:
                import android  # noqa: F401
                return "android"
            except ImportError:
                return "desktop"
        return "desktop"

    def build(self):
        """Build the application UI."""
        self.title = self.app_config.get("app.title", "Ring Sizer")
        if self.platform_type == "desktop":
            width, height = self.app_config.get("app.window_size", [390, 844])
            Window.size = (width, height)
        Window.clearcolor = (1, 1, 1, 1)

        self.main_screen = MainScreen(config=self.app_config)
        Logger.info(
            f"RingSizer: Dial range [{self.main_screen.value_range.lower_bound}, "
            f"{self.main_screen.value_range.upper_bound}]"
        )
        return self.main_screen

    def on_start(self):
        """Called when the application starts."""
        Logger.info("RingSizer: Application starting")

    def on_stop(self):
        """Called when the application stops."""
        if self.main_screen:
            self.main_screen.dial_slider.detach()
        Logger.info("RingSizer: Application stopped")


def run_mobile_app(config: Config | None = None):
    """
    Run the Ring Sizer Kivy application.

    Args:
        config: Optional Config object.
    """
    app = RingSizerApp(app_config=config)
    app.run()
