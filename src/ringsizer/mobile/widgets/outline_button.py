"""
Outlined button widget for Ring Sizer.

Transparent button with a thin gray circle or rounded-square outline, used
for the navigation bar and the +/- step buttons.
"""

from enum import Enum
from typing import Callable

from kivy.graphics import Color, Line
from kivy.metrics import dp
from kivy.uix.button import Button


class OutlineShape(Enum):
    """Outline drawn behind the button text."""

    CIRCLE = "circle"
    ROUNDED = "rounded"
    NONE = "none"


class OutlineButton(Button):
    """
    Flat button with a drawn outline.

    States are not animated; the outline simply follows position and size.
    """

    def __init__(
        self,
        shape: OutlineShape = OutlineShape.CIRCLE,
        on_tap: Callable[[], None] | None = None,
        **kwargs,
    ):
        """
        Initialize the button.

        Args:
            shape: Outline shape.
            on_tap: Callback invoked on press.
        """
        kwargs.setdefault("size_hint", (None, None))
        kwargs.setdefault("size", (dp(36), dp(36)))
        kwargs.setdefault("font_size", "16sp")
        super().__init__(**kwargs)

        self.shape = shape
        self._on_tap = on_tap

        self.background_normal = ""
        self.background_down = ""
        self.background_color = (0, 0, 0, 0)
        self.color = (0, 0, 0, 1)

        self._draw_outline()
        self.bind(pos=self._update_outline, size=self._update_outline)
        self.bind(on_press=self._on_press)

    def _draw_outline(self):
        self.canvas.before.clear()
        if self.shape == OutlineShape.NONE:
            return
        with self.canvas.before:
            Color(0.5, 0.5, 0.5, 1.0)
            if self.shape == OutlineShape.CIRCLE:
                radius = min(self.width, self.height) / 2 - 1
                Line(circle=(self.center_x, self.center_y, radius), width=1)
            else:
                Line(
                    rounded_rectangle=(self.x, self.y, self.width, self.height, dp(5)),
                    width=1,
                )

    def _update_outline(self, *args):
        self._draw_outline()

    def _on_press(self, instance):
        if self._on_tap:
            self._on_tap()
