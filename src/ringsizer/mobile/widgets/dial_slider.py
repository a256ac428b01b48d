"""
Dial slider widget for Ring Sizer.

Kivy rendering adapter for BoundedDialControl: draws the scrolling ruler and
the fixed marker line, and feeds touch drags into the control.
"""

import logging

from kivy.graphics import Color, Rectangle, RoundedRectangle
from kivy.uix.stencilview import StencilView

from ...core.dial import BoundedDialControl

logger = logging.getLogger(__name__)

TICK_COLOR = (0.5, 0.5, 0.5, 1.0)  # Gray
MARKER_COLOR = (1.0, 0.58, 0.0, 1.0)  # Orange
MARKER_HEIGHT = 3


class DialSlider(StencilView):
    """
    Vertical dial slider bound to a shared value.

    Layout:
    ┌──────┐
    │ ━    │   major tick
    │ ─    │   minor ticks
    │ ─    │
    │══════│   marker (fixed)
    │ ─    │
    │ ━    │
    └──────┘

    Dragging up increases the value. The ruler content is clipped to the
    widget bounds.
    """

    def __init__(self, control: BoundedDialControl, **kwargs):
        """
        Initialize the dial slider.

        Args:
            control: Control holding the shared state and value range.
        """
        super().__init__(**kwargs)

        self.control = control

        self._draw()
        self.bind(pos=self._on_geometry, size=self._on_geometry)
        self.control.state.bind(self._on_value)

    def _draw(self):
        """Redraw ruler and marker for the current value."""
        self.canvas.clear()
        layout = self.control.render(self.height)
        if layout.is_empty:
            return

        with self.canvas:
            Color(*TICK_COLOR)
            for tick in layout.ticks:
                bottom = tick.y + tick.height
                if bottom < 0 or tick.y > self.height:
                    continue
                # Ruler coordinates are top-down, Kivy's are bottom-up
                Rectangle(
                    pos=(self.x, self.top - bottom),
                    size=(tick.width, tick.height),
                )

            Color(*MARKER_COLOR)
            RoundedRectangle(
                pos=(self.x, self.center_y - MARKER_HEIGHT / 2),
                size=(self.width, MARKER_HEIGHT),
                radius=[MARKER_HEIGHT / 2],
            )

    def _on_geometry(self, *args):
        self._draw()

    def _on_value(self, value: float):
        self._draw()

    def _apply_touch(self, touch) -> None:
        """Forward a touch position to the control as a top-down drag."""
        self.control.on_drag_move(self.top - touch.y, self.height)

    def on_touch_down(self, touch):
        if not self.collide_point(*touch.pos):
            return super().on_touch_down(touch)
        touch.grab(self)
        self._apply_touch(touch)
        return True

    def on_touch_move(self, touch):
        if touch.grab_current is self:
            self._apply_touch(touch)
            return True
        return super().on_touch_move(touch)

    def on_touch_up(self, touch):
        if touch.grab_current is self:
            touch.ungrab(self)
            logger.debug(f"Dial released at {self.control.value:.1f}")
            return True
        return super().on_touch_up(touch)

    def detach(self) -> None:
        """Stop observing the shared state."""
        self.control.state.unbind(self._on_value)
