"""
Finger visualization widget for Ring Sizer.

Draws a translucent guide column and an orange finger whose width follows
the dial value, so the user can line it up with their real finger.
"""

from kivy.graphics import Color, Line, RoundedRectangle
from kivy.metrics import dp
from kivy.properties import NumericProperty
from kivy.uix.stencilview import StencilView

GUIDE_COLOR = (0.5, 0.5, 0.5, 0.4)
FINGER_COLOR = (1.0, 0.58, 0.0, 1.0)
NAIL_COLOR = (1.0, 1.0, 1.0, 1.0)

CORNER_RADIUS = dp(20)
NAIL_INSET = dp(8)
NAIL_HEIGHT = dp(100)
# Guide spans 0.5 of the screen inside a column of 0.6
GUIDE_WIDTH_RATIO = 0.5 / 0.6


class FingerView(StencilView):
    """
    Finger graphic sized by ``finger_width`` (in dp).

    The finger rises from below the widget and is clipped at the bottom,
    with the nail outline near its top.
    """

    finger_width = NumericProperty(100)

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self._draw()
        self.bind(pos=self._redraw, size=self._redraw, finger_width=self._redraw)

    def _draw(self):
        self.canvas.clear()
        width = dp(self.finger_width)

        with self.canvas:
            Color(*GUIDE_COLOR)
            guide_width = self.width * GUIDE_WIDTH_RATIO
            RoundedRectangle(
                pos=(self.center_x - guide_width / 2, self.y),
                size=(guide_width, self.height),
                radius=[CORNER_RADIUS],
            )

            Color(*FINGER_COLOR)
            finger_x = self.center_x - width / 2
            finger_top = self.top - self.height * 0.1
            finger_bottom = self.y - self.height * 0.3
            RoundedRectangle(
                pos=(finger_x, finger_bottom),
                size=(width, finger_top - finger_bottom),
                radius=[CORNER_RADIUS],
            )

            Color(*NAIL_COLOR)
            nail_width = max(width - 2 * NAIL_INSET, 0)
            Line(
                rounded_rectangle=(
                    finger_x + NAIL_INSET,
                    finger_top - NAIL_INSET - NAIL_HEIGHT,
                    nail_width,
                    NAIL_HEIGHT,
                    CORNER_RADIUS - NAIL_INSET,
                ),
                width=dp(1),
            )

    def _redraw(self, *args):
        self._draw()
