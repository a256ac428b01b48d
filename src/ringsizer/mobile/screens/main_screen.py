"""
Main screen for Ring Sizer.

Hosts the shared finger width state and composes the dial slider, step
buttons, finger graphic, result dialog and navigation chrome.
"""

import logging

from kivy.graphics import Color, Rectangle
from kivy.uix.boxlayout import BoxLayout
from kivy.uix.button import Button
from kivy.uix.floatlayout import FloatLayout
from kivy.uix.label import Label
from kivy.uix.widget import Widget

from ...core.config import Config
from ...core.dial import BoundedDialControl, ValueRange
from ...core.result import RingSizeEstimate, estimate_ring_size
from ...core.state import SliderState
from ..widgets.dial_slider import DialSlider
from ..widgets.finger_view import FingerView
from ..widgets.outline_button import OutlineButton, OutlineShape
from ..widgets.result_popup import ResultPopup
from .info_screen import InfoScreen

logger = logging.getLogger(__name__)

BACKGROUND_COLOR = (1, 1, 1, 1)
TEXT_COLOR = (0, 0, 0, 1)
SUBTITLE_COLOR = (0.5, 0.5, 0.5, 1)
DARK_BUTTON_COLOR = (0.1, 0.1, 0.1, 1)

SIDE_COLUMN_RATIO = 0.2
FINGER_COLUMN_RATIO = 0.6


class MainScreen(FloatLayout):
    """
    Ring sizing screen.

    Layout:
    ┌─────────────────────────────────────┐
    │  <                     (3D)(✋)(i)   │
    │     Determine ring size by          │
    │          finger width               │
    │   Place your finger and adjust...   │
    │        [ Get the ring size ]        │
    │  ┌────┐   ┌──────────┐              │
    │  │dial│   │  finger  │              │
    │  │ +- │   │          │              │
    │  └────┘   └──────────┘              │
    └─────────────────────────────────────┘

    The hand button mirrors the dial column to the other side.
    """

    def __init__(self, config: Config, **kwargs):
        """
        Initialize the main screen.

        Args:
            config: Application configuration.
        """
        super().__init__(**kwargs)

        self.config = config

        self.value_range = ValueRange(
            float(config.get("dial.lower_bound", 50)),
            float(config.get("dial.upper_bound", 150)),
        )
        self.step = float(config.get("dial.step", 5))
        self.slider_on_left = bool(config.get("layout.slider_on_left", True))

        # Host-owned finger width shared with the dial
        self.finger_width = SliderState(config.get("dial.initial_value", 100))
        self.dial_control = BoundedDialControl(self.finger_width, self.value_range)

        self.result_popup: ResultPopup | None = None
        self.info_screen: InfoScreen | None = None

        self._draw_background()
        self.bind(pos=self._update_background, size=self._update_background)

        self._create_ui()
        self.finger_width.bind(self._on_finger_width)

    def _draw_background(self):
        with self.canvas.before:
            Color(*BACKGROUND_COLOR)
            self._bg_rect = Rectangle(pos=self.pos, size=self.size)

    def _update_background(self, *args):
        self._bg_rect.pos = self.pos
        self._bg_rect.size = self.size

    def _create_ui(self):
        """Create all UI components."""
        content = BoxLayout(
            orientation="vertical",
            padding=[16, 0, 16, 16],
            spacing=10,
            size_hint=(1, 1),
            pos_hint={"x": 0, "y": 0},
        )

        content.add_widget(self._create_nav_bar())
        content.add_widget(self._create_header())

        self.get_size_button = Button(
            text="Get the ring size",
            font_size="18sp",
            size_hint=(None, None),
            size=(200, 52),
            pos_hint={"center_x": 0.5},
            background_normal="",
            background_color=DARK_BUTTON_COLOR,
            color=(1, 1, 1, 1),
        )
        self.get_size_button.bind(on_press=self._on_get_size_press)
        content.add_widget(self.get_size_button)

        self.work_area = BoxLayout(orientation="horizontal", size_hint_y=0.4)
        self.side_column = self._create_side_column()
        self.finger_view = FingerView(
            finger_width=self.finger_width.value,
            size_hint_x=FINGER_COLUMN_RATIO,
        )
        self._layout_work_area()
        content.add_widget(self.work_area)

        # Spacer
        content.add_widget(Widget(size_hint_y=0.25))

        self.add_widget(content)

    def _create_nav_bar(self) -> BoxLayout:
        """Create the top navigation bar."""
        nav_bar = BoxLayout(
            orientation="horizontal",
            size_hint_y=None,
            height=56,
            spacing=15,
            padding=[0, 10, 0, 10],
        )

        nav_bar.add_widget(
            OutlineButton(text="<", shape=OutlineShape.NONE, on_tap=self._on_back_press)
        )
        nav_bar.add_widget(Widget())
        nav_bar.add_widget(OutlineButton(text="3D", on_tap=self._on_3d_press))
        self.mirror_button = OutlineButton(text="L|R", font_size="12sp", on_tap=self.toggle_slider_side)
        nav_bar.add_widget(self.mirror_button)
        nav_bar.add_widget(OutlineButton(text="i", on_tap=self._on_info_press))

        return nav_bar

    def _create_header(self) -> BoxLayout:
        """Create title and subtitle labels."""
        header = BoxLayout(orientation="vertical", size_hint_y=None, height=150, spacing=20)

        title = Label(
            text="Determine ring size by\nfinger width",
            font_size="28sp",
            bold=True,
            halign="center",
            valign="middle",
            color=TEXT_COLOR,
        )
        title.bind(size=title.setter("text_size"))
        header.add_widget(title)

        subtitle = Label(
            text="Place your finger and adjust the slider to match its size",
            font_size="16sp",
            halign="center",
            valign="top",
            color=SUBTITLE_COLOR,
        )
        subtitle.bind(size=subtitle.setter("text_size"))
        header.add_widget(subtitle)

        return header

    def _create_side_column(self) -> BoxLayout:
        """Create the dial slider with its +/- buttons."""
        column = BoxLayout(
            orientation="vertical",
            size_hint_x=SIDE_COLUMN_RATIO,
            spacing=8,
            padding=[0, 0, 0, 8],
        )

        self.dial_slider = DialSlider(
            control=self.dial_control,
            size_hint=(None, 0.7),
            width=30,
            pos_hint={"center_x": 0.5},
        )
        column.add_widget(self.dial_slider)

        self.plus_button = OutlineButton(
            text="+",
            shape=OutlineShape.ROUNDED,
            size=(30, 30),
            pos_hint={"center_x": 0.5},
            on_tap=self.increment,
        )
        column.add_widget(self.plus_button)

        self.minus_button = OutlineButton(
            text="-",
            shape=OutlineShape.ROUNDED,
            size=(30, 30),
            pos_hint={"center_x": 0.5},
            on_tap=self.decrement,
        )
        column.add_widget(self.minus_button)

        return column

    def _layout_work_area(self):
        """Place the dial column on the configured side of the finger."""
        self.work_area.clear_widgets()
        spacer = Widget(size_hint_x=SIDE_COLUMN_RATIO)
        if self.slider_on_left:
            order = [self.side_column, self.finger_view, spacer]
        else:
            order = [spacer, self.finger_view, self.side_column]
        for widget in order:
            self.work_area.add_widget(widget)

    def _on_finger_width(self, value: float):
        self.finger_view.finger_width = value

    def increment(self):
        """Widen the finger by one step."""
        self.dial_control.step_button_increment(self.step)

    def decrement(self):
        """Narrow the finger by one step."""
        self.dial_control.step_button_increment(-self.step)

    def toggle_slider_side(self):
        """Mirror the dial column to the other side of the finger."""
        self.slider_on_left = not self.slider_on_left
        self._layout_work_area()
        logger.info(f"Dial moved to the {'left' if self.slider_on_left else 'right'}")

    def show_result(self) -> RingSizeEstimate:
        """Compute the ring size and open the result dialog."""
        estimate = estimate_ring_size(self.finger_width.value)
        logger.info(f"Ring size estimated: {estimate.to_dict()}")
        self.result_popup = ResultPopup(estimate)
        self.result_popup.open()
        return estimate

    def _on_get_size_press(self, instance):
        self.show_result()

    def _on_back_press(self):
        logger.info("Back button pressed")

    def _on_3d_press(self):
        logger.info("3D button pressed")

    def _on_info_press(self):
        """Show the info panel over the screen."""
        if self.info_screen is not None:
            return
        self.info_screen = InfoScreen(
            value_range=self.value_range,
            on_close=self._on_info_close,
            size_hint=(0.9, 0.9),
            pos_hint={"center_x": 0.5, "center_y": 0.5},
        )
        with self.info_screen.canvas.before:
            Color(0.1, 0.1, 0.1, 0.95)
            self._info_bg = Rectangle(pos=self.info_screen.pos, size=self.info_screen.size)
        self.info_screen.bind(pos=self._update_info_bg, size=self._update_info_bg)
        self.add_widget(self.info_screen)

    def _update_info_bg(self, instance, value):
        self._info_bg.pos = instance.pos
        self._info_bg.size = instance.size

    def _on_info_close(self):
        if self.info_screen is not None:
            self.remove_widget(self.info_screen)
            self.info_screen = None
            logger.info("Info closed")
