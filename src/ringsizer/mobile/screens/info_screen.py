"""
Info screen for Ring Sizer.

Short usage instructions shown over the main screen.
"""

import logging
from typing import Callable

from kivy.uix.boxlayout import BoxLayout
from kivy.uix.button import Button
from kivy.uix.label import Label
from kivy.uix.scrollview import ScrollView

from ...core.dial import ValueRange

logger = logging.getLogger(__name__)


INSTRUCTIONS = [
    "Place your finger on the screen next to the orange finger.",
    "Drag the dial up to widen the finger, down to narrow it.",
    "Use + and - for fine steps.",
    "Press 'Get the ring size' when both match.",
    "Tap the hand button to move the dial to the other side.",
]


class InfoScreen(BoxLayout):
    """
    Instructions panel with a close button.

    Sections:
    - How to measure
    - Dial range
    """

    def __init__(
        self,
        value_range: ValueRange,
        on_close: Callable[[], None] | None = None,
        **kwargs,
    ):
        kwargs.setdefault("orientation", "vertical")
        kwargs.setdefault("padding", [10, 10, 10, 10])
        kwargs.setdefault("spacing", 10)
        super().__init__(**kwargs)

        self.value_range = value_range
        self.on_close = on_close

        self._create_ui()

    def _create_ui(self):
        """Create the info UI."""
        header = BoxLayout(orientation="horizontal", size_hint_y=None, height=50)

        title = Label(
            text="How it works",
            font_size="20sp",
            bold=True,
            size_hint=(0.7, 1),
            halign="left",
            valign="middle",
        )
        title.bind(size=title.setter("text_size"))
        header.add_widget(title)

        close_btn = Button(text="Close", size_hint=(0.3, 1), font_size="14sp")
        close_btn.bind(on_press=self._on_close)
        header.add_widget(close_btn)

        self.add_widget(header)

        scroll_view = ScrollView(size_hint=(1, 1))
        body = BoxLayout(
            orientation="vertical",
            size_hint_y=None,
            spacing=5,
            padding=[0, 10, 0, 10],
        )
        body.bind(minimum_height=body.setter("height"))

        body.add_widget(self._create_section_header("How to measure"))
        for number, line in enumerate(INSTRUCTIONS, start=1):
            body.add_widget(self._create_text_row(f"{number}. {line}"))

        body.add_widget(self._create_section_header("Dial range"))
        body.add_widget(
            self._create_text_row(
                f"Finger width {self.value_range.lower_bound:.0f} to "
                f"{self.value_range.upper_bound:.0f}"
            )
        )

        scroll_view.add_widget(body)
        self.add_widget(scroll_view)

    def _create_section_header(self, text: str) -> Label:
        """Create a section header label."""
        label = Label(
            text=text,
            font_size="16sp",
            bold=True,
            size_hint_y=None,
            height=40,
            halign="left",
            valign="bottom",
            color=(1.0, 0.58, 0.0, 1.0),
        )
        label.bind(size=label.setter("text_size"))
        return label

    def _create_text_row(self, text: str) -> Label:
        label = Label(
            text=text,
            font_size="14sp",
            size_hint_y=None,
            height=44,
            halign="left",
            valign="middle",
            padding=[10, 0],
        )
        label.bind(size=label.setter("text_size"))
        return label

    def _on_close(self, instance):
        """Handle close button press."""
        if self.on_close:
            self.on_close()
