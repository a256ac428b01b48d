"""
Result dialog for Ring Sizer.

Modal popup showing the estimated ring size with a single OK button.
"""

import logging

from kivy.uix.boxlayout import BoxLayout
from kivy.uix.button import Button
from kivy.uix.label import Label
from kivy.uix.popup import Popup

from ...core.result import RingSizeEstimate

logger = logging.getLogger(__name__)


class ResultPopup(Popup):
    """
    Dismissable "Ring Size" dialog.

    Layout:
    ┌──────────────────────────────┐
    │  Ring Size                   │
    │  Your estimated ring size    │
    │  is 10                       │
    │            [ OK ]            │
    └──────────────────────────────┘
    """

    def __init__(self, estimate: RingSizeEstimate, **kwargs):
        kwargs.setdefault("title", "Ring Size")
        kwargs.setdefault("size_hint", (0.8, None))
        kwargs.setdefault("height", 220)
        kwargs.setdefault("auto_dismiss", True)

        self.estimate = estimate

        content = BoxLayout(orientation="vertical", padding=[10, 10, 10, 10], spacing=10)

        self.message_label = Label(
            text=estimate.message,
            font_size="16sp",
            halign="center",
            valign="middle",
        )
        self.message_label.bind(size=self.message_label.setter("text_size"))
        content.add_widget(self.message_label)

        self.ok_button = Button(text="OK", size_hint=(1, None), height=44, font_size="16sp")
        content.add_widget(self.ok_button)

        kwargs["content"] = content
        super().__init__(**kwargs)

        self.ok_button.bind(on_press=self._on_ok)

    def _on_ok(self, instance):
        logger.debug("Result dialog dismissed")
        self.dismiss()
