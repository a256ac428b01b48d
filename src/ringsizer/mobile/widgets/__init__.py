"""Widget modules for Ring Sizer mobile UI."""

from .dial_slider import DialSlider
from .finger_view import FingerView
from .outline_button import OutlineButton, OutlineShape
from .result_popup import ResultPopup

__all__ = ["DialSlider", "FingerView", "OutlineButton", "OutlineShape", "ResultPopup"]
