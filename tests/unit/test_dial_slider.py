"""
Unit tests for the DialSlider touch adapter.

Runs the widget's touch handlers on a lightweight stand-in so no window or
GL context is needed.
"""

import os
from types import SimpleNamespace

import pytest

os.environ.setdefault("KIVY_NO_ARGS", "1")
os.environ.setdefault("KIVY_NO_CONSOLELOG", "1")
pytest.importorskip("kivy.uix.stencilview")

from ringsizer.core.dial import BoundedDialControl  # noqa: E402
from ringsizer.core.state import SliderState  # noqa: E402
from ringsizer.mobile.widgets.dial_slider import DialSlider  # noqa: E402


class _DialStandIn:
    """Carries only what the touch handlers read from the widget."""

    _apply_touch = DialSlider._apply_touch
    on_touch_move = DialSlider.on_touch_move

    def __init__(self, control, y, height):
        self.control = control
        self.height = height
        self.top = y + height


def make_touch(y, grab_current=None):
    return SimpleNamespace(x=10, y=y, pos=(10, y), grab_current=grab_current)


class TestDialSliderTouch:
    """Tests for the Kivy bottom-up to top-down conversion."""

    @pytest.fixture
    def state(self):
        return SliderState(50)

    @pytest.fixture
    def widget(self, state, unit_range):
        # Widget spans y=20..120 in window coordinates
        return _DialStandIn(BoundedDialControl(state, unit_range), y=20, height=100)

    @pytest.mark.parametrize(
        "touch_y,expected",
        [(120, 100), (110, 90), (70, 50), (30, 10), (20, 0)],
    )
    def test_higher_touch_gives_higher_value(self, widget, state, touch_y, expected):
        widget._apply_touch(make_touch(touch_y))
        assert state.value == pytest.approx(expected)

    def test_touch_outside_saturates(self, widget, state):
        widget._apply_touch(make_touch(500))
        assert state.value == 100
        widget._apply_touch(make_touch(-500))
        assert state.value == 0

    def test_grabbed_move_updates_value(self, widget, state):
        touch = make_touch(110, grab_current=widget)
        assert widget.on_touch_move(touch) is True
        assert state.value == pytest.approx(90)
