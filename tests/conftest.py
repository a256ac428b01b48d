"""
Pytest fixtures for Ring Sizer tests.

Provides common test fixtures including:
- Value ranges used across dial tests
- Shared slider state and control
- Temporary configuration directories
"""

import os

import pytest
import yaml

from ringsizer.core.dial import BoundedDialControl, ValueRange
from ringsizer.core.state import SliderState


@pytest.fixture
def test_config():
    """Test configuration dictionary."""
    return {
        "app": {
            "title": "Ring Sizer Test",
            "window_size": [390, 844],
            "debug": False,
        },
        "dial": {
            "lower_bound": 50,
            "upper_bound": 100,
            "initial_value": 50,
            "step": 5,
        },
        "layout": {
            "slider_on_left": True,
        },
        "logging": {
            "level": "INFO",
            "file": "logs/test.log",
        },
    }


@pytest.fixture
def config_dir(tmp_path, test_config, monkeypatch):
    """Directory holding default.yaml written from test_config."""
    for key in list(os.environ):
        if key.startswith("RINGSIZER_"):
            monkeypatch.delenv(key)
    with open(tmp_path / "default.yaml", "w", encoding="utf-8") as f:
        yaml.safe_dump(test_config, f)
    return tmp_path


@pytest.fixture
def ring_range():
    """Range matching the default finger width scenario."""
    return ValueRange(50, 100)


@pytest.fixture
def unit_range():
    """Range [0, 100] for easy arithmetic."""
    return ValueRange(0, 100)


@pytest.fixture
def state():
    return SliderState(50)


@pytest.fixture
def dial(state, ring_range):
    return BoundedDialControl(state, ring_range)
