"""Core components for Ring Sizer."""

from .config import Config
from .dial import BoundedDialControl, TickLayout, TickMark, ValueRange
from .result import RingSizeEstimate, estimate_ring_size
from .state import SliderState

__all__ = [
    "Config",
    "BoundedDialControl",
    "TickLayout",
    "TickMark",
    "ValueRange",
    "RingSizeEstimate",
    "estimate_ring_size",
    "SliderState",
]
