"""
Ring Sizer - finger width ring size estimator

Touch UI where the user drags a dial slider until an on-screen finger
matches their own, then reads off an estimated ring size.
"""

__version__ = "0.1.0"
__author__ = "Ring Sizer Team"

from .core.dial import BoundedDialControl, ValueRange
from .core.result import RingSizeEstimate, estimate_ring_size
from .core.state import SliderState

__all__ = [
    "BoundedDialControl",
    "ValueRange",
    "SliderState",
    "RingSizeEstimate",
    "estimate_ring_size",
    "__version__",
]
