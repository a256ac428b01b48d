"""
Ring size estimate data structures.
"""

import math
from dataclasses import dataclass
from typing import Any


@dataclass
class RingSizeEstimate:
    """
    Ring size derived from the finger width set on the dial.

    Attributes:
        finger_width: Finger width in display pixels as set by the user
        size: Estimated ring size
    """

    finger_width: float
    size: int

    @property
    def message(self) -> str:
        """Text shown in the result dialog."""
        return f"Your estimated ring size is {self.size}"

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dictionary."""
        return {
            "finger_width": round(self.finger_width, 2),
            "size": self.size,
        }


def estimate_ring_size(finger_width: float) -> RingSizeEstimate:
    """
    Estimate a ring size from a finger width.

    Placeholder formula: width / 10, floored. There is no calibration against
    physical units or ring size standards behind it.
    """
    return RingSizeEstimate(finger_width=finger_width, size=math.floor(finger_width / 10))
