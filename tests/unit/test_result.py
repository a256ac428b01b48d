"""
Unit tests for ring size estimation.
"""

import pytest

from ringsizer.core.result import RingSizeEstimate, estimate_ring_size


class TestEstimateRingSize:
    """Tests for the width-to-size conversion."""

    @pytest.mark.parametrize(
        "width,size",
        [(50, 5), (59.9, 5), (100, 10), (104.5, 10), (150, 15)],
    )
    def test_floor_of_tenth(self, width, size):
        assert estimate_ring_size(width).size == size

    def test_message(self):
        estimate = estimate_ring_size(100)
        assert estimate.message == "Your estimated ring size is 10"

    def test_to_dict(self):
        estimate = RingSizeEstimate(finger_width=104.567, size=10)
        assert estimate.to_dict() == {"finger_width": 104.57, "size": 10}
