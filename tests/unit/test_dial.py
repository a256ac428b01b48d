"""
Unit tests for BoundedDialControl and dial geometry.
"""

import pytest

from ringsizer.core.dial import (
    MAJOR_TICK_SIZE,
    MINOR_TICK_SIZE,
    BoundedDialControl,
    ValueRange,
    compute_offset,
    compute_value_from_drag,
    tick_row_count,
)
from ringsizer.core.state import SliderState


class TestValueRange:
    """Tests for range construction and clamping."""

    def test_valid_range(self):
        value_range = ValueRange(50, 100)
        assert value_range.span == 50

    @pytest.mark.parametrize("lower,upper", [(100, 50), (50, 50)])
    def test_inverted_or_empty_range_rejected(self, lower, upper):
        with pytest.raises(ValueError):
            ValueRange(lower, upper)

    def test_non_finite_bounds_rejected(self):
        with pytest.raises(ValueError):
            ValueRange(0, float("inf"))
        with pytest.raises(ValueError):
            ValueRange(float("nan"), 10)

    def test_clamp(self, ring_range):
        assert ring_range.clamp(10) == 50
        assert ring_range.clamp(75) == 75
        assert ring_range.clamp(500) == 100

    def test_is_immutable(self, ring_range):
        with pytest.raises(AttributeError):
            ring_range.lower_bound = 0


class TestComputeValueFromDrag:
    """Tests for the pure drag-to-value mapping."""

    @pytest.mark.parametrize("height", [1, 100, 200, 873.5])
    def test_top_gives_upper_bound(self, ring_range, height):
        assert compute_value_from_drag(0, height, ring_range) == 100

    @pytest.mark.parametrize("height", [1, 100, 200, 873.5])
    def test_bottom_gives_lower_bound(self, ring_range, height):
        assert compute_value_from_drag(height, height, ring_range) == 50

    def test_midpoint(self, ring_range):
        assert compute_value_from_drag(100, 200, ring_range) == pytest.approx(75)

    def test_inverted_axis(self, unit_range):
        assert compute_value_from_drag(10, 100, unit_range) == pytest.approx(90)
        assert compute_value_from_drag(90, 100, unit_range) == pytest.approx(10)

    @pytest.mark.parametrize("pointer_y", [-1000, -1, 0, 37, 199, 200, 201, 5000])
    def test_always_within_range(self, ring_range, pointer_y):
        value = compute_value_from_drag(pointer_y, 200, ring_range)
        assert 50 <= value <= 100

    def test_outside_viewport_saturates(self, ring_range):
        assert compute_value_from_drag(-50, 200, ring_range) == 100
        assert compute_value_from_drag(250, 200, ring_range) == 50

    @pytest.mark.parametrize("height", [0, -1, -200])
    def test_degenerate_viewport(self, ring_range, height):
        assert compute_value_from_drag(10, height, ring_range) is None

    @pytest.mark.parametrize("height", [float("nan"), float("inf")])
    def test_non_finite_viewport(self, ring_range, height):
        assert compute_value_from_drag(10, height, ring_range) is None

    def test_nan_pointer(self, ring_range):
        assert compute_value_from_drag(float("nan"), 200, ring_range) is None

    def test_monotonic_decreasing(self, unit_range):
        values = [compute_value_from_drag(y, 100, unit_range) for y in range(0, 101, 5)]
        assert all(a > b for a, b in zip(values, values[1:]))


class TestComputeOffset:
    """Tests for the ruler offset."""

    def test_lower_bound_has_no_offset(self, ring_range):
        assert compute_offset(50, 200, ring_range) == 0

    def test_upper_bound_shifts_full_viewport(self, ring_range):
        assert compute_offset(100, 200, ring_range) == pytest.approx(-200)

    def test_midpoint(self, ring_range):
        assert compute_offset(75, 200, ring_range) == pytest.approx(-100)


class TestBoundedDialControl:
    """Tests for the stateful control."""

    def test_drag_writes_shared_state(self, dial, state):
        dial.on_drag_move(100, 200)
        assert state.value == pytest.approx(75)
        assert dial.value == state.value

    def test_drag_ignores_previous_value(self, dial, state):
        dial.on_drag_move(0, 200)
        dial.on_drag_move(100, 200)
        first = state.value
        state.value = 60
        dial.on_drag_move(100, 200)
        assert state.value == first

    def test_degenerate_viewport_leaves_value(self, dial, state):
        state.value = 80
        dial.on_drag_move(10, 0)
        dial.on_drag_move(10, -5)
        assert state.value == 80

    def test_nan_drag_leaves_value(self, dial, state):
        state.value = 75
        seen = []
        state.bind(seen.append)
        dial.on_drag_move(10, float("nan"))
        dial.on_drag_move(float("nan"), 200)
        assert state.value == 75
        assert seen == []

    def test_nan_step_leaves_value(self, dial, state):
        state.value = 75
        dial.step_button_increment(float("nan"))
        assert state.value == 75
        dial.step_button_increment(5)
        assert state.value == 80

    def test_nan_initial_value_falls_to_lower_bound(self, ring_range):
        state = SliderState(float("nan"))
        BoundedDialControl(state, ring_range)
        assert state.value == 50

    def test_drag_notifies_observers(self, dial, state):
        seen = []
        state.bind(seen.append)
        dial.on_drag_move(0, 200)
        assert seen == [100]

    def test_initial_value_clamped(self, ring_range):
        state = SliderState(10)
        BoundedDialControl(state, ring_range)
        assert state.value == 50

    def test_rejects_non_range(self):
        with pytest.raises(TypeError):
            BoundedDialControl(SliderState(0), (0, 10))

    def test_step_increment_saturates_at_upper(self, dial, state):
        for _ in range(20):
            dial.step_button_increment(5)
            assert state.value <= 100
        assert state.value == 100

    def test_step_decrement_saturates_at_lower(self, dial, state):
        for _ in range(5):
            dial.step_button_increment(-5)
            assert state.value >= 50
        assert state.value == 50

    def test_step_moves_by_delta(self, dial, state):
        dial.step_button_increment(5)
        dial.step_button_increment(5)
        dial.step_button_increment(-5)
        assert state.value == 55


class TestRender:
    """Tests for tick layout derivation."""

    def test_render_is_idempotent(self, dial):
        dial.on_drag_move(37, 200)
        assert dial.render(200) == dial.render(200)

    def test_render_does_not_mutate(self, dial, state):
        state.value = 70
        dial.render(200)
        assert state.value == 70

    def test_offset_follows_external_write(self, dial, state):
        state.value = 75
        assert dial.render(200).offset == pytest.approx(-100)

    def test_row_count_fixed(self, dial):
        assert tick_row_count() == 100
        assert len(dial.render(200).ticks) == 100
        assert len(dial.render(3000).ticks) == 100

    def test_strip_is_twice_viewport(self, dial):
        layout = dial.render(200)
        assert layout.strip_height == 400
        assert layout.row_height == pytest.approx(4)

    def test_major_and_minor_ticks(self, dial):
        ticks = dial.render(200).ticks
        majors = [t for t in ticks if t.is_major]
        assert len(majors) == 20
        assert ticks[0].is_major and not ticks[1].is_major
        assert (ticks[0].width, ticks[0].height) == MAJOR_TICK_SIZE
        assert (ticks[1].width, ticks[1].height) == MINOR_TICK_SIZE

    def test_tick_positions_include_offset(self, dial, state):
        state.value = 100
        ticks = dial.render(200).ticks
        assert ticks[0].y == pytest.approx(-200)
        assert ticks[50].y == pytest.approx(0)

    @pytest.mark.parametrize("height", [0, -10, float("nan"), float("inf")])
    def test_degenerate_render_is_empty(self, dial, height):
        layout = dial.render(height)
        assert layout.is_empty
        assert layout.offset == 0
