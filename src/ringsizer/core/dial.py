"""
Bounded dial control.

Maps a vertical drag gesture onto a value clamped to a fixed range and
derives the scrolling ruler layout drawn behind the fixed marker line.

The geometry lives in two pure functions (``compute_value_from_drag`` and
``compute_offset``) so it can be used and tested without any UI toolkit.
Coordinates are top-down: ``pointer_y == 0`` is the top edge of the
viewport.
"""

import logging
import math
from dataclasses import dataclass, field

from .state import SliderState

logger = logging.getLogger(__name__)

MAJOR_TICK_COUNT = 10
MINOR_TICKS_PER_MAJOR = 5
# Strip is twice the viewport so it can scroll fully at both ends
HEADROOM_MULTIPLIER = 2

MAJOR_TICK_SIZE = (13, 2)
MINOR_TICK_SIZE = (8, 1)


@dataclass(frozen=True)
class ValueRange:
    """Closed numeric range with ``lower_bound < upper_bound``."""

    lower_bound: float
    upper_bound: float

    def __post_init__(self):
        if not (math.isfinite(self.lower_bound) and math.isfinite(self.upper_bound)):
            raise ValueError(
                f"Range bounds must be finite, got [{self.lower_bound}, {self.upper_bound}]"
            )
        if self.lower_bound >= self.upper_bound:
            raise ValueError(
                f"lower_bound must be below upper_bound, got "
                f"[{self.lower_bound}, {self.upper_bound}]"
            )

    @property
    def span(self) -> float:
        return self.upper_bound - self.lower_bound

    def clamp(self, value: float) -> float:
        """Saturate value at the range boundaries."""
        return min(max(value, self.lower_bound), self.upper_bound)

    def __contains__(self, value: float) -> bool:
        return self.lower_bound <= value <= self.upper_bound


@dataclass(frozen=True)
class TickMark:
    """
    One row of the ruler strip.

    Attributes:
        index: Row number from the top of the strip
        y: Top edge of the mark in viewport coordinates (offset applied)
        width: Mark length in pixels
        height: Mark thickness in pixels
        is_major: True for every ``MINOR_TICKS_PER_MAJOR``-th row
    """

    index: int
    y: float
    width: float
    height: float
    is_major: bool


@dataclass(frozen=True)
class TickLayout:
    """Derived drawing data for one render pass."""

    offset: float
    strip_height: float
    row_height: float
    ticks: list[TickMark] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.ticks


def tick_row_count() -> int:
    """Number of rows drawn in the strip (headroom included)."""
    return MAJOR_TICK_COUNT * MINOR_TICKS_PER_MAJOR * HEADROOM_MULTIPLIER


def _is_usable_height(viewport_height: float) -> bool:
    # NaN fails every comparison, so test for the positive case
    return math.isfinite(viewport_height) and viewport_height > 0


def compute_value_from_drag(
    pointer_y: float, viewport_height: float, value_range: ValueRange
) -> float | None:
    """
    Convert an absolute pointer position into a clamped value.

    Dragging toward the top increases the value.

    Args:
        pointer_y: Pointer distance from the top of the viewport
        viewport_height: Height of the viewport
        value_range: Range to map onto

    Returns:
        Clamped value, or None when the viewport has no usable height or
        the pointer position is NaN
    """
    if not _is_usable_height(viewport_height):
        return None
    fraction = 1 - (pointer_y / viewport_height)
    candidate = value_range.lower_bound + value_range.span * fraction
    if math.isnan(candidate):
        return None
    return value_range.clamp(candidate)


def compute_offset(value: float, viewport_height: float, value_range: ValueRange) -> float:
    """Vertical shift of the ruler strip for the given value."""
    return -viewport_height * (value - value_range.lower_bound) / value_range.span


def build_tick_layout(offset: float, viewport_height: float) -> TickLayout:
    """Lay out the ruler rows, evenly spaced over twice the viewport height."""
    rows = tick_row_count()
    strip_height = viewport_height * HEADROOM_MULTIPLIER
    row_height = strip_height / rows

    ticks = []
    for index in range(rows):
        is_major = index % MINOR_TICKS_PER_MAJOR == 0
        width, height = MAJOR_TICK_SIZE if is_major else MINOR_TICK_SIZE
        ticks.append(
            TickMark(
                index=index,
                y=offset + index * row_height,
                width=width,
                height=height,
                is_major=is_major,
            )
        )

    return TickLayout(
        offset=offset,
        strip_height=strip_height,
        row_height=row_height,
        ticks=ticks,
    )


class BoundedDialControl:
    """
    Drag-to-value control bound to a shared SliderState.

    The control never keeps its own copy of the value: it reads and writes
    ``state.value`` directly, so external writes show up on the next render.

    Usage:
        state = SliderState(100)
        dial = BoundedDialControl(state, ValueRange(50, 150))
        dial.on_drag_move(pointer_y=40, viewport_height=200)
        layout = dial.render(200)
    """

    def __init__(self, state: SliderState, value_range: ValueRange):
        """
        Initialize the control.

        Args:
            state: Host-owned value cell. Clamped into range if needed.
            value_range: Immutable bounds for this control instance.
        """
        if not isinstance(value_range, ValueRange):
            raise TypeError(f"value_range must be a ValueRange, got {type(value_range).__name__}")

        self.state = state
        self.value_range = value_range

        if state.value not in value_range:
            if math.isnan(state.value):
                clamped = value_range.lower_bound
            else:
                clamped = value_range.clamp(state.value)
            logger.debug(f"Initial value {state.value} outside range, clamped to {clamped}")
            state.value = clamped

    @property
    def value(self) -> float:
        return self.state.value

    def on_drag_move(self, pointer_y: float, viewport_height: float) -> None:
        """
        Apply one pointer-move event.

        Args:
            pointer_y: Pointer distance from the top of the viewport
            viewport_height: Current viewport height; non-positive or NaN is ignored
        """
        new_value = compute_value_from_drag(pointer_y, viewport_height, self.value_range)
        if new_value is None:
            logger.debug(
                f"Ignoring drag (pointer_y={pointer_y}, height={viewport_height})"
            )
            return
        self.state.value = new_value

    def step_button_increment(self, delta: float) -> None:
        """Shift the value by delta, saturating at the range ends. NaN is ignored."""
        candidate = self.state.value + delta
        if math.isnan(candidate):
            logger.debug(f"Ignoring step (delta={delta})")
            return
        self.state.value = self.value_range.clamp(candidate)

    def render(self, viewport_height: float) -> TickLayout:
        """
        Compute the ruler layout for the current value.

        Does not mutate state. A non-positive or non-finite viewport gives an
        empty layout.
        """
        if not _is_usable_height(viewport_height):
            return TickLayout(offset=0.0, strip_height=0.0, row_height=0.0)
        offset = compute_offset(self.state.value, viewport_height, self.value_range)
        return build_tick_layout(offset, viewport_height)
