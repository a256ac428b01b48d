"""
Shared slider state.

A single mutable value owned by the host screen and handed by reference to
the controls that read or write it.
"""

import logging
from typing import Callable

logger = logging.getLogger(__name__)


class SliderState:
    """
    Mutable value cell shared between a host and its controls.

    Every holder sees writes immediately. Observers registered with ``bind``
    are called synchronously with the new value whenever it changes.

    Usage:
        state = SliderState(100)
        state.bind(lambda value: print(value))
        state.value = 120
    """

    def __init__(self, value: float = 0.0):
        self._value = float(value)
        self._observers: list[Callable[[float], None]] = []

    @property
    def value(self) -> float:
        return self._value

    @value.setter
    def value(self, new_value: float) -> None:
        new_value = float(new_value)
        if new_value == self._value:
            return
        self._value = new_value
        for callback in list(self._observers):
            callback(new_value)

    def bind(self, callback: Callable[[float], None]) -> None:
        """Register a callback invoked with the new value on every change."""
        if callback not in self._observers:
            self._observers.append(callback)

    def unbind(self, callback: Callable[[float], None]) -> None:
        """Remove a previously registered callback."""
        if callback in self._observers:
            self._observers.remove(callback)

    def __repr__(self) -> str:
        return f"SliderState(value={self._value!r})"
