"""Scene that turns mouse presses and drags into point notifications."""

from __future__ import annotations

import enum
from typing import Callable

from shapeboard.figures import Figure

PointListener = Callable[[float, float], None]


class MouseButton(enum.Enum):
    """Mouse buttons the scene distinguishes."""

    LEFT = "left"
    RIGHT = "right"
    MIDDLE = "middle"


class DrawingScene:
    """Holds the scene's items and reports left-button presses and drags.

    A left-button press reports its position and starts a drag; while the
    drag lasts every move is reported too. Releasing the left button ends it.
    """

    def __init__(self) -> None:
        self.items: list[Figure] = []
        self._listeners: list[PointListener] = []
        self._held = False

    def connect(self, callback: PointListener) -> None:
        """Call ``callback(x, y)`` for every reported position."""
        self._listeners.append(callback)

    def press(self, button: MouseButton | str, x: float, y: float) -> None:
        if MouseButton(button) is MouseButton.LEFT:
            self._held = True
            self._emit(x, y)

    def release(self, button: MouseButton | str) -> None:
        if MouseButton(button) is MouseButton.LEFT:
            self._held = False

    def move(self, x: float, y: float) -> None:
        if self._held:
            self._emit(x, y)

    def _emit(self, x: float, y: float) -> None:
        for listener in list(self._listeners):
            listener(x, y)