from __future__ import annotations

from dataclasses import dataclass, field
from time import monotonic
from typing import Callable, Dict, Tuple


@dataclass(slots=True)
class MouseThrottle:
    """Drops presses that repeat too quickly on the same spot.

    A press on the same button within ``min_interval`` seconds and
    ``min_distance`` pixels of the previous one is rejected, which keeps a
    double click from selecting and immediately deselecting a tile.
    """

    min_interval: float = 0.15
    min_distance: float = 6.0
    clock: Callable[[], float] | None = field(default=None, repr=False)

    _clock: Callable[[], float] = field(init=False, repr=False)
    _last_press: Dict[int, Tuple[float, float, float]] = field(init=False, repr=False)
    _block_until: float = field(init=False, default=0.0, repr=False)
    _sequence: int = field(init=False, default=0, repr=False)

    def __post_init__(self) -> None:
        self._clock = self.clock or monotonic
        self._last_press = {}
        self.min_interval = max(0.0, float(self.min_interval))
        self.min_distance = max(0.0, float(self.min_distance))

    def allow(self, x: float, y: float, button: int) -> bool:
        now = self._clock()
        if now < self._block_until:
            return False
        last = self._last_press.get(button)
        if last is not None:
            last_time, last_x, last_y = last
            if (now - last_time) < self.min_interval:
                dx = x - last_x
                dy = y - last_y
                if dx * dx + dy * dy <= self.min_distance * self.min_distance:
                    return False
        self._last_press[button] = (now, x, y)
        self._sequence += 1
        return True

    def block(self, duration: float) -> None:
        """Reject every press for the next ``duration`` seconds."""
        if duration <= 0.0:
            return
        self._block_until = max(self._block_until, self._clock() + float(duration))

    def reset(self) -> None:
        self._last_press.clear()
        self._block_until = 0.0

    @property
    def last_sequence(self) -> int | None:
        return self._sequence or None
