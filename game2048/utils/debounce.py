"""Drop key presses that follow the last accepted one too closely."""

import time
from typing import Callable


class KeyDebouncer:
    """
    Accept at most one key press per time window.

    A held key fires repeated events; only the first one within ``delay`` seconds is turned into a move.

    Parameters
    ----------
    delay : float
        Minimum time, in seconds, between two accepted presses.
    clock : Callable[[], float], optional
        Source of the current time, ``time.monotonic`` by default.
    """

    def __init__(self, delay: float, clock: Callable[[], float] = time.monotonic):
        self.delay = delay
        self._clock = clock
        self._last: float | None = None

    def accept(self) -> bool:
        """Record and accept the press when the window has elapsed, otherwise reject it."""
        now = self._clock()
        if self._last is not None and now - self._last <= self.delay:
            return False
        self._last = now
        return True
