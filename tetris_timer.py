"""Wall-clock gate for automatic drops"""
import time
from typing import Callable


class GameTimer:
    def __init__(self, timeout_sec: float, clock: Callable[[], float] = time.monotonic):
        self.timeout_sec = timeout_sec
        self.clock = clock
        self._last_tick = clock()

    def tick(self) -> bool:
        """Return True (and restart the interval) once timeout_sec has elapsed."""
        now = self.clock()
        fired = now - self._last_tick >= self.timeout_sec
        if fired:
            self._last_tick = now
        return fired
