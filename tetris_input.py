"""Press-and-hold detection: raw key codes -> (action, hold) events"""
import time
from typing import Callable, Dict, Hashable, Optional, Tuple

from tetris_config import CONFIG
from tetris_fsm import Action

Event = Tuple[Action, bool]


class KeyboardController:
    """
    A key counts as held when the same key arrives again within
    HOLD_MS of the previous poll (terminal or window auto-repeat).
    A plain press always emits; a held key emits once, on the poll where
    it turns into a hold, and its further repeats are swallowed.
    """
    def __init__(self, keymap: Dict[Hashable, Action], hold_timeout_ms: Optional[float] = None,
                 clock: Callable[[], float] = time.monotonic):
        self.keymap = dict(keymap)
        self.hold_timeout = (CONFIG["HOLD_MS"] if hold_timeout_ms is None else hold_timeout_ms) / 1000.0
        self.clock = clock
        self.prev_key = None
        self.last_call = clock()
        self.last_hold = False

    def _is_hold(self, key) -> bool:
        now = self.clock()
        hold = False
        if key != self.prev_key:
            self.prev_key = key
        else:
            hold = now - self.last_call <= self.hold_timeout
        self.last_call = now
        return hold

    def feed(self, key) -> Optional[Event]:
        """Feed one poll result (None when no key arrived)."""
        hold = self._is_hold(key)
        if key is None:
            return None
        emit = not hold or not self.last_hold
        self.last_hold = hold
        action = self.keymap.get(key)
        if action is None or not emit:
            return None
        return action, hold
