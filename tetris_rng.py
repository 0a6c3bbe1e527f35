"""LCG randomizer used by the brick catalog"""
import time
from typing import Optional


class LCGRandom:
    def __init__(self, seed: Optional[int] = None):
        if seed is None:
            seed = time.time_ns() & 0xFFFFFFFF
        self.state = seed & 0xFFFFFFFF

    def _lcg_next(self):
        self.state = (self.state * 0x41C64E6D + 0x3039) & 0xFFFFFFFF
        return self.state

    def _rand(self):
        return (self._lcg_next() >> 16) & 0x7FFF

    def randrange(self, n: int) -> int:
        if n <= 0:
            raise ValueError(f"empty range for randrange({n})")
        return self._rand() % n
