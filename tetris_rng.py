"""Seeded LCG draw source for piece selection"""
import time
from typing import Optional


class LCGRandom:
    """Callable as draw(n) -> int uniform in [0, n).

    Same LCG step as the classic console randomizer; the 15-bit output is
    rejection-sampled so every piece is equally likely.
    """
    RANGE = 0x8000

    def __init__(self, seed: Optional[int] = None):
        if seed is None:
            seed = time.monotonic_ns()
        self.state = seed & 0xFFFFFFFF

    def _lcg_next(self):
        self.state = (self.state * 0x41C64E6D + 0x3039) & 0xFFFFFFFF
        return self.state

    def _rand(self):
        return (self._lcg_next() >> 16) & 0x7FFF

    def __call__(self, n: int) -> int:
        if not 0 < n <= self.RANGE:
            raise ValueError(f"cannot draw from range of size {n}")
        limit = self.RANGE - self.RANGE % n
        v = self._rand()
        while v >= limit:
            v = self._rand()
        return v % n
