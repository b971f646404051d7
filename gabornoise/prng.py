"""A tiny multiplicative 32-bit pseudo-random number generator."""

from __future__ import annotations

import math

UINT_MAX = 0xFFFFFFFF
_MULTIPLIER = 3039177861


class PseudoRandomNumberGenerator:
    """Multiplicative congruential generator on unsigned 32-bit integers."""

    def __init__(self, seed: int = 0) -> None:
        self.state = int(seed) & UINT_MAX

    def next(self) -> int:
        """Advance the state and return it."""
        self.state = (self.state * _MULTIPLIER) & UINT_MAX
        return self.state

    def uniform_0_1(self) -> float:
        """Uniform number in [0, 1]."""
        return self.next() / UINT_MAX

    def uniform(self, low: float, high: float) -> float:
        """Uniform number between ``low`` and ``high``."""
        return low + self.uniform_0_1() * (high - low)

    def poisson(self, mean: float) -> int:
        """Poisson-distributed count with the given mean (Knuth's method)."""
        threshold = math.exp(-mean)
        count = 0
        t = self.uniform_0_1()
        while t > threshold:
            count += 1
            t *= self.uniform_0_1()
        return count