"""Deterministic pseudo-random generator for the animation engine.

Every randomised choice in the engine is routed through a single
:class:`Generator` instance so that a seed fully determines the sequence of
frames.  The generator is a 32-bit linear congruential generator using the
classic ``1103515245 * s + 12345`` recurrence; only the upper 16 bits of the
state are exposed because the low bits of an LCG cycle with short periods.
"""

from __future__ import annotations

import math


MULTIPLIER = 1103515245
INCREMENT = 12345
STATE_MASK = 0xFFFFFFFF


class Generator:
    """Seeded source of reproducible floats and integers."""

    def __init__(self, seed: int) -> None:
        self._state = int(seed) & STATE_MASK

    @property
    def state(self) -> int:
        """Return the current 32-bit internal state."""

        return self._state

    def next(self) -> float:
        """Advance the state and return a float in ``[0, 1)``."""

        self._state = (self._state * MULTIPLIER + INCREMENT) & STATE_MASK
        return (self._state >> 16) / 65536

    def next_int(self, lo: int, hi: int) -> int:
        """Return an integer in the inclusive range ``[lo, hi]``.

        Raises:
            ValueError: If ``lo`` is greater than ``hi``.
        """

        if lo > hi:
            raise ValueError(f"Empty range: {lo} > {hi}")
        return math.floor(self.next() * (hi - lo + 1)) + lo


__all__ = ["Generator"]
