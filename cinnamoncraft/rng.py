"""Deterministic xorshift random number generator."""

from __future__ import annotations

_MASK32 = 0xFFFFFFFF


class XorShiftRng:
    """A 32-bit xorshift generator with a reproducible sequence."""

    def __init__(self, seed: int = 1) -> None:
        state = seed & _MASK32
        if state == 0:
            raise ValueError("seed must be non-zero modulo 2**32")
        self._state = state

    def _next(self) -> int:
        state = self._state
        state ^= (state << 13) & _MASK32
        state ^= state >> 17
        state ^= (state << 5) & _MASK32
        self._state = state
        return state

    def random_uint(self, bound: int) -> int:
        """Return an integer in ``[0, bound)``."""
        if bound <= 0:
            raise ValueError("bound must be positive")
        return self._next() % bound

    def random_uchar(self) -> int:
        """Return a byte value in ``[0, 256)``."""
        return self.random_uint(256)