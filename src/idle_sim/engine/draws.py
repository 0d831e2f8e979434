"""Buffered random draws for the scalar trial loops.

Calling ``Generator.random()`` / ``Generator.integers()`` once per draw costs
microseconds each, which dominates a trial that makes tens of thousands of
draws.  ``DrawStream`` pulls uniforms from the generator in blocks and serves
them one at a time; integer draws are derived from the same uniforms.

The sequence is a pure function of the generator state, so a seeded
generator gives a reproducible trial.
"""

from __future__ import annotations

import numpy as np

BLOCK_SIZE = 4096


class DrawStream:
    """Sequential uniform and integer draws backed by a NumPy generator.

    Parameters
    ----------
    rng : numpy.random.Generator
        Owned exclusively by one trial.
    block_size : int
        Number of uniforms fetched per refill.
    """

    def __init__(self, rng: np.random.Generator, block_size: int = BLOCK_SIZE) -> None:
        self._rng = rng
        self._block_size = block_size
        self._buffer: list[float] = []
        self._pos = 0

    def uniform(self) -> float:
        """Next value in ``[0, 1)``."""
        if self._pos >= len(self._buffer):
            self._buffer = self._rng.random(self._block_size).tolist()
            self._pos = 0
        value = self._buffer[self._pos]
        self._pos += 1
        return value

    def integer(self, low: int, high: int) -> int:
        """Next integer in ``[low, high]`` (both inclusive)."""
        if low >= high:
            # Degenerate range still consumes a draw to keep the sequence aligned.
            self.uniform()
            return low
        return min(low + int(self.uniform() * (high - low + 1)), high)
