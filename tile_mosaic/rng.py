"""Seeded uniform-integer source for the random layout."""

from __future__ import annotations

import logging
import threading
import time

import numpy as np

logger = logging.getLogger(__name__)


def clock_seed() -> int:
    """Second-granularity wall-clock seed."""
    return int(time.time())


class PseudoRandomSource:
    """Uniform integer draws from an explicitly owned, explicitly seeded generator.

    Draws mutate generator state, so they are serialised with a lock; a
    composer shared between threads cannot corrupt the sequence.

    Args:
        seed: Initial seed. ``None`` seeds from the wall clock.
    """

    def __init__(self, seed: int | None = None) -> None:
        self._lock = threading.Lock()
        self._rng: np.random.Generator | None = None
        self.initial_seed: int | None = None
        self.seed(clock_seed() if seed is None else seed)

    def seed(self, value: int) -> None:
        """(Re)initialise the generator state from *value*."""
        if value < 0:
            raise ValueError(f"Seed must be non-negative, got {value}")
        with self._lock:
            self._rng = np.random.default_rng(value)
            self.initial_seed = value
        logger.debug("PRNG seeded with %d", value)

    def next_in_range(self, low: int, high: int) -> int:
        """Return an integer drawn uniformly from ``[low, high]`` (inclusive)."""
        if low > high:
            raise ValueError(f"Empty range [{low}, {high}]")
        with self._lock:
            if self._rng is None:
                raise RuntimeError("PseudoRandomSource drawn before seeding")
            return int(self._rng.integers(low, high, endpoint=True))
