"""Tessellation strategies: which tile variant goes in each grid cell."""

from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np

from tile_mosaic.rng import PseudoRandomSource
from tile_mosaic.variants import VARIANT_COUNT

GRID_SIZE = 8  # tiles per side of the mosaic

# Hand-authored layout; values are variant indices (see tile_mosaic.variants).
ORIGINAL_PATTERN = np.array(
    [
        [0, 1, 5, 4, 5, 6, 0, 3],
        [1, 2, 6, 5, 6, 7, 3, 2],
        [0, 1, 0, 1, 0, 1, 0, 1],
        [1, 2, 3, 0, 3, 0, 3, 0],
        [5, 6, 0, 3, 0, 1, 5, 4],
        [6, 7, 3, 2, 1, 2, 6, 5],
        [0, 1, 0, 1, 0, 1, 0, 1],
        [3, 0, 3, 0, 1, 2, 3, 0],
    ],
    dtype=np.uint8,
)
ORIGINAL_PATTERN.setflags(write=False)

LAYOUTS = ("original", "random")


def _check_cell(row: int, col: int) -> None:
    if not (0 <= row < GRID_SIZE and 0 <= col < GRID_SIZE):
        raise IndexError(
            f"Cell ({row}, {col}) outside the {GRID_SIZE}x{GRID_SIZE} grid"
        )


class TessellationStrategy(ABC):
    """Maps a grid cell ``(row, col)`` to a variant index in ``[0, 7]``."""

    name: str

    @abstractmethod
    def variant_for(self, row: int, col: int) -> int:
        ...


class FixedStrategy(TessellationStrategy):
    """Look the variant up in a fixed 8x8 pattern matrix."""

    name = "original"

    def __init__(self, pattern: np.ndarray = ORIGINAL_PATTERN) -> None:
        pattern = np.asarray(pattern)
        if pattern.shape != (GRID_SIZE, GRID_SIZE):
            raise ValueError(
                f"Pattern must be {GRID_SIZE}x{GRID_SIZE}, got {pattern.shape}"
            )
        if pattern.min() < 0 or pattern.max() >= VARIANT_COUNT:
            raise ValueError(f"Pattern values must lie in [0, {VARIANT_COUNT - 1}]")
        self.pattern = np.array(pattern, copy=True)
        self.pattern.setflags(write=False)

    def variant_for(self, row: int, col: int) -> int:
        _check_cell(row, col)
        return int(self.pattern[row, col])


class RandomStrategy(TessellationStrategy):
    """Draw every cell's variant independently and uniformly.

    The cell coordinates are validated but otherwise ignored; each call is
    one draw from the shared :class:`PseudoRandomSource`.
    """

    name = "random"

    def __init__(
        self,
        rng: PseudoRandomSource,
        variant_count: int = VARIANT_COUNT,
    ) -> None:
        if not 1 <= variant_count <= VARIANT_COUNT:
            raise ValueError(f"variant_count must lie in [1, {VARIANT_COUNT}]")
        self.rng = rng
        self.variant_count = variant_count

    def variant_for(self, row: int, col: int) -> int:
        _check_cell(row, col)
        return self.rng.next_in_range(0, self.variant_count - 1)


def make_strategy(name: str, rng: PseudoRandomSource) -> TessellationStrategy:
    """Build the strategy for layout *name* (one of :data:`LAYOUTS`)."""
    if name == "original":
        return FixedStrategy()
    if name == "random":
        return RandomStrategy(rng)
    raise ValueError(f"Unknown layout {name!r}. Choose from: {', '.join(LAYOUTS)}")
