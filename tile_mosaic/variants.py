"""The eight rotation / mirror variants of a square tile (dihedral group D4).

Variant *i* rotates the tile clockwise by ``(i % 4) * 90`` degrees and then,
for ``i >= 4``, mirrors it horizontally. This is the rotate-then-flip order
most imaging APIs use when they enumerate their rotate/flip modes:

====  =====================
 0    identity
 1    rotate 90
 2    rotate 180
 3    rotate 270
 4    mirror
 5    rotate 90 + mirror      (transpose)
 6    rotate 180 + mirror     (vertical flip)
 7    rotate 270 + mirror     (transverse)
====  =====================
"""

from __future__ import annotations

from collections.abc import Iterator

import numpy as np

VARIANT_COUNT = 8

VARIANT_NAMES = (
    "identity",
    "rotate 90",
    "rotate 180",
    "rotate 270",
    "mirror",
    "rotate 90 + mirror",
    "rotate 180 + mirror",
    "rotate 270 + mirror",
)

# Rotations 90/270 undo each other; every other element is an involution.
_INVERSE = (0, 3, 2, 1, 4, 5, 6, 7)


def _check_index(index: int) -> None:
    if not 0 <= index < VARIANT_COUNT:
        raise IndexError(f"Variant index {index} outside [0, {VARIANT_COUNT - 1}]")


def rotate_flip(tile: np.ndarray, index: int) -> np.ndarray:
    """Apply dihedral element *index* to an (H, W, C) array.

    Returns a new contiguous array; *tile* is left untouched.
    """
    _check_index(index)
    out = np.rot90(tile, k=-(index % 4))  # negative k = clockwise
    if index >= 4:
        out = out[:, ::-1]
    return np.array(out, order="C")


def inverse_index(index: int) -> int:
    """Index of the element that undoes variant *index*."""
    _check_index(index)
    return _INVERSE[index]


class TileVariantSet:
    """Fixed, read-only sequence of the eight variants of one source tile.

    Args:
        tile: (H, W, C) uint8 array with ``H == W``.

    Raises:
        ValueError: If the tile is empty, not 3-D, not uint8, or not square.
    """

    def __init__(self, tile: np.ndarray) -> None:
        tile = np.asarray(tile)
        if tile.ndim != 3:
            raise ValueError(f"Tile must be an (H, W, C) array, got shape {tile.shape}")
        if tile.dtype != np.uint8:
            raise ValueError(f"Tile must be uint8, got {tile.dtype}")
        h, w = tile.shape[:2]
        if h == 0 or w == 0:
            raise ValueError("Tile is empty")
        if h != w:
            raise ValueError(f"Tile must be square, got {w}x{h}")

        variants = []
        for i in range(VARIANT_COUNT):
            v = rotate_flip(tile, i)
            v.setflags(write=False)
            variants.append(v)
        self._variants: tuple[np.ndarray, ...] = tuple(variants)

    def __len__(self) -> int:
        return len(self._variants)

    def __getitem__(self, index: int) -> np.ndarray:
        _check_index(index)
        return self._variants[index]

    def __iter__(self) -> Iterator[np.ndarray]:
        return iter(self._variants)

    @property
    def source(self) -> np.ndarray:
        return self._variants[0]

    @property
    def width(self) -> int:
        return self._variants[0].shape[1]

    @property
    def height(self) -> int:
        return self._variants[0].shape[0]

    @property
    def shape(self) -> tuple[int, ...]:
        return self._variants[0].shape
