"""Composite tile variants into an 8x8 mosaic."""

from __future__ import annotations

import logging
import time

import numpy as np

from tile_mosaic.config import BACKGROUND_COLOR
from tile_mosaic.rng import PseudoRandomSource
from tile_mosaic.strategy import GRID_SIZE, TessellationStrategy, make_strategy
from tile_mosaic.variants import TileVariantSet

logger = logging.getLogger(__name__)


class MosaicComposer:
    """Owns the tile variants and the PRNG, and produces mosaic snapshots.

    Every call to :meth:`generate` allocates a brand-new read-only array; a
    mosaic handed to a display or export collaborator is never modified.

    Args:
        variants:   The eight variants of the source tile.
        rng:        Random source for the random layout (default: clock-seeded).
        background: RGBA fill colour, adapted by :func:`background_fill`.
    """

    def __init__(
        self,
        variants: TileVariantSet,
        rng: PseudoRandomSource | None = None,
        background: tuple[int, ...] = BACKGROUND_COLOR,
    ) -> None:
        self.variants = variants
        self.rng = rng if rng is not None else PseudoRandomSource()
        self.background = tuple(background)
        self._current: np.ndarray | None = None
        self._active_layout: str | None = None

    @property
    def current(self) -> np.ndarray | None:
        """The most recently generated mosaic (``None`` before the first)."""
        return self._current

    @property
    def active_layout(self) -> str | None:
        """Name of the layout that produced :attr:`current`."""
        return self._active_layout

    def is_active(self, layout: str) -> bool:
        return self._active_layout == layout

    def generate(self, strategy: TessellationStrategy) -> np.ndarray:
        """Compose a new mosaic using *strategy* and make it current.

        Returns:
            (8h, 8w, C) uint8 read-only array.
        """
        h, w, channels = self.variants.shape
        t0 = time.perf_counter()

        mosaic = np.empty((GRID_SIZE * h, GRID_SIZE * w, channels), dtype=np.uint8)
        mosaic[...] = background_fill(self.background, channels)

        # Row-major so a seeded random layout is reproducible.
        for row in range(GRID_SIZE):
            for col in range(GRID_SIZE):
                idx = strategy.variant_for(row, col)
                mosaic[row * h:(row + 1) * h, col * w:(col + 1) * w] = (
                    self.variants[idx]
                )

        mosaic.setflags(write=False)
        self._current = mosaic
        self._active_layout = strategy.name
        logger.info(
            "Generated %s mosaic %dx%d  (%.3f s)",
            strategy.name, GRID_SIZE * w, GRID_SIZE * h, time.perf_counter() - t0,
        )
        return mosaic

    def generate_layout(self, layout: str) -> np.ndarray:
        """Compose a new mosaic for the named layout ("original" or "random")."""
        return self.generate(make_strategy(layout, self.rng))


def background_fill(background: tuple[int, ...], channels: int) -> np.ndarray:
    """Per-pixel fill value for a tile with *channels* channels.

    Grey and grey+alpha tiles get the ITU-R 601 luma of the colour, the same
    weights Pillow uses for ``convert("L")``. Missing alpha is opaque.
    """
    rgb = (tuple(background) + (0, 0, 0))[:3]
    alpha = background[3] if len(background) > 3 else 255
    if channels in (1, 2):
        luma = (rgb[0] * 299 + rgb[1] * 587 + rgb[2] * 114) // 1000
        values: tuple[int, ...] = (luma, alpha)[:channels]
    else:
        values = (rgb + (alpha,) + (255,) * channels)[:channels]
    return np.asarray(values, dtype=np.uint8)
