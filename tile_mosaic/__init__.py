"""
Tile Mosaic Generator
=====================

Assemble an 8x8 mosaic from one square tile and its eight
rotation / mirror variants. Ships two layouts:

- **original** (a fixed, hand-authored pattern)
- **random** (every cell drawn uniformly from a seeded generator)
"""

__version__ = "1.0.0"

from tile_mosaic.composer import MosaicComposer
from tile_mosaic.config import BACKGROUND_COLOR, MosaicConfig
from tile_mosaic.image_io import (
    fit_rect,
    load_tile,
    make_variant_sheet,
    render_fitted,
    save_mosaic,
    tile_from_image,
)
from tile_mosaic.rng import PseudoRandomSource
from tile_mosaic.strategy import (
    GRID_SIZE,
    LAYOUTS,
    ORIGINAL_PATTERN,
    FixedStrategy,
    RandomStrategy,
    TessellationStrategy,
    make_strategy,
)
from tile_mosaic.variants import (
    VARIANT_COUNT,
    TileVariantSet,
    inverse_index,
    rotate_flip,
)

__all__ = [
    "BACKGROUND_COLOR",
    "GRID_SIZE",
    "LAYOUTS",
    "ORIGINAL_PATTERN",
    "VARIANT_COUNT",
    "FixedStrategy",
    "MosaicComposer",
    "MosaicConfig",
    "PseudoRandomSource",
    "RandomStrategy",
    "TessellationStrategy",
    "TileVariantSet",
    "fit_rect",
    "inverse_index",
    "load_tile",
    "make_strategy",
    "make_variant_sheet",
    "render_fitted",
    "rotate_flip",
    "save_mosaic",
    "tile_from_image",
]
