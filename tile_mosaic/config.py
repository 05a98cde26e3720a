"""Centralised configuration via a frozen dataclass."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

# Sage green shown between tiles and before any tile is drawn.
BACKGROUND_COLOR: tuple[int, int, int, int] = (143, 158, 104, 255)


@dataclass(frozen=True)
class MosaicConfig:
    """All tuneable parameters for a mosaic run.

    Attributes:
        layout:         Tessellation layout - "original" or "random".
        seed:           Seed for the random layout (None = seeded from the clock).
        background:     RGBA fill colour of a freshly allocated mosaic.
        pixel_upscale:  Each mosaic pixel becomes n x n in the exported image.
        output_format:  Image format for saved files.
        output_dir:     Folder for results.
        save_variants:  Also export a contact sheet of the eight tile variants.
    """

    # Layout
    layout: str = "original"
    seed: int | None = None

    # Composition
    background: tuple[int, int, int, int] = BACKGROUND_COLOR

    # Output
    pixel_upscale: int = 1
    output_format: str = "png"
    output_dir: Path = field(default_factory=lambda: Path("output"))
    save_variants: bool = False

    SUPPORTED_EXTENSIONS: frozenset[str] = frozenset(
        {".png", ".bmp", ".gif", ".jpg", ".jpeg", ".tiff", ".tif", ".webp"}
    )
