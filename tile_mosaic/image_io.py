"""Tile loading, mosaic export, fitted display and variant contact sheets."""

from __future__ import annotations

from pathlib import Path

import numpy as np
from PIL import Image, ImageDraw, ImageFont

from tile_mosaic.variants import VARIANT_NAMES, TileVariantSet


def _to_image(array: np.ndarray) -> Image.Image:
    array = np.asarray(array, dtype=np.uint8)
    if array.ndim == 3 and array.shape[2] == 1:
        array = array[:, :, 0]
    return Image.fromarray(array)


def tile_from_image(img: Image.Image) -> np.ndarray:
    """Convert an in-memory image to an (H, W, 4) uint8 RGBA tile."""
    return np.array(img.convert("RGBA"), dtype=np.uint8)


def load_tile(path: str | Path) -> np.ndarray:
    """Load the source tile from disk.

    Returns:
        (H, W, 4) uint8 RGBA array.
    """
    with Image.open(path) as img:
        return tile_from_image(img)


def save_mosaic(
    mosaic: np.ndarray,
    path: str | Path,
    pixel_upscale: int = 1,
) -> None:
    """Save a mosaic, optionally nearest-neighbour upscaled.

    The format follows the file suffix. Formats without alpha (JPEG, BMP)
    receive an RGB copy.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    img = _to_image(mosaic)
    if pixel_upscale > 1:
        h, w = mosaic.shape[:2]
        img = img.resize((w * pixel_upscale, h * pixel_upscale), Image.NEAREST)
    if img.mode == "RGBA" and path.suffix.lower() in {".jpg", ".jpeg", ".bmp"}:
        img = img.convert("RGB")
    img.save(path)


def fit_rect(
    src_width: int,
    src_height: int,
    dst_width: int,
    dst_height: int,
    allow_upscale: bool = False,
) -> tuple[int, int, int, int]:
    """Place a source image inside a destination region.

    The image is scaled uniformly so its longest side matches the shorter
    side of the region (never enlarged unless *allow_upscale*) and centred
    in the remaining space.

    Returns:
        ``(x, y, width, height)`` of the placed image.
    """
    side = min(dst_width, dst_height)
    if not allow_upscale:
        side = min(side, max(src_width, src_height))

    if src_width >= src_height:
        w = side
        h = max(1, round(src_height * side / src_width))
    else:
        h = side
        w = max(1, round(src_width * side / src_height))

    x = max(0, dst_width - w) // 2
    y = max(0, dst_height - h) // 2
    return x, y, w, h


def render_fitted(
    mosaic: np.ndarray,
    dst_width: int,
    dst_height: int,
    allow_upscale: bool = False,
) -> Image.Image:
    """Draw *mosaic* fitted and centred on a white canvas of the given size."""
    img = _to_image(mosaic).convert("RGBA")
    x, y, w, h = fit_rect(img.width, img.height, dst_width, dst_height, allow_upscale)

    canvas = Image.new("RGBA", (dst_width, dst_height), (255, 255, 255, 255))
    if (w, h) != img.size:
        img = img.resize((w, h), Image.LANCZOS)
    canvas.alpha_composite(img, (x, y))
    return canvas


def make_variant_sheet(
    variants: TileVariantSet,
    output_path: str | Path,
    pixel_upscale: int = 4,
) -> None:
    """Create a labelled 4x2 contact sheet of the eight tile variants."""
    panel_w = variants.width * pixel_upscale
    panel_h = variants.height * pixel_upscale
    label_height = 28
    gap = 8
    cols, rows = 4, 2

    total_w = cols * panel_w + (cols - 1) * gap
    total_h = rows * (panel_h + label_height) + (rows - 1) * gap

    canvas = Image.new("RGBA", (total_w, total_h), (30, 30, 30, 255))
    draw = ImageDraw.Draw(canvas)

    try:
        font = ImageFont.truetype(
            "/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf", 14,
        )
    except OSError:
        font = ImageFont.load_default()

    for i, variant in enumerate(variants):
        x = (i % cols) * (panel_w + gap)
        y = (i // cols) * (panel_h + label_height + gap)
        panel = _to_image(variant).convert("RGBA").resize(
            (panel_w, panel_h), Image.NEAREST,
        )
        canvas.alpha_composite(panel, (x, y + label_height))

        label = f"{i}: {VARIANT_NAMES[i]}"
        bbox = draw.textbbox((0, 0), label, font=font)
        text_w = bbox[2] - bbox[0]
        draw.text((x + (panel_w - text_w) // 2, y + 6), label,
                  fill=(220, 220, 220), font=font)

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    canvas.save(output_path)
