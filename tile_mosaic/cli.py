"""Rich command-line interface powered by Typer."""

from __future__ import annotations

import logging
import time
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel

from tile_mosaic import __version__
from tile_mosaic.composer import MosaicComposer
from tile_mosaic.config import MosaicConfig
from tile_mosaic.image_io import (
    load_tile,
    make_variant_sheet,
    render_fitted,
    save_mosaic,
)
from tile_mosaic.rng import PseudoRandomSource
from tile_mosaic.strategy import LAYOUTS
from tile_mosaic.variants import TileVariantSet

app = typer.Typer(
    name="tile-mosaic",
    help="Tile an 8x8 mosaic from the rotations and mirrors of one square tile.",
    add_completion=False,
    rich_markup_mode="rich",
)
console = Console()


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False, markup=True)],
    )


def _parse_size(text: str) -> tuple[int, int]:
    try:
        w, h = (int(part) for part in text.lower().split("x"))
    except ValueError:
        raise typer.BadParameter(f"expected WIDTHxHEIGHT, got {text!r}") from None
    if w <= 0 or h <= 0:
        raise typer.BadParameter(f"size must be positive, got {text!r}")
    return w, h


def _load_variants(tile: Path) -> TileVariantSet:
    try:
        return TileVariantSet(load_tile(tile))
    except (OSError, ValueError) as exc:
        console.print(f"[red]Cannot use tile {tile}: {exc}[/red]")
        raise typer.Exit(1) from exc


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"tile-mosaic {__version__}")
        raise typer.Exit()


# Defaults come from MosaicConfig - single source of truth
_DEFAULTS = MosaicConfig()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """Tile an 8x8 mosaic from the rotations and mirrors of one square tile."""


# -- generate command --------------------------------------------------

@app.command()
def generate(
    tile: Path = typer.Argument(..., help="Square source tile image"),
    output: Path | None = typer.Option(
        None, "--output", "-o",
        help="Mosaic file (default: OUTPUT_DIR/<tile>_<layout>.png)",
    ),
    layout: str = typer.Option(
        _DEFAULTS.layout, "--layout", "-l", help="'original' or 'random'",
    ),
    seed: int | None = typer.Option(
        _DEFAULTS.seed, "--seed", "-s", min=0,
        help="Random layout seed (None = clock)",
    ),
    upscale: int = typer.Option(
        _DEFAULTS.pixel_upscale, "--upscale", "-u", help="Pixel upscale factor",
    ),
    save_variants: bool = typer.Option(
        _DEFAULTS.save_variants, "--variants/--no-variants",
        help="Also save a contact sheet of the eight variants",
    ),
    fit: str | None = typer.Option(
        None, "--fit", help="Also save a preview fitted into WIDTHxHEIGHT",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Generate one mosaic from TILE and save it."""
    _setup_logging(verbose)
    logger = logging.getLogger("tile_mosaic")

    if layout not in LAYOUTS:
        raise typer.BadParameter(
            f"unknown layout {layout!r}; choose from {', '.join(LAYOUTS)}",
            param_hint="--layout",
        )
    fit_size = _parse_size(fit) if fit else None

    cfg = MosaicConfig(
        layout=layout,
        seed=seed,
        pixel_upscale=upscale,
        save_variants=save_variants,
    )
    if output is None:
        output = cfg.output_dir / f"{tile.stem}_{layout}.{cfg.output_format}"

    if tile.suffix.lower() not in cfg.SUPPORTED_EXTENSIONS:
        logger.warning("Unrecognised tile extension %r, trying anyway", tile.suffix)

    t_total = time.perf_counter()
    tile_set = _load_variants(tile)
    logger.info("Tile: %dx%d from %s", tile_set.width, tile_set.height, tile)

    rng = PseudoRandomSource(cfg.seed)
    composer = MosaicComposer(tile_set, rng=rng, background=cfg.background)
    mosaic = composer.generate_layout(cfg.layout)

    try:
        save_mosaic(mosaic, output, cfg.pixel_upscale)
        if cfg.save_variants:
            sheet = output.with_name(f"{output.stem}_variants.png")
            make_variant_sheet(tile_set, sheet)
            logger.info("Variant sheet saved: %s", sheet)
        if fit_size is not None:
            preview = output.with_name(f"{output.stem}_preview.png")
            render_fitted(composer.current, *fit_size).save(preview)
            logger.info("Fitted preview saved: %s", preview)
    except (OSError, ValueError) as exc:
        console.print(f"[red]Cannot save to {output}: {exc}[/red]")
        raise typer.Exit(1) from exc

    h, w = mosaic.shape[:2]
    elapsed = time.perf_counter() - t_total
    console.print(Panel.fit(
        f"[bold]TILE MOSAIC[/bold]\n"
        f"Layout: {composer.active_layout}  |  Seed: {rng.initial_seed}\n"
        f"Tile: {tile_set.width}x{tile_set.height}  |  Mosaic: {w}x{h}\n"
        f"[green]✓[/green] {output}  [dim]time={elapsed:.2f}s[/dim]",
        border_style="cyan",
    ))


# -- variants command --------------------------------------------------

@app.command()
def variants(
    tile: Path = typer.Argument(..., help="Square source tile image"),
    output: Path = typer.Option(
        Path("output/variants.png"), "--output", "-o",
    ),
    upscale: int = typer.Option(4, "--upscale", "-u"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Save a labelled contact sheet of the eight variants of TILE."""
    _setup_logging(verbose)

    tile_set = _load_variants(tile)
    try:
        make_variant_sheet(tile_set, output, upscale)
    except (OSError, ValueError) as exc:
        console.print(f"[red]Cannot save to {output}: {exc}[/red]")
        raise typer.Exit(1) from exc

    console.print(f"[green]✓[/green] Saved to {output}")


if __name__ == "__main__":
    app()
