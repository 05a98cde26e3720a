#!/usr/bin/env python3
"""
main.py — Quick-start entry point.

    python main.py generate my_tile.png
    python main.py generate my_tile.png --layout random --seed 7

Or use the module directly:

    python -m tile_mosaic.cli variants my_tile.png
"""

from tile_mosaic.cli import app

if __name__ == "__main__":
    app()
