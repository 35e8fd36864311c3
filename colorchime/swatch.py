# swatch.py
"""
Palette swatch: one square per palette color in a single row, handy for
eyeballing what a color was matched against.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional

from PIL import Image, ImageDraw

from colorchime.palette import Color, Palette, palette as default_palette


def palette_swatch(
    palette: Optional[Palette] = None,
    cell: int = 32,
    extra_colors: Iterable[Color] = (),
) -> Image.Image:
    """Extra colors (e.g. the test color) come first, then the palette in order."""
    if cell <= 0:
        raise ValueError("cell must be positive")
    if palette is None:
        palette = default_palette()

    colors = list(extra_colors) + [entry.color for entry in palette]
    img = Image.new("RGB", (cell * max(1, len(colors)), cell))
    draw = ImageDraw.Draw(img)
    for i, color in enumerate(colors):
        x0 = i * cell
        draw.rectangle([x0, 0, x0 + cell - 1, cell - 1], fill=tuple(color))
    return img


def make_palette_swatch(
    output_path: str | Path = "output/palette_swatch.png",
    palette: Optional[Palette] = None,
    cell: int = 32,
    extra_colors: Iterable[Color] = (),
) -> Path:
    """Write the swatch as PNG (lossless, so cells keep exact RGB). Returns the path."""
    p = Path(output_path)
    p.parent.mkdir(parents=True, exist_ok=True)
    palette_swatch(palette, cell, extra_colors).save(p, format="PNG")
    return p
