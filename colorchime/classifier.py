# classifier.py
"""
Nearest palette color under plain Euclidean RGB distance (not perceptual).
"""

from __future__ import annotations

import math
from typing import Iterable, Optional, Tuple

from colorchime.errors import EmptyPaletteError
from colorchime.palette import Color, PaletteEntry, palette as default_palette


def color_distance(c1: Color, c2: Color) -> float:
    dr = c1[0] - c2[0]
    dg = c1[1] - c2[1]
    db = c1[2] - c2[2]
    return math.sqrt(dr * dr + dg * dg + db * db)


def closest_with_distance(color: Color, palette: Iterable[PaletteEntry]) -> Tuple[PaletteEntry, float]:
    best = None
    min_distance = math.inf
    for entry in palette:
        d = color_distance(color, entry.color)
        # strict < keeps the earlier entry on ties
        if d < min_distance:
            min_distance = d
            best = entry
    if best is None:
        raise EmptyPaletteError("Cannot classify a color against an empty palette")
    return best, min_distance


def closest(color: Color, palette: Optional[Iterable[PaletteEntry]] = None) -> PaletteEntry:
    """
    Return the palette entry nearest to `color`.

    Entries are scanned in palette order; when two are equally close the one
    declared first wins.
    """
    if palette is None:
        palette = default_palette()
    return closest_with_distance(color, palette)[0]
