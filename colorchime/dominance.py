# dominance.py
from __future__ import annotations

from typing import Tuple

from colorchime.palette import Color

DOMINANCE_THRESHOLD = 30.0  # percent of R+G+B
CHANNELS = ("Red", "Green", "Blue")

DominantChannels = Tuple[str, ...]


def channel_percentages(color: Color) -> Tuple[float, float, float]:
    """Share of each channel in R+G+B, as percentages. Black gives all zeros."""
    r, g, b = color
    total = r + g + b
    if total == 0:
        return 0.0, 0.0, 0.0
    return r / total * 100, g / total * 100, b / total * 100


def dominant_channels(color: Color) -> DominantChannels:
    pcts = channel_percentages(color)
    return tuple(name for name, pct in zip(CHANNELS, pcts) if pct > DOMINANCE_THRESHOLD)
