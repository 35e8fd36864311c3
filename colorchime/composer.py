# composer.py
"""
Turn colors into glockenspiel notes.

Flow per color:
  classify (nearest palette color) -> dominant channels -> glockenspiel note
  -> ToneOutput -> pause before the next color

play_tour() runs the fixed test color first, then every palette color in order.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple

from colorchime.classifier import closest_with_distance
from colorchime.dominance import DominantChannels, dominant_channels
from colorchime.errors import ToneOutputError, UnmappedColorError
from colorchime.palette import Color, Palette, PaletteEntry, palette as default_palette
from colorchime.synth.glockenspiel import ToneStep, play_glockenspiel
from colorchime.tone_output import ToneOutput, sleep_ms

logger = logging.getLogger(__name__)

# ===== TOUR DEFAULTS (EDIT HERE) =====
TEST_COLOR = Color(128, 130, 135)
COLOR_PAUSE_MS = 1500  # gap between colors

Sleeper = Callable[[int], None]


@dataclass
class ColorReport:
    color: Color
    match: PaletteEntry
    distance: float
    dominant: DominantChannels = ()
    steps: List[ToneStep] = field(default_factory=list)
    played: bool = False
    error: Optional[str] = None


def describe_match(color: Color, match: PaletteEntry) -> str:
    r, g, b = color
    mr, mg, mb = match.color
    return f"Color RGB ({r}, {g}, {b}) is closest to {match.name} with RGB ({mr}, {mg}, {mb})"


def describe_note(frequency: int, dominant: DominantChannels) -> str:
    return (f"Playing sound for frequency: {frequency} Hz "
            f"with emphasis on {', '.join(dominant)} component(s).")


def process_color(
    color: Color,
    output: ToneOutput,
    palette: Optional[Palette] = None,
    sleep: Sleeper = sleep_ms,
    pause_ms: int = COLOR_PAUSE_MS,
) -> ColorReport:
    """
    Classify one color and play its note.

    A palette color without a frequency is reported and skipped; a failing
    tone output aborts only this color. EmptyPaletteError propagates.
    """
    if palette is None:
        palette = default_palette()
    color = Color.checked(*color)

    match, distance = closest_with_distance(color, palette)
    report = ColorReport(color=color, match=match, distance=distance)

    try:
        frequency = palette.frequency_for(match.name)
    except UnmappedColorError as e:
        print(f"No sound mapping exists for color {match.name}.")
        logger.warning("Skipping synthesis: %s", e)
        report.error = str(e)
    else:
        print(describe_match(color, match))
        report.dominant = dominant_channels(color)
        print(describe_note(frequency, report.dominant))
        try:
            report.steps = play_glockenspiel(frequency, report.dominant, output, sleep)
            report.played = True
        except ToneOutputError as e:
            logger.error("Tone output failed for %s: %s", match.name, e)
            report.steps = e.steps
            report.error = str(e)

    sleep(pause_ms)
    return report


def tour_colors(test_color: Color, palette: Palette) -> List[Color]:
    return [test_color] + [entry.color for entry in palette]


def play_tour(
    output: ToneOutput,
    test_color: Color = TEST_COLOR,
    palette: Optional[Palette] = None,
    sleep: Sleeper = sleep_ms,
) -> List[ColorReport]:
    if palette is None:
        palette = default_palette()
    reports = []
    for color in tour_colors(test_color, palette):
        reports.append(process_color(color, output, palette=palette, sleep=sleep))
    failed = [r.match.name for r in reports if not r.played]
    if failed:
        logger.warning("%d of %d colors not played: %s", len(failed), len(reports), ", ".join(failed))
    return reports


def summarize(reports: List[ColorReport]) -> Tuple[int, int]:
    """(played, total) over a tour."""
    return sum(1 for r in reports if r.played), len(reports)
