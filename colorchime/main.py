# main.py
"""
Bare-bones entry point: draw the palette swatch, then play the test color
and the whole palette. No CLI flags. Edit TEST_COLOR in composer.py to try
another color.

Flow:
  swatch.make_palette_swatch -> composer.play_tour -> SpeakerToneOutput (blocking beeps)
"""

import logging

from colorchime.composer import TEST_COLOR, play_tour, summarize
from colorchime.swatch import make_palette_swatch
from colorchime.tone_output import SpeakerToneOutput

# ===== EDIT HERE (hard-coded constants) =====
SWATCH_PATH = "output/palette_swatch.png"  # test color first, then the palette


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
    swatch = make_palette_swatch(SWATCH_PATH, extra_colors=[TEST_COLOR])
    print(f"Wrote palette swatch to {swatch}")
    reports = play_tour(SpeakerToneOutput(), test_color=TEST_COLOR)
    played, total = summarize(reports)
    print(f"Done. Played {played}/{total} colors.")


if __name__ == "__main__":
    main()
