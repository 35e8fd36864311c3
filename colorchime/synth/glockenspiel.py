# glockenspiel.py
"""
Glockenspiel note: a base tone wobbled by the color's dominant channels.

Flow per note:
  base Hz + dominant channels -> N eased modulation steps -> round + clamp
  -> ToneOutput.emit(freq, beep_ms) per step -> trailing pause

Each dominant channel adds a sine offset at its own harmonic of the step
position (Red=1, Green=2, Blue=3), scaled by MAX_WAVE_AMPLITUDE_HZ and the
easing envelope. Channels combine additively.
"""

from __future__ import annotations

import logging
import math
from typing import Callable, Iterable, List, NamedTuple, Optional

from colorchime.errors import InvalidStepCountError, ToneOutputError
from colorchime.synth.easing import ease

logger = logging.getLogger(__name__)

# ===== NOTE SHAPE DEFAULTS (EDIT HERE) =====
BEEP_DURATION_MS = 400        # length of each individual beep
WAVE_DURATION_MS = 300        # modulation window per cycle
WAVE_CYCLES = 1               # modulation cycles per note
MAX_WAVE_AMPLITUDE_HZ = 20.0  # peak frequency offset per channel
STEP_DURATION_MS = 50         # window slice per step -> 300 / 50 = 6 steps
NOTE_PAUSE_MS = 500           # silence after each note

# Device tone range (square-wave beep floor and ceiling)
TONE_MIN_HZ = 37
TONE_MAX_HZ = 32767

CHANNEL_HARMONICS = {
    "Red": 1,
    "Green": 2,
    "Blue": 3,
}


class ToneStep(NamedTuple):
    frequency_hz: int
    duration_ms: int


def clamp_tone_frequency(raw_hz: float) -> int:
    """Round to the nearest Hz, then clamp into the playable tone range."""
    hz = int(round(raw_hz))
    return max(TONE_MIN_HZ, min(hz, TONE_MAX_HZ))


def modulated_frequency(
    base_hz: float,
    dominant: Iterable[str],
    step: int,
    total_steps: int,
    max_amplitude: float = MAX_WAVE_AMPLITUDE_HZ,
) -> float:
    amp = ease(step, total_steps)
    freq = float(base_hz)
    for channel in dominant:
        k = CHANNEL_HARMONICS[channel]
        freq += max_amplitude * amp * math.sin((2 * math.pi * k * step) / total_steps)
    return freq


def synthesize(
    base_hz: int,
    dominant: Iterable[str],
    *,
    beep_ms: int = BEEP_DURATION_MS,
    wave_ms: int = WAVE_DURATION_MS,
    wave_cycles: int = WAVE_CYCLES,
    max_amplitude: float = MAX_WAVE_AMPLITUDE_HZ,
    step_ms: int = STEP_DURATION_MS,
) -> List[ToneStep]:
    """
    Build the tone steps for one note.

    Returns wave_cycles * (wave_ms // step_ms) steps, each lasting beep_ms.
    Raises InvalidStepCountError when the window holds fewer than 2 steps.
    """
    num_steps = wave_ms // step_ms if step_ms > 0 else 0
    if num_steps < 2:
        raise InvalidStepCountError(
            f"wave_ms={wave_ms} / step_ms={step_ms} gives {num_steps} steps; need at least 2"
        )

    dominant = tuple(dominant)
    unknown = [c for c in dominant if c not in CHANNEL_HARMONICS]
    if unknown:
        raise ValueError(f"Unknown channel(s): {unknown} (valid: {list(CHANNEL_HARMONICS)})")

    steps: List[ToneStep] = []
    for _cycle in range(wave_cycles):
        for step in range(num_steps):
            raw = modulated_frequency(base_hz, dominant, step, num_steps, max_amplitude)
            steps.append(ToneStep(clamp_tone_frequency(raw), beep_ms))
    return steps


def play_glockenspiel(
    base_hz: int,
    dominant: Iterable[str],
    output,
    sleep: Callable[[int], None],
    *,
    pause_ms: int = NOTE_PAUSE_MS,
    should_stop: Optional[Callable[[], bool]] = None,
    **shape,
) -> List[ToneStep]:
    """
    Synthesize one note and hand every step to `output.emit` in order,
    then sleep `pause_ms` to separate it from the next note.

    `shape` takes the keyword overrides of synthesize(). `should_stop` is
    checked before each step; once it returns True the rest of the note,
    pause included, is dropped. Returns the steps actually emitted.

    Any failure raised by `output.emit` surfaces as ToneOutputError carrying
    the steps emitted before it.
    """
    steps = synthesize(base_hz, dominant, **shape)
    played: List[ToneStep] = []
    for tone in steps:
        if should_stop is not None and should_stop():
            logger.info("Note at %s Hz stopped after %d of %d steps", base_hz, len(played), len(steps))
            return played
        logger.debug("beep %d Hz for %d ms", tone.frequency_hz, tone.duration_ms)
        try:
            output.emit(tone.frequency_hz, tone.duration_ms)
        except ToneOutputError as e:
            e.steps = list(played)
            raise
        except Exception as e:
            raise ToneOutputError(
                f"emit({tone.frequency_hz}, {tone.duration_ms}) failed: {e!r}", steps=played
            ) from e
        played.append(tone)

    sleep(pause_ms)
    return played
