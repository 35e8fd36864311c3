# tone_output.py
"""
Where tone steps go.

Anything with `emit(frequency_hz, duration_ms)` is a tone output. emit() is
expected to block for the tone's duration, like a device beep.

- SpeakerToneOutput : real sound (winsound.Beep on Windows, WAV + player elsewhere)
- sleep_ms          : the blocking pause used between notes and colors
"""

from __future__ import annotations

import logging
import subprocess
import sys
import tempfile
import time
from pathlib import Path
from typing import Optional, Protocol

from colorchime.errors import ToneOutputError
from colorchime.synth.glockenspiel import TONE_MAX_HZ, TONE_MIN_HZ
from colorchime.synth.oscillators import SAMPLE_RATE, play_file, square_wave, write_wav

logger = logging.getLogger(__name__)


class ToneOutput(Protocol):
    def emit(self, frequency_hz: int, duration_ms: int) -> None:
        ...


def check_tone(frequency_hz: int, duration_ms: int) -> None:
    if not (TONE_MIN_HZ <= frequency_hz <= TONE_MAX_HZ):
        raise ValueError(f"frequency {frequency_hz} Hz outside {TONE_MIN_HZ}..{TONE_MAX_HZ}")
    if duration_ms <= 0:
        raise ValueError(f"duration must be positive, got {duration_ms} ms")


class SpeakerToneOutput:
    """Plays each tone on the local speaker and blocks until it finishes."""

    def __init__(self, sample_rate: int = SAMPLE_RATE, scratch_dir: Optional[Path] = None):
        self.sample_rate = sample_rate
        self.scratch_dir = Path(scratch_dir) if scratch_dir else Path(tempfile.gettempdir()) / "colorchime"

    def emit(self, frequency_hz: int, duration_ms: int) -> None:
        check_tone(frequency_hz, duration_ms)
        if sys.platform.startswith("win"):
            self._beep(frequency_hz, duration_ms)
        else:
            self._play_rendered(frequency_hz, duration_ms)

    def _beep(self, frequency_hz: int, duration_ms: int) -> None:
        import winsound  # Windows only

        try:
            winsound.Beep(frequency_hz, duration_ms)
        except RuntimeError as e:
            raise ToneOutputError(f"Beep failed at {frequency_hz} Hz") from e

    def _play_rendered(self, frequency_hz: int, duration_ms: int) -> None:
        samples = square_wave(frequency_hz, duration_ms, sample_rate=self.sample_rate)
        path = self.scratch_dir / f"beep_{frequency_hz}_{duration_ms}.wav"
        try:
            write_wav(path, samples, self.sample_rate)
            play_file(path)
        except (OSError, subprocess.CalledProcessError) as e:
            raise ToneOutputError(f"Could not play {path.name}: {e}") from e
        finally:
            if path.is_file():
                path.unlink()


def sleep_ms(ms: int) -> None:
    if ms > 0:
        time.sleep(ms / 1000.0)
