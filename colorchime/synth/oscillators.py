# oscillators.py
"""
Square-wave beeps as PCM16 mono, plus WAV writing and system playback.

Used by the speaker tone output on platforms without a native beep call.
"""

import math
import subprocess
import sys
import wave
from array import array
from pathlib import Path
from typing import List

SAMPLE_RATE = 44100
BEEP_LEVEL = 0.35   # fraction of full scale; square waves are loud
FADE_MS = 4         # tiny edge fade so consecutive beeps don't click


# ===== OSCILLATORS =====
def square_wave(frequency: float,
                duration_ms: int,
                sample_rate: int = SAMPLE_RATE,
                level: float = BEEP_LEVEL) -> List[int]:
    n_total = max(0, int(round(sample_rate * duration_ms / 1000.0)))
    peak = int(32767 * min(max(level, 0.0), 1.0))
    samples = []
    for n in range(n_total):
        value = 1 if math.sin(2 * math.pi * frequency * n / sample_rate) >= 0 else -1
        samples.append(value * peak)
    return _fade(samples, sample_rate)


def _fade(samples: List[int], sample_rate: int, fade_ms: int = FADE_MS) -> List[int]:
    """Linear fade-in/out at the head and tail."""
    n_total = len(samples)
    n_fade = int(sample_rate * fade_ms / 1000.0)
    if n_fade == 0 or n_fade * 2 > n_total:
        return samples
    out = samples[:]
    for i in range(n_fade):
        factor = i / n_fade
        out[i] = int(out[i] * factor)
        out[-(i + 1)] = int(out[-(i + 1)] * factor)
    return out


# ===== FILE / PLAYBACK =====
def write_wav(path, samples: List[int], sample_rate: int = SAMPLE_RATE) -> Path:
    """Write samples to a mono 16-bit PCM WAV file, creating parent folders."""
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with wave.open(str(p), "wb") as w:
        w.setnchannels(1)
        w.setsampwidth(2)      # 16-bit
        w.setframerate(sample_rate)
        w.writeframes(array("h", samples).tobytes())
    return p


def player_command(path: Path) -> List[str]:
    if sys.platform.startswith("darwin"):
        return ["afplay", str(path)]
    return ["aplay", "-q", str(path)]


def play_file(path: Path) -> None:
    """Play a WAV file with the system player; blocks until playback ends."""
    subprocess.run(player_command(path), check=True, capture_output=True)
