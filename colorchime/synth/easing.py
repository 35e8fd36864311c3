# easing.py
"""
Amplitude envelope for the glockenspiel wobble.

Quartic ease-in-out over the normalized step position. Note the second half
does not fall back to zero: the curve climbs 0 -> 1 across the whole note,
steepest around the middle.
"""

from colorchime.errors import InvalidStepCountError


def ease(step: int, total_steps: int) -> float:
    if total_steps < 2:
        raise InvalidStepCountError(f"total_steps must be >= 2, got {total_steps}")

    t = step / (total_steps - 1)  # normalized time 0..1

    if t < 0.5:
        return 8 * t * t * t * t
    f = t - 1
    return 1 - 8 * f * f * f * f
