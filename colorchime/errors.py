# errors.py
"""
Error kinds raised across colorchime.

- EmptyPaletteError     : classifier asked to match against no colors (fatal)
- InvalidStepCountError : synth configured with fewer than 2 steps (fatal)
- UnmappedColorError    : palette name without a frequency (recoverable)
- ToneOutputError       : the tone device failed to play a step
"""


class ColorChimeError(Exception):
    """Base class for colorchime errors."""


class EmptyPaletteError(ColorChimeError, ValueError):
    pass


class InvalidStepCountError(ColorChimeError, ValueError):
    pass


class UnmappedColorError(ColorChimeError, LookupError):
    pass


class ToneOutputError(ColorChimeError, RuntimeError):
    """`steps` holds the tone steps emitted before the failure."""

    def __init__(self, message, steps=()):
        super().__init__(message)
        self.steps = list(steps)
