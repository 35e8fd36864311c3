from __future__ import annotations

import pytest

from colorchime.errors import ToneOutputError


class RecordingToneOutput:
    """Collects (frequency_hz, duration_ms) instead of beeping."""

    def __init__(self, fail_on=None):
        self.tones = []
        self.fail_on = fail_on  # frequency that raises ToneOutputError

    def emit(self, frequency_hz, duration_ms):
        if self.fail_on is not None and frequency_hz == self.fail_on:
            raise ToneOutputError(f"speaker unplugged at {frequency_hz} Hz")
        self.tones.append((frequency_hz, duration_ms))


class RecordingSleeper:
    def __init__(self):
        self.pauses = []

    def __call__(self, ms):
        self.pauses.append(ms)


@pytest.fixture
def output():
    return RecordingToneOutput()


@pytest.fixture
def sleeper():
    return RecordingSleeper()
