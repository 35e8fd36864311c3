import subprocess
import wave
from array import array

import pytest

from colorchime.errors import ToneOutputError
from colorchime.synth import oscillators
from colorchime.synth.oscillators import SAMPLE_RATE, player_command, square_wave, write_wav
from colorchime import tone_output
from colorchime.tone_output import SpeakerToneOutput, check_tone, sleep_ms


def test_square_wave_length_and_levels():
    samples = square_wave(440, 400)
    assert len(samples) == int(round(SAMPLE_RATE * 0.4))
    peak = max(samples)
    assert peak > 0
    assert min(samples) == -peak
    # edges are faded
    assert samples[0] == 0


def test_write_wav_roundtrip_header(tmp_path):
    path = write_wav(tmp_path / "deep/nested/beep.wav", square_wave(500, 50))
    assert path.exists()
    with wave.open(str(path), "rb") as w:
        assert w.getnchannels() == 1
        assert w.getsampwidth() == 2
        assert w.getframerate() == SAMPLE_RATE
        frames = array("h")
        frames.frombytes(w.readframes(w.getnframes()))
    assert len(frames) == int(round(SAMPLE_RATE * 0.05))


def test_player_command_per_platform(monkeypatch, tmp_path):
    monkeypatch.setattr(oscillators.sys, "platform", "darwin")
    assert player_command(tmp_path / "a.wav")[0] == "afplay"
    monkeypatch.setattr(oscillators.sys, "platform", "linux")
    assert player_command(tmp_path / "a.wav")[0] == "aplay"


@pytest.mark.parametrize("freq,dur", [(36, 400), (32768, 400), (440, 0)])
def test_check_tone_rejects_bad_arguments(freq, dur):
    with pytest.raises(ValueError):
        check_tone(freq, dur)


def test_speaker_renders_and_plays(monkeypatch, tmp_path):
    played = []

    def fake_play(path):
        assert path.exists()
        played.append(path.name)

    monkeypatch.setattr(tone_output.sys, "platform", "linux")
    monkeypatch.setattr(tone_output, "play_file", fake_play)
    SpeakerToneOutput(scratch_dir=tmp_path).emit(587, 400)
    assert played == ["beep_587_400.wav"]
    assert not (tmp_path / "beep_587_400.wav").exists()


def test_speaker_wraps_player_failure(monkeypatch, tmp_path):
    def broken_player(path):
        raise subprocess.CalledProcessError(1, ["aplay", str(path)])

    monkeypatch.setattr(tone_output.sys, "platform", "linux")
    monkeypatch.setattr(tone_output, "play_file", broken_player)
    with pytest.raises(ToneOutputError):
        SpeakerToneOutput(scratch_dir=tmp_path).emit(440, 100)


def test_sleep_ms_skips_zero(monkeypatch):
    calls = []
    monkeypatch.setattr(tone_output.time, "sleep", calls.append)
    sleep_ms(0)
    sleep_ms(1500)
    assert calls == [1.5]


def test_speaker_wraps_scratch_write_failure(monkeypatch, tmp_path):
    # scratch dir path is taken by a plain file, so the WAV can't be written
    blocker = tmp_path / "not_a_dir"
    blocker.write_text("in the way")
    monkeypatch.setattr(tone_output.sys, "platform", "linux")
    monkeypatch.setattr(tone_output, "play_file", lambda path: None)

    with pytest.raises(ToneOutputError) as info:
        SpeakerToneOutput(scratch_dir=blocker).emit(440, 100)
    assert isinstance(info.value.__cause__, OSError)


def test_tour_survives_unwritable_scratch_dir(monkeypatch, tmp_path, sleeper):
    from colorchime.composer import play_tour

    blocker = tmp_path / "not_a_dir"
    blocker.write_text("in the way")
    monkeypatch.setattr(tone_output.sys, "platform", "linux")
    monkeypatch.setattr(tone_output, "play_file", lambda path: None)

    reports = play_tour(SpeakerToneOutput(scratch_dir=blocker), sleep=sleeper)
    assert len(reports) == 12
    assert not any(r.played for r in reports)
