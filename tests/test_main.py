from PIL import Image

from colorchime import composer
from colorchime import main as entry

from conftest import RecordingToneOutput


def test_main_writes_swatch_then_plays_tour(monkeypatch, tmp_path, sleeper, capsys):
    swatch_path = tmp_path / "output/palette_swatch.png"
    output = RecordingToneOutput()
    monkeypatch.setattr(entry, "SWATCH_PATH", str(swatch_path))
    monkeypatch.setattr(entry, "SpeakerToneOutput", lambda: output)
    monkeypatch.setattr(
        entry, "play_tour", lambda out, test_color: composer.play_tour(out, test_color, sleep=sleeper)
    )

    entry.main()

    with Image.open(swatch_path) as im:
        assert im.size == (32 * 12, 32)
        assert im.convert("RGB").getpixel((0, 0)) == tuple(composer.TEST_COLOR)
    assert len(output.tones) == 12 * 6
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == f"Wrote palette swatch to {swatch_path}"
    assert lines[-1] == "Done. Played 12/12 colors."
