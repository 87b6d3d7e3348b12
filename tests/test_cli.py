import io

import pytest
from PIL import Image

from diceart.cli import ask_positive_int, ask_preset, ask_yes_no, main, parse_args
from diceart.dicelib import IntensityPreset


def _setup(tmp_path):
    input_path = tmp_path / "in.png"
    Image.new("L", (16, 12), 0).save(input_path)
    dice_dir = tmp_path / "dice"
    dice_dir.mkdir()
    for name in "abcdef":
        Image.new("RGB", (8, 8), (255, 255, 255)).save(dice_dir / f"{name}.png")
    return input_path, dice_dir


def test_parse_args():
    args = parse_args(["-i", "pic.png", "--dice-dir", "faces"])
    assert args.input == "pic.png"
    assert args.dice_dir == "faces"


def test_parse_args_requires_both():
    with pytest.raises(SystemExit):
        parse_args(["-i", "pic.png"])


@pytest.mark.parametrize("answer, expected", [("Y\n", True), ("y\n", True), ("n\n", False), ("", False)])
def test_ask_yes_no(answer, expected):
    out = io.StringIO()
    assert ask_yes_no("Continue? (y/n):", io.StringIO(answer), out) is expected
    assert out.getvalue().startswith("Continue? (y/n):")


@pytest.mark.parametrize("answer, expected", [("48\n", 48), ("0\n", 32), ("abc\n", 32), ("", 32), ("-5\n", 32)])
def test_ask_positive_int(answer, expected):
    assert ask_positive_int("Size:", 32, io.StringIO(answer), io.StringIO()) == expected


@pytest.mark.parametrize(
    "answer, expected",
    [("3\n", IntensityPreset.LOW_CONTRAST), ("5\n", IntensityPreset.DARK), ("9\n", IntensityPreset.DEFAULT)],
)
def test_ask_preset(answer, expected):
    out = io.StringIO()
    assert ask_preset(io.StringIO(answer), out) is expected
    assert "2. High Contrast" in out.getvalue()


def test_main_writes_output(tmp_path, monkeypatch):
    input_path, dice_dir = _setup(tmp_path)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("sys.stdin", io.StringIO("4\nn\nn\nn\n1\nn\n\n"))
    assert main(["-i", str(input_path), "-d", str(dice_dir)]) == 0
    with Image.open(tmp_path / "output" / "dice_output.png") as out:
        assert out.size == (12, 12)
        assert out.convert("RGB").getpixel((0, 0)) == (255, 255, 255)


def test_main_with_custom_canvas(tmp_path, monkeypatch):
    input_path, dice_dir = _setup(tmp_path)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("sys.stdin", io.StringIO("4\ny\ny\ny\n20\n8\n2\nn\n\n"))
    assert main(["-i", str(input_path), "-d", str(dice_dir)]) == 0
    with Image.open(tmp_path / "output" / "dice_output.png") as out:
        assert out.size == (20, 8)


def test_main_missing_input(tmp_path, monkeypatch):
    _, dice_dir = _setup(tmp_path)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("sys.stdin", io.StringIO("4\n"))
    assert main(["-i", str(tmp_path / "nope.png"), "-d", str(dice_dir)]) == 1
    assert not (tmp_path / "output").exists()