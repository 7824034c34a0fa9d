import pytest

from zeroengine.cli import main, parse_args


def test_defaults():
    args = parse_args([])
    assert args.title == "Zero Engine"
    assert args.height == 600
    assert args.width == 800
    assert args.scene == ""


def test_short_options():
    args = parse_args(["-t", "Demo", "-q", "300", "-w", "400", "-s", "level1"])
    assert (args.title, args.height, args.width, args.scene) == ("Demo", 300, 400, "level1")


def test_long_options():
    args = parse_args(["--title", "Demo", "--height", "720", "--width", "1280", "--scene", "menu"])
    assert (args.title, args.height, args.width, args.scene) == ("Demo", 720, 1280, "menu")


def test_zero_size_allowed():
    args = parse_args(["--width", "0", "--height", "0"])
    assert (args.width, args.height) == (0, 0)


@pytest.mark.parametrize("value", ["-5", "abc", "1.5"])
def test_bad_height_rejected(value):
    with pytest.raises(SystemExit):
        parse_args(["--height", value])


def test_unknown_option_rejected():
    with pytest.raises(SystemExit):
        parse_args(["--colour", "red"])


def test_main_help_returns_zero(capsys):
    assert main(["--help"]) == 0
    assert "Window title" in capsys.readouterr().out


def test_main_bad_argument_returns_error(capsys):
    assert main(["--width", "-3"]) == 2
    assert "negative" in capsys.readouterr().err