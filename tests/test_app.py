import pytest

from orbitview.app import SCR_HEIGHT, SCR_WIDTH, main, parse_args


def test_defaults_match_screen_size():
    args = parse_args([])
    assert (args.width, args.height) == (1280, 720)
    assert (args.width, args.height) == (SCR_WIDTH, SCR_HEIGHT)


def test_custom_size():
    args = parse_args(["--width", "800", "--height", "600"])
    assert args.width == 800
    assert args.height == 600


@pytest.mark.parametrize("value", ["0", "-3", "wide", "1.5"])
def test_invalid_width_is_rejected(value):
    with pytest.raises(SystemExit) as exc:
        parse_args([f"--width={value}"])
    assert exc.value.code == 2


def test_invalid_height_is_rejected():
    with pytest.raises(SystemExit) as exc:
        parse_args(["--height=0"])
    assert exc.value.code == 2


def test_unknown_option_is_rejected():
    with pytest.raises(SystemExit) as exc:
        parse_args(["--depth", "3"])
    assert exc.value.code == 2


def test_main_rejects_bad_arguments_before_opening_window():
    with pytest.raises(SystemExit) as exc:
        main(["--height=-1"])
    assert exc.value.code == 2


def test_main_help_exits_cleanly(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--help"])
    assert exc.value.code == 0
    assert "--width" in capsys.readouterr().out