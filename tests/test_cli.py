import pytest

from torus_cli_renderer import cli
from torus_cli_renderer.terminal import TerminalError


@pytest.fixture(autouse=True)
def color_term(monkeypatch):
    monkeypatch.setenv("TERM", "xterm-256color")
    monkeypatch.delenv("NO_COLOR", raising=False)


def test_defaults():
    args = cli.parse_args([])
    assert args.color == "green"
    assert args.speed is None
    assert not args.no_color


def test_color_and_speed(capsys):
    args = cli.parse_args(["rot", "2.5"])
    config = cli.build_config(args)
    assert config.color == "rot"
    assert config.speed_factor == 2.5
    assert config.use_color
    assert capsys.readouterr().err == ""


def test_negative_speed_warns(capsys):
    config = cli.build_config(cli.parse_args(["red", "-1"]))
    assert config.speed_factor == 1.0
    assert "Invalid speed factor '-1'" in capsys.readouterr().err


def test_too_many_arguments_warns(capsys):
    args = cli.parse_args(["red", "2", "extra"])
    assert (args.color, args.speed) == ("red", "2")
    assert "Too many arguments" in capsys.readouterr().err


def test_unknown_option_is_rejected():
    with pytest.raises(SystemExit):
        cli.parse_args(["--bogus"])


def test_no_color_flag():
    config = cli.build_config(cli.parse_args(["cyan", "--no-color"]))
    assert not config.use_color


def test_help_mentions_quit_and_colors(capsys):
    with pytest.raises(SystemExit) as info:
        cli.parse_args(["--help"])
    assert info.value.code == 0
    out = capsys.readouterr().out
    assert "ESC to quit" in out
    assert "green, red, blue, cyan, magenta, yellow, white" in out


class QuitTerminal:
    def __init__(self):
        self.frames = []

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def poll_key(self):
        return 'q'

    def write_frame(self, frame):
        self.frames.append(frame)


class BrokenTerminal:
    def __enter__(self):
        raise TerminalError("tcgetattr", OSError(25, "Inappropriate ioctl for device"))

    def __exit__(self, *exc):
        return False


class InterruptedTerminal(QuitTerminal):
    def poll_key(self):
        raise KeyboardInterrupt


def test_main_quits_cleanly(monkeypatch):
    monkeypatch.setattr(cli, "Terminal", QuitTerminal)
    assert cli.main(["magenta"]) == 0


def test_main_reports_terminal_failure(monkeypatch, capsys):
    monkeypatch.setattr(cli, "Terminal", BrokenTerminal)
    assert cli.main([]) == 1
    assert "tcgetattr failed" in capsys.readouterr().err


def test_main_keyboard_interrupt(monkeypatch):
    monkeypatch.setattr(cli, "Terminal", InterruptedTerminal)
    assert cli.main([]) == 130


def test_main_warns_unknown_color_before_raw_mode(monkeypatch, capsys):
    seen = []

    class RecordingTerminal(QuitTerminal):
        def __enter__(self):
            seen.append(capsys.readouterr().err)
            return self

    monkeypatch.setattr(cli, "Terminal", RecordingTerminal)
    assert cli.main(["chartreuse"]) == 0
    assert len(seen) == 1
    assert "Unknown color 'chartreuse'" in seen[0]


@pytest.mark.parametrize("speed", ["-inf", "-fast", "-1e3", "-0.5"])
def test_dash_leading_speed_is_a_bad_value(speed, capsys):
    args = cli.parse_args(["red", speed])
    assert (args.color, args.speed) == ("red", speed)
    config = cli.build_config(args)
    assert config.speed_factor == 1.0
    err = capsys.readouterr().err
    assert f"Invalid speed factor '{speed}'" in err
    assert "Too many arguments" not in err


def test_options_mix_with_positionals():
    args = cli.parse_args(["--no-color", "blau", "3"])
    assert (args.color, args.speed, args.no_color) == ("blau", "3", True)


def test_double_dash_ends_options():
    args = cli.parse_args(["--", "--no-color"])
    assert args.color == "--no-color"
    assert not args.no_color


def test_usage_lists_positionals(capsys):
    cli.build_parser().print_usage()
    assert "[color] [speed]" in capsys.readouterr().out
