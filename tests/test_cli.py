"""
Tests for the command-line entry point and its exit codes.
"""
import builtins

import pytest

from todo_app import cli


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("NO_COLOR", raising=False)
    monkeypatch.delenv("TODO_APP_LOG_LEVEL", raising=False)


def feed(monkeypatch, *answers):
    answers = list(answers)

    def fake_input(prompt=""):
        if not answers:
            raise EOFError
        return answers.pop(0)

    monkeypatch.setattr(builtins, "input", fake_input)


def test_confirmed_exit_returns_zero(monkeypatch, capsys):
    feed(monkeypatch, "4", "y")
    assert cli.main(["--no-color"]) == 0
    assert "Bye!" in capsys.readouterr().out


def test_closed_input_returns_one(monkeypatch, capsys):
    feed(monkeypatch, "2", "Buy milk")
    assert cli.main(["--no-color"]) == 1
    assert "Input stream closed" in capsys.readouterr().err


def test_terminal_error_returns_one(monkeypatch, capsys):
    def broken_input(prompt=""):
        raise OSError("not a tty")

    monkeypatch.setattr(builtins, "input", broken_input)
    assert cli.main(["--no-color"]) == 1
    assert "not a tty" in capsys.readouterr().err


def test_no_color_flag_wins(monkeypatch):
    args = cli.build_parser().parse_args(["--no-color", "--log-level", "info"])
    config = cli.load_config(args)
    assert config.color is False
    assert config.log_level == "INFO"


def test_env_config_used_without_flags(monkeypatch):
    monkeypatch.setenv("NO_COLOR", "1")
    config = cli.load_config(cli.build_parser().parse_args([]))
    assert config.color is False


def test_bad_log_level_is_usage_error():
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--log-level", "chatty"])
    assert excinfo.value.code == 2
