import click
import pytest

from presetter.errors import PromptInterruptedError
from presetter.UTILS.shell import PromptSelect, TerminalChecker


def test_ask_returns_selected_option(monkeypatch, capsys):
    monkeypatch.setattr(click, "prompt", lambda *args, **kwargs: 2)
    assert PromptSelect().ask("What language do you want to use", ["PHP", "JavaScript"]) == "JavaScript"
    out = capsys.readouterr().out
    assert "What language do you want to use" in out
    assert "1) PHP" in out
    assert "2) JavaScript" in out


def test_ask_abort_is_interruption(monkeypatch):
    def abort(*args, **kwargs):
        raise click.Abort()

    monkeypatch.setattr(click, "prompt", abort)
    with pytest.raises(PromptInterruptedError) as exc:
        PromptSelect().ask("What preset do you want to use", ["laravel"])
    assert exc.value.exit_code == 0


def test_ask_without_options():
    with pytest.raises(ValueError):
        PromptSelect().ask("What database do you want to use", [])


def test_terminal_checker_without_tty(monkeypatch):
    class NotATTY:
        def isatty(self):
            return False

    monkeypatch.setattr("sys.stdin", NotATTY())
    assert TerminalChecker().is_terminal() is False
