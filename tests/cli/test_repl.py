"""Tests for the command-line entry point."""

import pytest

from fitch.cli import Session
from fitch.cli.repl import GOODBYES, interact, main, run_script

SCRIPT = """# modus ponens
premise p -> q
premise p
rule ->e 1 2
"""


def write_script(tmp_path, text, name="proof.fitch"):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def feed(monkeypatch, lines):
    """Make input() return ``lines`` one by one, then signal end of input."""
    lines = iter(lines)

    def fake_input(prompt=""):
        try:
            return next(lines)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr("builtins.input", fake_input)


class TestRunScript:

    def test_script(self, tmp_path, quiet_config, capsys):
        session = Session(quiet_config)
        assert run_script(session, write_script(tmp_path, SCRIPT)) == 0
        out = capsys.readouterr().out
        assert out.splitlines()[-1].split() == ["3", "q", "→e", "1,", "2"]

    def test_script_stops_at_first_error(self, tmp_path, quiet_config, capsys):
        path = write_script(tmp_path, "premise p\nrule and_e_lhs 1\npremise q\n")
        session = Session(quiet_config)
        assert run_script(session, path) == 1
        err = capsys.readouterr().err
        assert f"{path}:2: Error:" in err
        assert session.proof.next_index == 2

    def test_quit_ends_script(self, tmp_path, quiet_config, capsys):
        path = write_script(tmp_path, "premise p\nquit\npremise q\n")
        session = Session(quiet_config)
        assert run_script(session, path) == 0
        assert session.proof.next_index == 2


class TestInteract:

    def test_commands_and_goodbye(self, monkeypatch, quiet_config, capsys):
        feed(monkeypatch, ["premise p", "show", "quit"])
        session = Session(quiet_config)
        interact(session)
        out = capsys.readouterr().out.splitlines()
        assert out[0].split() == ["1", "p", "premise"]
        assert out[-1] in GOODBYES

    def test_errors_go_to_stderr(self, monkeypatch, quiet_config, capsys):
        feed(monkeypatch, ["discharge"])
        interact(Session(quiet_config))
        captured = capsys.readouterr()
        assert captured.err.startswith("Error: ")
        assert captured.out.splitlines()[-1] in GOODBYES


class TestMain:

    def test_script_mode(self, tmp_path, config_path, capsys):
        path = write_script(tmp_path, SCRIPT)
        assert main(["--config", str(config_path), "--script", str(path)]) == 0
        assert "→e" in capsys.readouterr().out

    def test_missing_script(self, tmp_path, config_path, capsys):
        assert main(["--config", str(config_path), "--script", str(tmp_path / "nope")]) == 1
        assert "File not found" in capsys.readouterr().err

    def test_missing_config(self, tmp_path, capsys):
        assert main(["--config", str(tmp_path / "nope.yaml")]) == 1
        assert "Config not found" in capsys.readouterr().err

    @pytest.mark.parametrize("flags,greets", [([], True), (["--no-greeting"], False)])
    def test_greeting(self, monkeypatch, tmp_path, config_path, capsys, flags, greets):
        config_path.write_text(config_path.read_text(encoding="utf-8").replace(
            "greeting: false", "greeting: true"), encoding="utf-8")
        feed(monkeypatch, [])
        assert main(["--config", str(config_path)] + flags) == 0
        out = capsys.readouterr().out
        assert ("Hi! I'm Fitch." in out) == greets
        assert out.splitlines()[-1] in GOODBYES
