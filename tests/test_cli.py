# tests/test_cli.py
from __future__ import annotations

import io
import runpy
from pathlib import Path
from unittest.mock import patch

import pytest

import stashell.cli as cli
from stashell import __version__
from stashell.shell import BootstrapError, Shell
from stashell.ui import PlainEditor, PromptToolkitEditor


class FakeShell:
    def __init__(self, error: Exception | None = None):
        self.error = error
        self.runs = 0

    def run(self) -> None:
        self.runs += 1
        if self.error is not None:
            raise self.error


@pytest.fixture
def no_shell(monkeypatch: pytest.MonkeyPatch) -> None:
    def _fail(argv):
        raise AssertionError("shell must not be built")

    monkeypatch.setattr(cli, "build_shell", _fail)


def test_help_prints_usage_and_exits(no_shell, capsys) -> None:
    assert cli.main(["sta", "-help", "-version"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Usage: sta [-help] [-version] [-no_init]")
    for flag in ("-no_splash", "-x cmd", "-f cmd_file", "-threads count|max"):
        assert flag in out


def test_version_prints_version(no_shell, capsys) -> None:
    assert cli.main(["sta", "-version"]) == 0
    assert capsys.readouterr().out == f"{__version__}\n"


def test_main_runs_shell(monkeypatch: pytest.MonkeyPatch) -> None:
    shell = FakeShell()
    seen: list = []

    def fake_build(argv):
        seen.append(argv)
        return shell

    monkeypatch.setattr(cli, "build_shell", fake_build)

    assert cli.main(["sta", "-no_init"]) == 0
    assert shell.runs == 1
    assert seen == [("sta", "-no_init")]


def test_main_bootstrap_failure_is_fatal(
    monkeypatch: pytest.MonkeyPatch, capsys
) -> None:
    monkeypatch.setattr(
        cli, "build_shell",
        lambda argv: FakeShell(BootstrapError("encoded length 4 is bad")),
    )

    assert cli.main(["sta"]) == 1
    err = capsys.readouterr().err
    assert "Error: bootstrap script: encoded length 4 is bad." in err
    assert "scripts/encode_tcl_inits.py" in err


def test_main_defaults_to_sys_argv(monkeypatch: pytest.MonkeyPatch, capsys) -> None:
    monkeypatch.setattr(cli.sys, "argv", ["prog", "-version"])
    assert cli.main() == 0
    assert capsys.readouterr().out.strip() == __version__


def test_entrypoint_exits_with_main_status(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(cli, "main", lambda: 1)
    with pytest.raises(SystemExit) as exc_info:
        cli.entrypoint()
    assert exc_info.value.code == 1


def test_module_main_raises_system_exit_with_cli_exit_code() -> None:
    with patch("stashell.cli.main", return_value=3) as mock_main:
        with pytest.raises(SystemExit) as exc_info:
            runpy.run_module("stashell.__main__", run_name="__main__")

    assert exc_info.value.code == 3
    mock_main.assert_called_once_with()


# ----------------------------------------------------------------
# Editor selection
# ----------------------------------------------------------------


class _TTY(io.StringIO):
    def isatty(self) -> bool:
        return True


def test_make_editor_prompt_toolkit_on_tty(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("STASHELL_LEGACY_UI", raising=False)
    monkeypatch.setattr(cli.sys, "stdin", _TTY())
    editor = cli._make_editor(cli.config.YAMLConfig({}))
    assert isinstance(editor, PromptToolkitEditor)


def test_make_editor_plain_when_piped(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("STASHELL_LEGACY_UI", raising=False)
    monkeypatch.setattr(cli.sys, "stdin", io.StringIO())
    assert isinstance(cli._make_editor(cli.config.YAMLConfig({})), PlainEditor)


def test_make_editor_legacy_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("STASHELL_LEGACY_UI", "1")
    monkeypatch.setattr(cli.sys, "stdin", _TTY())
    assert isinstance(cli._make_editor(cli.config.YAMLConfig({})), PlainEditor)


# ----------------------------------------------------------------
# Real Tcl end to end
# ----------------------------------------------------------------


@pytest.fixture
def tcl_session(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    tkinter = pytest.importorskip("tkinter")
    try:
        tkinter.Tcl()
    except tkinter.TclError as e:
        pytest.skip(f"Tcl unavailable: {e}")
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("STASHELL_LEGACY_UI", "1")
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_build_shell_wiring(tcl_session: Path) -> None:
    from stashell.evaluator import TclEvaluator

    shell = cli.build_shell(["sta", "-threads", "2"])
    try:
        assert isinstance(shell, Shell)
        assert isinstance(shell.evaluator, TclEvaluator)
        assert isinstance(shell.editor, PlainEditor)
        assert shell.engine.version == __version__
        assert shell.args.get_value("-threads") == "2"
    finally:
        shell.evaluator.finalize()


def test_inline_exit_end_to_end(tcl_session: Path, capsys) -> None:
    (tcl_session / ".history_sta").write_text("report_checks\n", encoding="utf-8")

    status = cli.main(
        ["sta", "-no_init", "-no_splash", "-threads", "banana",
         "-x", "set a 1; exit; set b 2"]
    )

    assert status == 0
    captured = capsys.readouterr()
    assert "Saving command history" in captured.out
    assert "Warning: -threads must be max or a positive integer." in captured.err
    assert (tcl_session / ".history_sta").read_text(encoding="utf-8") == (
        "report_checks\n"
    )


def test_command_file_end_to_end(tcl_session: Path, capsys) -> None:
    cmd_file = tcl_session / "run.tcl"
    cmd_file.write_text("set a [expr {6 * 7}]\nexit\n", encoding="utf-8")

    assert cli.main(["sta", "-no_init", "-no_splash", "-f", str(cmd_file)]) == 0

    out = capsys.readouterr().out
    assert "set a [expr {6 * 7}]\n42\n" in out
