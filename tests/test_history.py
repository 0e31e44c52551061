# tests/test_history.py
from __future__ import annotations

from pathlib import Path

import pytest

from stashell.history import SAVE_MESSAGE, is_storable, load_history, save_history


def test_load_missing_file_is_empty(tmp_path: Path) -> None:
    assert load_history(tmp_path / ".history_sta") == []


def test_load_unreadable_path_is_empty(tmp_path: Path) -> None:
    # A directory cannot be opened for reading as a file.
    assert load_history(tmp_path) == []


def test_load_strips_terminators_and_drops_empty_lines(tmp_path: Path) -> None:
    path = tmp_path / ".history_sta"
    path.write_text("read_liberty a.lib\n\nreport_checks\n\n", encoding="utf-8")
    assert load_history(path) == ["read_liberty a.lib", "report_checks"]


def test_load_last_line_without_newline(tmp_path: Path) -> None:
    path = tmp_path / ".history_sta"
    path.write_text("one\ntwo", encoding="utf-8")
    assert load_history(path) == ["one", "two"]


def test_save_overwrites_and_announces(tmp_path: Path) -> None:
    path = tmp_path / ".history_sta"
    path.write_text("old\n", encoding="utf-8")
    messages: list[str] = []

    save_history(path, ["a", "b c"], output_fn=messages.append)

    assert path.read_text(encoding="utf-8") == "a\nb c\n"
    assert messages == [SAVE_MESSAGE]


def test_save_then_load_drops_only_empty_entries(tmp_path: Path) -> None:
    path = tmp_path / ".history_sta"
    entries = ["set x 1", "", "puts $x", "set x 1"]

    save_history(path, entries, output_fn=lambda _msg: None)

    assert load_history(path) == ["set x 1", "puts $x", "set x 1"]


def test_save_skips_multiline_entries(tmp_path: Path) -> None:
    path = tmp_path / ".history_sta"
    save_history(path, ["ok", "bad\nentry"], output_fn=lambda _msg: None)
    assert load_history(path) == ["ok"]


def test_save_to_missing_directory_raises(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        save_history(
            tmp_path / "missing" / ".history_sta", ["a"],
            output_fn=lambda _msg: None,
        )


def test_is_storable() -> None:
    assert is_storable("report_checks")
    assert not is_storable("")
    assert not is_storable("a\nb")
    assert not is_storable("a\rb")
