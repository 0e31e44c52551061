# tests/test_engine.py
from __future__ import annotations

from stashell.engine import StaEngine


class RecordingEvaluator:
    def __init__(self):
        self.commands = {}

    def register_command(self, name, handler):
        self.commands[name] = handler


def test_engine_defaults_to_one_thread() -> None:
    assert StaEngine(version="1.0").thread_count == 1


def test_engine_commands_report_state() -> None:
    engine = StaEngine(version="1.0")
    ev = RecordingEvaluator()
    engine.register_commands(ev)

    assert sorted(ev.commands) == ["::sta::thread_count", "::sta::version"]
    assert ev.commands["::sta::version"]() == "1.0"

    engine.set_thread_count(8)
    assert ev.commands["::sta::thread_count"]() == "8"
