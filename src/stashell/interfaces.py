# StaShell™ — Tcl Command Shell for Static Timing Analysis
# Copyright (c) 2025
# TriFactoria (Andrew Blankfield)
#
# Licensed under the Business Source License 1.1 (BSL 1.1).
# You may use, modify, and redistribute this file under the terms of the BSL.
# On the Change Date (2029-01-01), this file will be licensed under
# the Apache License, Version 2.0.

"""
Protocol definitions for dependency injection.

These interfaces separate the shell driver from the command evaluator, the
analysis engine and the line editor it sequences.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol


@dataclass(frozen=True)
class EvalResult:
    """Outcome of evaluating a script: status plus result or error text."""

    ok: bool
    text: str = ""


class Evaluator(Protocol):
    """Protocol for the command-language interpreter."""

    def initialize(self) -> None:
        """Run the interpreter's one-time self initialization."""
        ...

    def eval(self, script: str) -> EvalResult:
        """Evaluate script text. Failures are returned, never raised."""
        ...

    def source_file(
        self, path: Path, echo: bool = False, verbose: bool = False
    ) -> EvalResult:
        """Evaluate a script file, optionally echoing commands and results."""
        ...

    def register_command(
        self, name: str, handler: Callable[..., object]
    ) -> None:
        """Bind ``name`` to a Python callable receiving string arguments."""
        ...

    def register_exit(self, handler: Callable[[], None]) -> None:
        """Bind the exit command.

        ``handler`` runs synchronously inside the evaluation that invoked
        exit; the rest of that evaluation is abandoned.
        """
        ...

    def finalize(self) -> None:
        """Release the interpreter. No calls are valid afterwards."""
        ...


class Engine(Protocol):
    """Protocol for the analysis engine that owns application state."""

    def set_thread_count(self, count: int) -> None:
        """Record the requested worker thread count."""
        ...

    def register_commands(self, evaluator: Evaluator) -> None:
        """Define the engine's commands in the evaluator."""
        ...


class LineEditor(Protocol):
    """Protocol for interactive line input with history and completion."""

    def read_line(self, prompt: str) -> str | None:
        """Read one line; None at end of input."""
        ...

    def add_history(self, line: str) -> None:
        """Append an entry to the in-memory history."""
        ...

    def history_entries(self) -> list[str]:
        """Return the in-memory history, oldest first."""
        ...

    def set_completion_hook(
        self, hook: Callable[[str], object]
    ) -> None:
        """Install the completion provider: prefix -> iterable of names."""
        ...
