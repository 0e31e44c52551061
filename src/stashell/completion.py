# StaShell™ — Tcl Command Shell for Static Timing Analysis
# Copyright (c) 2025
# TriFactoria (Andrew Blankfield)
#
# Licensed under the Business Source License 1.1 (BSL 1.1).
# You may use, modify, and redistribute this file under the terms of the BSL.
# On the Change Date (2029-01-01), this file will be licensed under
# the Apache License, Version 2.0.

"""
Command name completion.

The completer only knows a static table of command names; it is a typing aid
and not authoritative over what the evaluator accepts.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Sequence

from prompt_toolkit.completion import Completer, Completion

COMMAND_NAMES: tuple[str, ...] = (
    "all_clocks",
    "all_inputs",
    "all_outputs",
    "all_registers",
    "check_setup",
    "create_clock",
    "create_generated_clock",
    "create_voltage_area",
    "current_design",
    "current_instance",
    "define_corners",
    "get_clocks",
    "get_fanin",
    "get_fanout",
    "get_nets",
    "get_pins",
    "get_ports",
    "read_liberty",
    "read_parasitics",
    "read_sdc",
    "read_sdf",
    "read_spef",
    "read_verilog",
    "report_annotated_delay",
    "report_cell",
    "report_checks",
    "report_path",
    "report_slack",
    "set_input_delay",
    "write_sdc",
    "write_sdf",
)


class CompletionCursor:
    """Resumable scan of a name table for names starting with a prefix.

    Creating a cursor is the "fresh start" of a completion request; each
    ``next()`` continues from where the previous candidate was found, in
    table order, until the table is exhausted.
    """

    def __init__(
        self, prefix: str, names: Sequence[str] = COMMAND_NAMES
    ) -> None:
        self.prefix = prefix
        self._names = names
        self._index = 0

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        while self._index < len(self._names):
            name = self._names[self._index]
            self._index += 1
            if name.startswith(self.prefix):
                return name
        raise StopIteration


def complete(prefix: str, names: Sequence[str] = COMMAND_NAMES) -> CompletionCursor:
    """Start a completion request for ``prefix``."""
    return CompletionCursor(prefix, names)


class CommandCompleter(Completer):
    """Completes the first token of the line through a completion hook."""

    def __init__(
        self, hook: Callable[[str], Iterable[str]] = complete
    ) -> None:
        self.hook = hook

    def _first_token_before_cursor(self, text_before_cursor: str) -> str | None:
        """Return the first-token fragment, or None once past it."""
        s = text_before_cursor.lstrip()

        # Arguments are not command names.
        if any(ch.isspace() for ch in s):
            return None

        return s

    def get_completions(
        self, document, complete_event
    ) -> Iterable[Completion]:
        token = self._first_token_before_cursor(
            document.text_before_cursor or ""
        )
        if token is None:
            return

        for name in self.hook(token):
            yield Completion(
                name, start_position=-len(token), display_meta="command"
            )
