# StaShell™ — Tcl Command Shell for Static Timing Analysis
# Copyright (c) 2025
# TriFactoria (Andrew Blankfield)
#
# Licensed under the Business Source License 1.1 (BSL 1.1).
# You may use, modify, and redistribute this file under the terms of the BSL.
# On the Change Date (2029-01-01), this file will be licensed under
# the Apache License, Version 2.0.

"""
Tcl evaluator backed by the interpreter that ships with tkinter.

Only the Tcl core is loaded (``tkinter.Tcl()``); no Tk window is created.
"""

from __future__ import annotations

import logging
import tkinter
from collections.abc import Callable, Iterator, Sequence
from pathlib import Path

from .interfaces import EvalResult

log = logging.getLogger(__name__)

EXIT_CALLBACK = "::stashell::exit_callback"
# ::errorCode carried by the error that unwinds a script after exit.
EXIT_ERROR_CODE = "STASHELL EXIT"


class TclEvaluator:
    """Tcl interpreter implementing the Evaluator protocol."""

    def __init__(
        self,
        argv: Sequence[str] = (),
        output_fn: Callable[[str], None] = print,
    ) -> None:
        self.argv = tuple(argv)
        self.output_fn = output_fn
        self._tcl: tkinter.Tk | None = tkinter.Tcl()
        self._commands: list[str] = []
        self._exiting = False

    @property
    def tk(self):
        if self._tcl is None:
            raise RuntimeError("Tcl evaluator has been finalized")
        return self._tcl.tk

    # ---------- lifecycle ----------

    def initialize(self) -> None:
        """Publish argv0/argv/argc the way tclsh does."""
        args = self.argv[1:]
        self.tk.globalsetvar("argv0", self.argv[0] if self.argv else "")
        self.tk.globalsetvar("argv", tuple(args))
        self.tk.globalsetvar("argc", len(args))
        self.tk.globalsetvar("tcl_interactive", 0)
        log.debug("Tcl %s initialized", self.tk.eval("info patchlevel"))

    def finalize(self) -> None:
        if self._tcl is None:
            return
        for name in self._commands:
            try:
                self._tcl.tk.deletecommand(name)
            except tkinter.TclError:
                log.debug("command %s already deleted", name)
        self._commands.clear()
        self._tcl = None

    # ---------- commands ----------

    def register_command(
        self, name: str, handler: Callable[..., object]
    ) -> None:
        def _call(*args: str) -> object:
            result = handler(*args)
            return "" if result is None else result

        self.tk.createcommand(name, _call)
        self._commands.append(name)

    def register_exit(self, handler: Callable[[], None]) -> None:
        def _exit() -> None:
            self._exiting = True
            handler()

        self.register_command(EXIT_CALLBACK, _exit)
        # Raising a Tcl error unwinds whatever script called exit.
        self.tk.eval(
            "proc ::exit {args} {\n"
            f"    {EXIT_CALLBACK}\n"
            f"    return -code error -errorcode {{{EXIT_ERROR_CODE}}} {{}}\n"
            "}"
        )

    # ---------- evaluation ----------

    def _eval(self, script: str) -> EvalResult:
        try:
            result = self.tk.eval(script)
        except tkinter.TclError as e:
            if self._error_code() == EXIT_ERROR_CODE:
                return EvalResult(True, "")
            return EvalResult(False, str(e))
        return EvalResult(True, str(result))

    def _error_code(self) -> str:
        try:
            return str(self.tk.eval("set ::errorCode"))
        except tkinter.TclError:
            return ""

    def eval(self, script: str) -> EvalResult:
        self._exiting = False
        return self._eval(script)

    def is_complete(self, script: str) -> bool:
        return bool(self.tk.getboolean(self.tk.call("info", "complete", script)))

    def _commands_in(self, text: str) -> Iterator[str]:
        """Split script text into complete commands, one or more lines each.

        Splitting is by line: "set a 1; set b 2" on one line is a single
        command for echo, and only its last result is shown.
        """
        pending = ""
        for line in text.splitlines():
            pending = f"{pending}\n{line}" if pending else line
            if self.is_complete(pending):
                yield pending
                pending = ""
        if pending:
            yield pending

    def source_file(
        self, path: Path, echo: bool = False, verbose: bool = False
    ) -> EvalResult:
        """Evaluate a file command by command.

        With ``echo`` each command is written before it runs; with
        ``verbose`` each non-empty result is written after it. The first
        failing command stops the file.
        """
        try:
            text = Path(path).read_text(encoding="utf-8")
        except OSError as e:
            reason = (e.strerror or str(e)).lower()
            return EvalResult(False, f'couldn\'t read file "{path}": {reason}')

        self._exiting = False
        result = EvalResult(True, "")
        for command in self._commands_in(text):
            stripped = command.strip()
            if not stripped or stripped.startswith("#"):
                continue
            if echo:
                self.output_fn(command)
            result = self._eval(command)
            if not result.ok:
                return result
            if self._exiting:
                return EvalResult(True, "")
            if verbose and result.text:
                self.output_fn(result.text)
        return result
