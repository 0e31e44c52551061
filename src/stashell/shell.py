# StaShell™ — Tcl Command Shell for Static Timing Analysis
# Copyright (c) 2025
# TriFactoria (Andrew Blankfield)
#
# Licensed under the Business Source License 1.1 (BSL 1.1).
# You may use, modify, and redistribute this file under the terms of the BSL.
# On the Change Date (2029-01-01), this file will be licensed under
# the Apache License, Version 2.0.

"""
StaShell driver.

Sequences one shell session:
- evaluator setup (exit command, engine commands, completion hook)
- bootstrap script, banner, command import, user init file
- one-shot ``-x`` command and ``-f`` file
- the interactive read-eval loop
- history save and evaluator teardown

Important boundary:
- The driver does not interpret the command language. Everything the user
  types goes to the injected Evaluator.
- The only state shared with evaluation is ShellState.terminated, written by
  the exit command while an evaluation is in progress.
"""

from __future__ import annotations

import logging
import sys
import traceback
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path

from . import config as cfg_module
from .args import (
    THREADS_WARNING,
    LaunchArgs,
    ThreadCountError,
    thread_count_hint,
)
from .completion import complete
from .config import YAMLConfig
from .history import load_history, save_history
from .interfaces import Engine, EvalResult, Evaluator, LineEditor
from .payload import PayloadDecodeError, decode
from .tcl_inits import TCL_INITS

log = logging.getLogger(__name__)

REGENERATE_HINT = (
    "Try regenerating src/stashell/tcl_inits.py "
    "(scripts/encode_tcl_inits.py)."
)


class BootstrapError(RuntimeError):
    """The embedded bootstrap script could not be decoded or evaluated."""


class ShellPhase(Enum):
    CREATED = 0
    INITIALIZED = 1
    BOOTSTRAPPING = 2
    INTERACTIVE = 3
    TERMINATING = 4
    DONE = 5


@dataclass
class ShellState:
    """Termination signal shared with the exit command."""

    terminated: bool = False


def _print_err(text: str) -> None:
    print(text, file=sys.stderr)


def write_crash_log(error: Exception, raw_command: str = "") -> None:
    """Write an entry to the crash log.

    Logs unhandled exceptions raised while evaluating interactive input.
    Only creates the log directory when actually needed.
    Appends to crash.log (never overwrites).
    """
    try:
        crash_log = cfg_module.crash_log_path(cfg_module.get_data_root())
        crash_log.parent.mkdir(parents=True, exist_ok=True)

        lines = [datetime.now().isoformat()]
        if raw_command:
            lines.append(f"raw={raw_command}")
        lines.append(f"error={type(error).__name__}: {error}")
        lines.append("traceback:")
        lines.append(traceback.format_exc())
        lines.append("----")

        with crash_log.open("a", encoding="utf-8") as f:
            f.write("\n".join(lines) + "\n")

    except Exception:
        # Already reporting an error; nothing more to do.
        log.debug("could not write crash log", exc_info=True)


@dataclass
class Shell:
    """One StaShell session. Not restartable."""

    args: LaunchArgs
    evaluator: Evaluator
    editor: LineEditor
    engine: Engine
    config: YAMLConfig
    payload: Sequence[str] = TCL_INITS

    output_fn: Callable[[str], None] = print
    error_fn: Callable[[str], None] = _print_err

    phase: ShellPhase = ShellPhase.CREATED
    state: ShellState = field(default_factory=ShellState)

    def _enter(self, phase: ShellPhase) -> None:
        if phase.value != self.phase.value + 1:
            raise RuntimeError(
                f"cannot enter {phase.name} from {self.phase.name}"
            )
        log.debug("shell %s -> %s", self.phase.name, phase.name)
        self.phase = phase

    def _report(self, result: EvalResult) -> EvalResult:
        if not result.ok and result.text:
            self.error_fn(result.text)
        return result

    def _on_exit(self) -> None:
        self.state.terminated = True

    # ----------------------------------------------------------------
    # Phases
    # ----------------------------------------------------------------

    def apply_thread_hint(self) -> int | None:
        """Forward -threads to the engine; a bad value only warns."""
        try:
            count = thread_count_hint(self.args)
        except ThreadCountError:
            self.error_fn(THREADS_WARNING)
            return None
        if count is not None:
            self.engine.set_thread_count(count)
        return count

    def start(self) -> None:
        """CREATED -> INITIALIZED."""
        if self.phase is not ShellPhase.CREATED:
            raise RuntimeError(
                f"cannot enter INITIALIZED from {self.phase.name}"
            )
        self.apply_thread_hint()
        self.evaluator.register_exit(self._on_exit)
        self.editor.set_completion_hook(complete)
        self.evaluator.initialize()
        self.engine.register_commands(self.evaluator)
        self._enter(ShellPhase.INITIALIZED)

    def bootstrap(self) -> None:
        """INITIALIZED -> BOOTSTRAPPING.

        Raises:
            BootstrapError: the embedded script is corrupt or fails
        """
        self._enter(ShellPhase.BOOTSTRAPPING)
        try:
            script = decode(self.payload)
        except PayloadDecodeError as e:
            raise BootstrapError(str(e)) from e

        result = self.evaluator.eval(script)
        if not result.ok:
            trace = self.evaluator.eval("set ::errorInfo")
            raise BootstrapError(
                trace.text if trace.ok and trace.text else result.text
            )

        if not self.args.has_flag("-no_splash"):
            self._report(self.evaluator.eval("sta::show_splash"))

        self._report(self.evaluator.eval("sta::define_sta_cmds"))
        self._report(self.evaluator.eval("namespace import sta::*"))

        if not self.args.has_flag("-no_init"):
            self.source_init_file()

    def source_init_file(self) -> None:
        init_path = self.config.init_path
        if not init_path.is_file():
            log.debug("no init file at %s", init_path)
            return
        self._report(
            self.evaluator.source_file(init_path, echo=True, verbose=True)
        )

    def run_one_shots(self) -> None:
        """-x is evaluated before -f; exit stops anything left."""
        if self.state.terminated:
            return

        command = self.args.get_value("-x")
        if command is not None:
            self._report(self.evaluator.eval(command))
            if self.state.terminated:
                return

        cmd_file = self.args.get_value("-f")
        if cmd_file is not None:
            self._report(
                self.evaluator.source_file(
                    Path(cmd_file), echo=True, verbose=True
                )
            )

    def interact(self) -> None:
        """BOOTSTRAPPING -> INTERACTIVE; returns at EOF or exit."""
        self._enter(ShellPhase.INTERACTIVE)

        for entry in load_history(self.config.history_path):
            self.editor.add_history(entry)

        prompt = self.config.prompt
        while not self.state.terminated:
            try:
                line = self.editor.read_line(prompt)
            except KeyboardInterrupt:
                continue
            if line is None:
                break

            try:
                self._report(self.evaluator.eval(line))
            except Exception as e:
                write_crash_log(e, raw_command=line)
                self.error_fn(
                    f"[ERROR] Unhandled exception: {type(e).__name__}: {e}"
                )

            if line:
                self.editor.add_history(line)

    def save_history(self) -> None:
        path = self.config.history_path
        try:
            save_history(path, self.editor.history_entries(), self.output_fn)
        except OSError as e:
            self.error_fn(f"Warning: could not save command history: {e}")

    def shutdown(self) -> None:
        """INTERACTIVE -> TERMINATING -> DONE."""
        self._enter(ShellPhase.TERMINATING)
        self.save_history()
        self.evaluator.finalize()
        self._enter(ShellPhase.DONE)

    def run(self) -> None:
        """Run the whole session.

        Raises:
            BootstrapError: fatal; history is not saved and the evaluator is
                left as is
        """
        self.start()
        self.bootstrap()
        self.run_one_shots()
        self.interact()
        self.shutdown()
