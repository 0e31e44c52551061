# StaShell™ — Tcl Command Shell for Static Timing Analysis
# Copyright (c) 2025
# TriFactoria (Andrew Blankfield)
#
# Licensed under the Business Source License 1.1 (BSL 1.1).
# You may use, modify, and redistribute this file under the terms of the BSL.
# On the Change Date (2029-01-01), this file will be licensed under
# the Apache License, Version 2.0.

"""
StaShell CLI entry point.

Design:
- CLI owns process startup: -help/-version, logging, exit status.
- Shell is the session driver (evaluator + editor + engine injected).
- UI is a PromptSession editor on a terminal, plain input() otherwise.
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Sequence

from . import __version__, config
from .args import LaunchArgs
from .engine import StaEngine
from .interfaces import LineEditor
from .shell import REGENERATE_HINT, BootstrapError, Shell
from .ui import PlainEditor, PromptToolkitEditor

log = logging.getLogger(__name__)


def usage(program: str) -> str:
    return "\n".join(
        [
            f"Usage: {program} [-help] [-version] [-no_init] [-no_splash] "
            "[-x cmd] [-f cmd_file] [-threads count|max]",
            "  -help              show help and exit",
            "  -version           show version and exit",
            "  -no_init           do not read .sta init file",
            "  -no_splash         do not show the startup banner",
            "  -x cmd             evaluate cmd",
            "  -f cmd_file        source cmd_file",
            "  -threads count|max use count threads",
        ]
    )


def _setup_logging() -> None:
    level = os.environ.get("STASHELL_LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _make_editor(cfg: config.YAMLConfig) -> LineEditor:
    if os.environ.get("STASHELL_LEGACY_UI") == "1" or not sys.stdin.isatty():
        return PlainEditor()
    return PromptToolkitEditor(cfg)


def build_shell(argv: Sequence[str]) -> Shell:
    """Explicit wiring: config + evaluator + editor + engine."""
    # tkinter (and with it Tcl) is packaged separately on some distributions.
    from .evaluator import TclEvaluator

    args = LaunchArgs.from_argv(argv)
    cfg = config.load_shell_config()
    return Shell(
        args=args,
        evaluator=TclEvaluator(argv=args.argv),
        editor=_make_editor(cfg),
        engine=StaEngine(version=__version__),
        config=cfg,
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point for StaShell."""
    args = LaunchArgs.from_argv(sys.argv if argv is None else argv)

    if args.has_flag("-help"):
        print(usage(args.program))
        return 0
    if args.has_flag("-version"):
        print(__version__)
        return 0

    _setup_logging()
    log.debug("argv=%s", args.argv)
    shell = build_shell(args.argv)
    try:
        shell.run()
    except BootstrapError as e:
        print(f"Error: bootstrap script: {e}.", file=sys.stderr)
        print(f"       {REGENERATE_HINT}", file=sys.stderr)
        return 1
    return 0


def entrypoint() -> None:
    """Console script entrypoint."""
    raise SystemExit(main())
