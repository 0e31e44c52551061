# StaShell™ — Tcl Command Shell for Static Timing Analysis
# Copyright (c) 2025
# TriFactoria (Andrew Blankfield)
#
# Licensed under the Business Source License 1.1 (BSL 1.1).
# You may use, modify, and redistribute this file under the terms of the BSL.
# On the Change Date (2029-01-01), this file will be licensed under
# the Apache License, Version 2.0.

"""
Analysis engine collaborator.

The shell only forwards launch-time hints to the engine and asks it to define
its commands; timing analysis itself lives behind these commands.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .interfaces import Evaluator

log = logging.getLogger(__name__)


@dataclass
class StaEngine:
    """Engine state the shell hands launch options to."""

    version: str
    thread_count: int = 1

    def set_thread_count(self, count: int) -> None:
        log.debug("thread count %d", count)
        self.thread_count = count

    def register_commands(self, evaluator: Evaluator) -> None:
        evaluator.register_command("::sta::version", lambda: self.version)
        evaluator.register_command(
            "::sta::thread_count", lambda: str(self.thread_count)
        )
