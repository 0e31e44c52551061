# StaShell™ — Tcl Command Shell for Static Timing Analysis
# Copyright (c) 2025
# TriFactoria (Andrew Blankfield)
#
# Licensed under the Business Source License 1.1 (BSL 1.1).
# You may use, modify, and redistribute this file under the terms of the BSL.
# On the Change Date (2029-01-01), this file will be licensed under
# the Apache License, Version 2.0.

"""
Launch argument scanning.

StaShell flags are single-dash words (``-no_init``, ``-threads 4``) that are
looked up by exact token match rather than parsed up front: the first
occurrence of a flag wins and unknown tokens are left alone.
"""

from __future__ import annotations

import os
from collections.abc import Sequence
from dataclasses import dataclass

THREADS_WARNING = "Warning: -threads must be max or a positive integer."


class ThreadCountError(ValueError):
    """Raised for a -threads value that is neither 'max' nor a count."""


@dataclass(frozen=True)
class LaunchArgs:
    """Read-only view of the process argument list.

    ``argv[0]`` is the program name and is never matched.
    """

    argv: tuple[str, ...]

    @classmethod
    def from_argv(cls, argv: Sequence[str]) -> LaunchArgs:
        return cls(tuple(argv))

    @property
    def program(self) -> str:
        return self.argv[0] if self.argv else "stashell"

    def has_flag(self, name: str) -> bool:
        return has_flag(self.argv, name)

    def get_value(self, name: str) -> str | None:
        return get_value(self.argv, name)


def has_flag(argv: Sequence[str], name: str) -> bool:
    """True if ``name`` appears as a token after the program name."""
    for arg in argv[1:]:
        if arg == name:
            return True
    return False


def get_value(argv: Sequence[str], name: str) -> str | None:
    """Return the token following the first ``name`` in ``argv``.

    A flag given as the last token has no value and yields None.
    """
    for i in range(1, len(argv)):
        if argv[i] == name:
            if i + 1 < len(argv):
                return argv[i + 1]
            return None
    return None


def parse_thread_count(value: str) -> int:
    """Resolve a -threads value to a worker count.

    Args:
        value: "max" or a string of decimal digits

    Returns:
        Host processor count for "max", otherwise the integer value

    Raises:
        ThreadCountError: value is not "max" or is not a positive integer
    """
    if value == "max":
        return os.cpu_count() or 1
    if value.isascii() and value.isdigit():
        count = int(value)
        if count > 0:
            return count
    raise ThreadCountError(value)


def thread_count_hint(args: LaunchArgs) -> int | None:
    """Thread count requested by ``-threads``, or None.

    A malformed value is not fatal: callers report THREADS_WARNING and carry
    on without a hint.
    """
    value = args.get_value("-threads")
    if value is None:
        return None
    return parse_thread_count(value)
