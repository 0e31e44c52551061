# StaShell™ — Tcl Command Shell for Static Timing Analysis
# Copyright (c) 2025
# TriFactoria (Andrew Blankfield)
#
# Licensed under the Business Source License 1.1 (BSL 1.1).
# You may use, modify, and redistribute this file under the terms of the BSL.
# On the Change Date (2029-01-01), this file will be licensed under
# the Apache License, Version 2.0.

"""
Command history persistence.

Plain text, one entry per line, newline terminated, no escaping. The file is
rewritten in full on every save (last writer wins when several shells share
a working directory).
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

log = logging.getLogger(__name__)

SAVE_MESSAGE = "Saving command history"


def is_storable(entry: str) -> bool:
    """True if ``entry`` can be written as a single history record."""
    return bool(entry) and "\n" not in entry and "\r" not in entry


def load_history(path: Path) -> list[str]:
    """Load history entries from ``path``, oldest first.

    A missing or unreadable file is an empty history. Empty lines are dropped.
    """
    entries: list[str] = []
    try:
        with path.open("r", encoding="utf-8", errors="replace") as f:
            for line in f:
                line = line.rstrip("\n")
                if line:
                    entries.append(line)
    except OSError as e:
        log.debug("no history loaded from %s: %s", path, e)
        return []

    log.debug("loaded %d history entries from %s", len(entries), path)
    return entries


def save_history(
    path: Path,
    entries: Iterable[str],
    output_fn=print,
) -> None:
    """Overwrite ``path`` with ``entries``, one per line.

    Announces the save through ``output_fn``. Entries that cannot be stored as
    a single line are skipped.

    Raises:
        OSError: the file could not be written
    """
    output_fn(SAVE_MESSAGE)
    lines = [entry for entry in entries if is_storable(entry)]
    with path.open("w", encoding="utf-8") as f:
        for line in lines:
            f.write(line + "\n")
    log.debug("saved %d history entries to %s", len(lines), path)
