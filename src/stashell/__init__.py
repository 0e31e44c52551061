# StaShell™ — Tcl Command Shell for Static Timing Analysis
# Copyright (c) 2025
# TriFactoria (Andrew Blankfield)
#
# Licensed under the Business Source License 1.1 (BSL 1.1).
# You may use, modify, and redistribute this file under the terms of the BSL.
# On the Change Date (2029-01-01), this file will be licensed under
# the Apache License, Version 2.0.

"""
StaShell core package.

Bootstraps a Tcl evaluator with an embedded init script and drives an
interactive, history-backed command shell on top of it.
"""
__version__ = "2.0.17"

from .shell import Shell as Shell  # noqa: E402,F401 (re-export)
