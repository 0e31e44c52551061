# StaShell™ — Tcl Command Shell for Static Timing Analysis
# Copyright (c) 2025
# TriFactoria (Andrew Blankfield)
#
# Licensed under the Business Source License 1.1 (BSL 1.1).
# You may use, modify, and redistribute this file under the terms of the BSL.
# On the Change Date (2029-01-01), this file will be licensed under
# the Apache License, Version 2.0.

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from prompt_toolkit import PromptSession
from prompt_toolkit.history import History
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.patch_stdout import patch_stdout
from prompt_toolkit.styles import Style

from .completion import CommandCompleter
from .config import YAMLConfig
from .history import is_storable

log = logging.getLogger(__name__)


# ----------------------------
# Theme / Style
# ----------------------------


def _default_style_dict() -> dict[str, str]:
    return {
        "completion-menu": "bg:#111111 #d0d0d0",
        "completion-menu.completion": "bg:#111111 #d0d0d0",
        "completion-menu.completion.current": "bg:#303030 #ffffff bold",
        "completion-menu.meta.completion": "bg:#111111 #808080",
        "completion-menu.meta.completion.current": "bg:#303030 #a0a0a0",
        "scrollbar.background": "bg:#202020",
        "scrollbar.button": "bg:#505050",
    }


def _build_style(config: YAMLConfig | None) -> Style:
    base = _default_style_dict()
    overrides = (
        config.get_path("ui.theme.style", {}) if config is not None else {}
    )
    if isinstance(overrides, dict):
        # only keep string->string
        for k, v in overrides.items():
            if isinstance(k, str) and isinstance(v, str):
                base[k] = v
    return Style.from_dict(base)


# ----------------------------
# History
# ----------------------------


class EntryHistory(History):
    """prompt_toolkit history backed by a plain list of entries.

    ``entries`` (oldest first) is what gets persisted. prompt_toolkit keeps
    its own recall list for arrow-key navigation, fed from ``entries`` on
    first load and from accepted input afterwards.
    """

    def __init__(self) -> None:
        super().__init__()
        self.entries: list[str] = []

    def load_history_strings(self) -> Iterable[str]:
        # prompt_toolkit expects newest first.
        yield from reversed(self.entries)

    def store_string(self, string: str) -> None:
        # Persisted entries are appended by add_history().
        pass


def _add_entry(entries: list[str], line: str) -> None:
    if not is_storable(line):
        log.debug("not adding %r to history", line)
        return
    entries.append(line)


# ----------------------------
# Line editors
# ----------------------------


class PromptToolkitEditor:
    """
    Terminal line editor on a PromptSession:
      - Keeps normal terminal scrollback.
      - Tab completes command names through the installed completion hook.
      - Up/Down recall history, including entries loaded at startup.
    """

    def __init__(self, config: YAMLConfig | None = None) -> None:
        self.config = config
        self.history = EntryHistory()
        self.session: PromptSession[str] | None = None
        self._completer: CommandCompleter | None = None
        self._style = _build_style(config)

    def _complete_while_typing(self) -> bool:
        if self.config is None:
            return False
        return bool(self.config.get_path("ui.complete_while_typing", False))

    def _ensure_session(self) -> None:
        if self.session is not None:
            return

        self.session = PromptSession(
            history=self.history,
            key_bindings=self.build_key_bindings(),
            completer=self._completer,
            complete_while_typing=self._complete_while_typing(),
            style=self._style,
        )

    # ---------- LineEditor ----------

    def read_line(self, prompt: str) -> str | None:
        self._ensure_session()
        assert self.session is not None

        with patch_stdout():
            try:
                return self.session.prompt(prompt)
            except EOFError:
                return None

    def add_history(self, line: str) -> None:
        _add_entry(self.history.entries, line)

    def history_entries(self) -> list[str]:
        return list(self.history.entries)

    def set_completion_hook(
        self, hook: Callable[[str], Iterable[str]]
    ) -> None:
        self._completer = CommandCompleter(hook)
        if self.session is not None:
            self.session.completer = self._completer

    # ---------- keybindings ----------

    def build_key_bindings(self) -> KeyBindings:
        kb = KeyBindings()

        @kb.add("c-l")
        def _(event):
            event.app.renderer.clear()
            event.app.invalidate()

        return kb


class PlainEditor:
    """Line editor over ``input()``, for pipes and dumb terminals.

    Completion hooks are accepted but unused.
    """

    def __init__(
        self, input_fn: Callable[[str], str] = input
    ) -> None:
        self.input_fn = input_fn
        self.entries: list[str] = []
        self.completion_hook: Callable[[str], Iterable[str]] | None = None

    def read_line(self, prompt: str) -> str | None:
        try:
            return self.input_fn(prompt)
        except EOFError:
            return None

    def add_history(self, line: str) -> None:
        _add_entry(self.entries, line)

    def history_entries(self) -> list[str]:
        return list(self.entries)

    def set_completion_hook(
        self, hook: Callable[[str], Iterable[str]]
    ) -> None:
        self.completion_hook = hook
