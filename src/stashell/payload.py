# StaShell™ — Tcl Command Shell for Static Timing Analysis
# Copyright (c) 2025
# TriFactoria (Andrew Blankfield)
#
# Licensed under the Business Source License 1.1 (BSL 1.1).
# You may use, modify, and redistribute this file under the terms of the BSL.
# On the Change Date (2029-01-01), this file will be licensed under
# the Apache License, Version 2.0.

"""
Embedded script payload codec.

The bootstrap Tcl script is shipped inside the package as a tuple of
fragments, each a run of fixed-width decimal byte codes ("035033" is "#!").
Digits survive any host text format without quoting concerns.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

CODE_WIDTH = 3
FRAGMENT_BYTES = 24


class PayloadDecodeError(ValueError):
    """The encoded payload is malformed and cannot be decoded."""


def decode(fragments: Sequence[str]) -> str:
    """Decode a sequence of encoded fragments into script text.

    Args:
        fragments: Encoded fragments, concatenated in order

    Returns:
        The decoded UTF-8 script text

    Raises:
        PayloadDecodeError: total length is not a multiple of CODE_WIDTH,
            a window is not a decimal byte code in [0, 255], or the decoded
            bytes are not valid UTF-8
    """
    total = sum(len(fragment) for fragment in fragments)
    if total % CODE_WIDTH:
        raise PayloadDecodeError(
            f"encoded length {total} is not a multiple of {CODE_WIDTH}"
        )

    out = bytearray()
    for index, fragment in enumerate(fragments):
        # Windows never straddle fragments.
        if len(fragment) % CODE_WIDTH:
            raise PayloadDecodeError(
                f"fragment {index} has length {len(fragment)}, "
                f"not a multiple of {CODE_WIDTH}"
            )
        for start in range(0, len(fragment), CODE_WIDTH):
            code = fragment[start:start + CODE_WIDTH]
            if not (code.isascii() and code.isdigit()):
                raise PayloadDecodeError(
                    f"fragment {index} offset {start}: "
                    f"{code!r} is not a decimal byte code"
                )
            value = int(code)
            if value > 255:
                raise PayloadDecodeError(
                    f"fragment {index} offset {start}: "
                    f"{value} is out of byte range"
                )
            out.append(value)

    try:
        return out.decode("utf-8")
    except UnicodeDecodeError as e:
        raise PayloadDecodeError(f"payload is not UTF-8: {e}") from e


def encode(text: str, fragment_bytes: int = FRAGMENT_BYTES) -> tuple[str, ...]:
    """Encode script text into fragments of at most ``fragment_bytes`` bytes."""
    if fragment_bytes < 1:
        raise ValueError("fragment_bytes must be positive")

    data = text.encode("utf-8")
    return tuple(
        "".join(f"{b:03d}" for b in data[i:i + fragment_bytes])
        for i in range(0, len(data), fragment_bytes)
    )


def render_module(fragments: Iterable[str], source_name: str) -> str:
    """Render the Python module that embeds ``fragments``."""
    lines = [
        f'"""Encoded bootstrap script generated from {source_name}.',
        "",
        "Do not edit: regenerate with scripts/encode_tcl_inits.py.",
        '"""',
        "",
        "TCL_INITS = (",
    ]
    lines.extend(f'    "{fragment}",' for fragment in fragments)
    lines.append(")")
    return "\n".join(lines) + "\n"
