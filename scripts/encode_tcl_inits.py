"""Regenerate src/stashell/tcl_inits.py from tcl/init.tcl."""

from __future__ import annotations

import sys
from pathlib import Path

from stashell.payload import decode, encode, render_module

ROOT = Path(__file__).resolve().parents[1]
SOURCE = ROOT / "tcl" / "init.tcl"
TARGET = ROOT / "src" / "stashell" / "tcl_inits.py"


def main() -> int:
    text = SOURCE.read_text(encoding="utf-8")
    fragments = encode(text)
    if decode(fragments) != text:
        print("Error: encoded payload does not round-trip", file=sys.stderr)
        return 1
    TARGET.write_text(
        render_module(fragments, "tcl/init.tcl"), encoding="utf-8"
    )
    print(f"Wrote {len(fragments)} fragments to {TARGET.relative_to(ROOT)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
