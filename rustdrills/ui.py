"""Coloured status lines printed to the terminal."""

from __future__ import annotations

import os
import sys

_RED = "31"
_GREEN = "32"


def _emoji_disabled() -> bool:
    return "NO_EMOJI" in os.environ


def _paint(text: str, colour: str) -> str:
    isatty = getattr(sys.stdout, "isatty", None)
    if isatty is None or not isatty():
        return text
    return f"\x1b[{colour}m{text}\x1b[0m"


def warn(message: str) -> None:
    """Print a warning line in red."""
    symbol = "!" if _emoji_disabled() else "⚠️ "
    print(_paint(symbol, _RED), _paint(message, _RED))


def success(message: str) -> None:
    """Print a success line in green."""
    symbol = "✓" if _emoji_disabled() else "✅"
    print(_paint(symbol, _GREEN), _paint(message, _GREEN))