"""Drills on string handling."""

from __future__ import annotations


def trim_me(text: str) -> str:
    """Drop leading spaces, then drop as many trailing characters as spaces remain."""
    trimmed_start = text.lstrip(" ")
    count = trimmed_start.count(" ")
    return trimmed_start[: len(trimmed_start) - count]


def compose_me(text: str) -> str:
    """Append " world!"."""
    return f"{text} world!"


def replace_me(text: str) -> str:
    """Replace every "cars" with "balloons"."""
    return text.replace("cars", "balloons")