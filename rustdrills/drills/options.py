"""Drills on optional values."""

from __future__ import annotations


def maybe_icecream(time_of_day: int) -> int | None:
    """Pieces of ice cream left at an hour of the day; None past hour 24."""
    if time_of_day < 0:
        raise ValueError("time_of_day must not be negative")
    if time_of_day > 24:
        return None
    return 5 if time_of_day < 22 else 0