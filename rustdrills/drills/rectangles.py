"""Drills on writing tests: parity and validated rectangles."""

from __future__ import annotations

from dataclasses import dataclass


def is_even(num: int) -> bool:
    return num % 2 == 0


@dataclass(frozen=True)
class Rectangle:
    """A rectangle whose sides must both be positive."""

    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("Rectangle width and height cannot be negative!")