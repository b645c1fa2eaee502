"""Quiz drills: apple pricing, a string transformer and report cards."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Generic, Iterable, TypeVar

T = TypeVar("T")


def calculate_price_of_apples(apples: int) -> int:
    """Two per apple, or one per apple when buying more than 40."""
    return apples if apples > 40 else apples * 2


class Command(enum.Enum):
    """Transformations that take no argument."""

    UPPERCASE = "uppercase"
    TRIM = "trim"


@dataclass(frozen=True)
class Append:
    """Append "bar" the given number of times."""

    times: int

    def __post_init__(self) -> None:
        if self.times < 0:
            raise ValueError("times must not be negative")


def _apply(text: str, command: Command | Append) -> str:
    match command:
        case Command.UPPERCASE:
            return text.upper()
        case Command.TRIM:
            return text.strip()
        case Append(times=times):
            return text + "bar" * times
    raise TypeError(f"unknown command: {command!r}")


def transformer(inputs: Iterable[tuple[str, Command | Append]]) -> list[str]:
    """Apply each command to its string."""
    return [_apply(text, command) for text, command in inputs]


@dataclass
class ReportCard(Generic[T]):
    """A report card whose grade may be of any printable type."""

    grade: T
    student_name: str
    student_age: int

    def print(self) -> str:
        return (
            f"{self.student_name} ({self.student_age}) - "
            f"achieved a grade of {self.grade}"
        )