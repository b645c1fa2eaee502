"""Drills on positive non-zero integers and the errors raised when building them."""

from __future__ import annotations

import re
from dataclasses import dataclass

_INTEGER = re.compile(r"[+-]?[0-9]+", re.ASCII)
_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1


class CreationError(ValueError):
    """A value that cannot become a positive non-zero integer."""

    NEGATIVE = "negative"
    ZERO = "zero"

    _DESCRIPTIONS = {NEGATIVE: "number is negative", ZERO: "number is zero"}

    def __init__(self, kind: str) -> None:
        if kind not in self._DESCRIPTIONS:
            raise TypeError(f"unknown creation error kind: {kind!r}")
        super().__init__(self._DESCRIPTIONS[kind])
        self.kind = kind

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CreationError):
            return NotImplemented
        return self.kind == other.kind

    def __hash__(self) -> int:
        return hash((CreationError, self.kind))

    def __repr__(self) -> str:
        return f"CreationError({self.kind!r})"


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer greater than zero."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise CreationError(CreationError.NEGATIVE)
        if self.value == 0:
            raise CreationError(CreationError.ZERO)


class ParsePosNonzeroError(ValueError):
    """Parsing text into a positive non-zero integer failed.

    ``error`` holds the cause: a CreationError when the number was out of
    range, or a plain ValueError when the text was not an integer.
    """

    def __init__(self, error: ValueError) -> None:
        super().__init__(str(error))
        self.error = error

    @property
    def is_creation(self) -> bool:
        return isinstance(self.error, CreationError)


def _parse_i64(text: str) -> int:
    if not text:
        raise ValueError("cannot parse integer from empty string")
    if not _INTEGER.fullmatch(text):
        raise ValueError("invalid digit found in string")
    value = int(text)
    if value > _I64_MAX:
        raise ValueError("number too large to fit in target type")
    if value < _I64_MIN:
        raise ValueError("number too small to fit in target type")
    return value


def parse_pos_nonzero(text: str) -> PositiveNonzeroInteger:
    """Parse text as a positive non-zero integer; raise ParsePosNonzeroError otherwise."""
    try:
        value = _parse_i64(text)
    except ValueError as exc:
        raise ParsePosNonzeroError(exc) from exc
    try:
        return PositiveNonzeroInteger(value)
    except CreationError as exc:
        raise ParsePosNonzeroError(exc) from exc