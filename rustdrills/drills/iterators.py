"""Drills on iteration: capitalising words, division results and factorials."""

from __future__ import annotations

import math
from typing import Iterable

_NUMBERS = (27, 297, 38502, 81)
_DIVISOR = 27


def capitalize_first(text: str) -> str:
    """Upper-case the first character.

    A one-byte input comes back as a single space.
    """
    if not text:
        return ""
    if len(text.encode("utf-8")) == 1:
        return " "
    return text[0].upper() + text[1:]


def capitalize_words_vector(words: Iterable[str]) -> list[str]:
    """Capitalise every word."""
    return [capitalize_first(word) for word in words]


def capitalize_words_string(words: Iterable[str]) -> str:
    """Capitalise every word and join them together."""
    return "".join(capitalize_first(word) for word in words)


class DivisionError(ArithmeticError):
    """A division that cannot produce a whole quotient."""


class NotDivisibleError(DivisionError):
    """The dividend is not a multiple of the divisor."""

    def __init__(self, dividend: int, divisor: int) -> None:
        super().__init__(f"{dividend} is not divisible by {divisor}")
        self.dividend = dividend
        self.divisor = divisor

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NotDivisibleError):
            return NotImplemented
        return (self.dividend, self.divisor) == (other.dividend, other.divisor)

    def __hash__(self) -> int:
        return hash((NotDivisibleError, self.dividend, self.divisor))


class DivideByZeroError(DivisionError):
    """The divisor is zero."""

    def __init__(self) -> None:
        super().__init__("division by zero")


def divide(a: int, b: int) -> int:
    """a divided by b when b divides a evenly; raise a DivisionError otherwise."""
    if b == 0:
        raise DivideByZeroError()
    if a % b != 0:
        raise NotDivisibleError(a, b)
    return a // b


def result_with_list() -> list[int]:
    """Quotients of the sample numbers by 27, leaving out any that do not divide."""
    quotients = []
    for number in _NUMBERS:
        try:
            quotients.append(divide(number, _DIVISOR))
        except DivisionError:
            continue
    return quotients


def list_of_results() -> list[int]:
    """Quotients of the sample numbers by 27; raise if any does not divide."""
    return [divide(number, _DIVISOR) for number in _NUMBERS]


def factorial(num: int) -> int:
    """num! for a non-negative num."""
    if num < 0:
        raise ValueError("factorial is not defined for negative numbers")
    return math.prod(range(1, num + 1))