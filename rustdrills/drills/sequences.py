"""Drills on lists: copying, doubling and filling."""

from __future__ import annotations


def array_and_vec() -> tuple[tuple[int, ...], list[int]]:
    """A fixed tuple and a list holding the same elements."""
    a = (10, 20, 30, 40)
    return a, list(a)


def vec_loop(values: list[int]) -> list[int]:
    """Double every element in place and return the same list."""
    values[:] = [value * 2 for value in values]
    return values


def vec_map(values: list[int]) -> list[int]:
    """A new list with every element doubled."""
    return [value * 2 for value in values]


def fill_vec(values: list[int]) -> list[int]:
    """A copy of values with 88 appended; values is left alone."""
    return [*values, 88]


def fill_vec_in_place(values: list[int]) -> list[int]:
    """Append 88 to values and return a copy of the result."""
    values.append(88)
    return list(values)


def make_filled_vec() -> list[int]:
    """A freshly built list ending in 88."""
    values = [22, 44, 66]
    values.append(88)
    return values