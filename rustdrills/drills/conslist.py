"""A cons list: each cell holds a value and the rest of the list; None is the empty list."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class Cons:
    """One cell of a cons list."""

    value: int
    next: Cons | None = None

    def __iter__(self) -> Iterator[int]:
        cell: Cons | None = self
        while cell is not None:
            yield cell.value
            cell = cell.next


def create_empty_list() -> Cons | None:
    """The empty list."""
    return None


def create_non_empty_list() -> Cons:
    """A list holding the single value 32."""
    return Cons(32, create_empty_list())