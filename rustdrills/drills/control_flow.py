"""Drills on conditionals and small functions."""

from __future__ import annotations

_HABITATS = {"crab": "Beach", "gopher": "Burrow", "snake": "Desert"}


def bigger(a: int, b: int) -> int:
    """The larger of two numbers."""
    return a if a > b else b


def foo_if_fizz(fizzish: str) -> str:
    """"foo" for "fizz", "bar" for "fuzz", otherwise "baz"."""
    if fizzish == "fizz":
        return "foo"
    if fizzish == "fuzz":
        return "bar"
    return "baz"


def animal_habitat(animal: str) -> str:
    """Where an animal lives, or "Unknown"."""
    return _HABITATS.get(animal, "Unknown")


def is_even(num: int) -> bool:
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Ten off even prices, three off odd ones."""
    return price - 10 if is_even(price) else price - 3