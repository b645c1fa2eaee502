"""Drills on reporting errors: name tags and token purchases."""

from __future__ import annotations

import re

_INTEGER = re.compile(r"[+-]?[0-9]+", re.ASCII)
_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1
_PROCESSING_FEE = 1
_COST_PER_ITEM = 5


def generate_nametag_text(name: str) -> str:
    """The text of a name tag; raise ValueError for an empty name."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def _parse_i32(text: str) -> int:
    if not text:
        raise ValueError("cannot parse integer from empty string")
    if not _INTEGER.fullmatch(text):
        raise ValueError("invalid digit found in string")
    value = int(text)
    if value > _I32_MAX:
        raise ValueError("number too large to fit in target type")
    if value < _I32_MIN:
        raise ValueError("number too small to fit in target type")
    return value


def total_cost(item_quantity: str) -> int:
    """Five tokens per item plus a one-token fee; raise ValueError if the quantity is not a number."""
    cost = _parse_i32(item_quantity) * _COST_PER_ITEM + _PROCESSING_FEE
    if not _I32_MIN <= cost <= _I32_MAX:
        raise OverflowError("total cost does not fit in a 32-bit integer")
    return cost


def remaining_tokens(tokens: int, item_quantity: str) -> int:
    """Tokens left after buying; raise ValueError if the purchase cannot be afforded."""
    cost = total_cost(item_quantity)
    if cost > tokens:
        raise ValueError("You can't afford that many!")
    return tokens - cost