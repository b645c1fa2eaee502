"""Drills on generic wrappers and shared behaviour."""

from __future__ import annotations

from dataclasses import dataclass
from functools import singledispatch
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Wrapper(Generic[T]):
    """Holds a value of any type."""

    value: T


@singledispatch
def append_bar(value):
    """Append "Bar" to a string, or the item "Bar" to a list of strings."""
    raise TypeError(f"cannot append Bar to {type(value).__name__}")


@append_bar.register
def _(value: str) -> str:
    return value + "Bar"


@append_bar.register
def _(value: list) -> list:
    return [*value, "Bar"]


class Licensed:
    """Anything that carries licensing information."""

    def licensing_info(self) -> str:
        return "Some information"


@dataclass
class SomeSoftware(Licensed):
    version_number: int = 0


@dataclass
class OtherSoftware(Licensed):
    version_number: str = ""


def compare_license_types(software: Licensed, software_two: Licensed) -> bool:
    """Whether two licensed items carry the same licensing information."""
    return software.licensing_info() == software_two.licensing_info()


class SomeTrait:
    def some_function(self) -> bool:
        return True


class OtherTrait:
    def other_function(self) -> bool:
        return True


class SomeStruct(SomeTrait, OtherTrait):
    pass


class OtherStruct(SomeTrait, OtherTrait):
    pass


def some_func(item: SomeTrait) -> bool:
    """Call both trait functions on an item that has both."""
    if not isinstance(item, SomeTrait) or not isinstance(item, OtherTrait):
        raise TypeError("item must provide both SomeTrait and OtherTrait")
    return item.some_function() and item.other_function()