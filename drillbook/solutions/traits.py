"""Generic wrappers and shared behaviour across types."""

from __future__ import annotations

from dataclasses import dataclass
from functools import singledispatch
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass
class Wrapper(Generic[T]):
    """Holds a value of any type."""

    value: T


@singledispatch
def append_bar(value: object) -> object:
    """Append ``"Bar"`` to a string, or add ``"Bar"`` to a list of strings."""
    raise TypeError(f"cannot append Bar to {type(value).__name__}")


@append_bar.register
def _(value: str) -> str:
    return value + "Bar"


@append_bar.register
def _(value: list) -> list:
    return [*value, "Bar"]


class Licensed:
    """Anything that can describe its licence."""

    def licensing_info(self) -> str:
        return "Some information"


@dataclass
class SomeSoftware(Licensed):
    """Software versioned by a number."""

    version_number: int = 0


@dataclass
class OtherSoftware(Licensed):
    """Software versioned by a string."""

    version_number: str = ""


def compare_license_types(software: Licensed, software_two: Licensed) -> bool:
    """Whether two pieces of software carry the same licensing information."""
    return software.licensing_info() == software_two.licensing_info()