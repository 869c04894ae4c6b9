"""Checked conversion of integer triples into RGB colours."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


class IntoColorError(ValueError):
    """The values do not make a colour."""


class BadLenError(IntoColorError):
    """The sequence does not hold exactly three values."""

    def __init__(self) -> None:
        super().__init__("incorrect length of slice")


class IntConversionError(IntoColorError):
    """A component is outside 0..=255."""

    def __init__(self) -> None:
        super().__init__("integer conversion error")


@dataclass(frozen=True)
class Color:
    """An RGB colour with components in 0..=255."""

    red: int
    green: int
    blue: int

    @classmethod
    def from_tuple(cls, values: Sequence[int]) -> Color:
        """Build a colour from a red, green, blue triple."""
        red, green, blue = values
        if any(not 0 <= component <= 255 for component in (red, green, blue)):
            raise IntConversionError()
        return cls(red=red, green=green, blue=blue)

    @classmethod
    def from_sequence(cls, values: Sequence[int]) -> Color:
        """Build a colour from a sequence that must hold exactly three values."""
        if len(values) != 3:
            raise BadLenError()
        return cls.from_tuple(tuple(values))