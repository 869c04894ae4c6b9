"""Error handling: name tags, token costs and positive non-zero integers."""

from __future__ import annotations

import re
from dataclasses import dataclass

_INTEGER = re.compile(r"[+-]?[0-9]+")
_I32 = 32
_I64 = 64
_PROCESSING_FEE = 1
_COST_PER_ITEM = 5


def _parse_int(text: str, bits: int) -> int:
    """Parse a signed integer of ``bits`` width, rejecting anything else."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    if not _INTEGER.fullmatch(text):
        raise ValueError("invalid digit found in string")
    value = int(text)
    if value > 2 ** (bits - 1) - 1:
        raise ValueError("number too large to fit in target type")
    if value < -(2 ** (bits - 1)):
        raise ValueError("number too small to fit in target type")
    return value


def generate_nametag_text(name: str) -> str:
    """Return the name tag text; an empty name is refused with a reason."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Cost of buying the typed quantity of items, including the processing fee."""
    quantity = _parse_int(item_quantity, _I32)
    cost = quantity * _COST_PER_ITEM + _PROCESSING_FEE
    if not -(2 ** (_I32 - 1)) <= cost <= 2 ** (_I32 - 1) - 1:
        raise OverflowError("attempt to compute the cost with overflow")
    return cost


class CreationError(Exception):
    """The value cannot be a positive non-zero integer."""

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CreationError):
            return NotImplemented
        return type(self) is type(other)

    def __hash__(self) -> int:
        return hash(type(self))


class NegativeError(CreationError):
    """The value is negative."""

    def __init__(self) -> None:
        super().__init__("number is negative")


class ZeroError(CreationError):
    """The value is zero."""

    def __init__(self) -> None:
        super().__init__("number is zero")


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer greater than zero."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise NegativeError()
        if self.value == 0:
            raise ZeroError()


class ParsePosNonzeroError(ValueError):
    """Text could not be turned into a positive non-zero integer.

    ``cause`` holds either the integer parsing error or the CreationError.
    """

    def __init__(self, cause: Exception) -> None:
        super().__init__(str(cause))
        self.cause = cause

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParsePosNonzeroError):
            return NotImplemented
        return type(self.cause) is type(other.cause) and str(self.cause) == str(other.cause)

    def __hash__(self) -> int:
        return hash((type(self.cause), str(self.cause)))


def parse_pos_nonzero(text: str) -> PositiveNonzeroInteger:
    """Parse ``text`` as a positive non-zero integer."""
    try:
        value = _parse_int(text, _I64)
    except ValueError as exc:
        raise ParsePosNonzeroError(exc) from exc
    try:
        return PositiveNonzeroInteger(value)
    except CreationError as exc:
        raise ParsePosNonzeroError(exc) from exc