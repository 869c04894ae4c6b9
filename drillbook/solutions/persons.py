"""Building a Person from ``"name,age"`` text, leniently or strictly."""

from __future__ import annotations

import re
from dataclasses import dataclass

_SIGNED_DIGITS = re.compile(r"[+-]?[0-9]+")
_UNSIGNED_DIGITS = re.compile(r"\+?[0-9]+")
_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1
_WORD = 1 << 64
_USIZE_MAX = _WORD - 1


class ParsePersonError(ValueError):
    """The text does not describe a person."""


class EmptyError(ParsePersonError):
    """The input text is empty."""

    def __init__(self) -> None:
        super().__init__("empty input")


class BadLenError(ParsePersonError):
    """The text does not hold exactly two fields."""

    def __init__(self) -> None:
        super().__init__("incorrect number of fields")


class NoNameError(ParsePersonError):
    """The name field is empty."""

    def __init__(self) -> None:
        super().__init__("empty name field")


class ParseIntError(ParsePersonError):
    """The age field is not a valid number."""


def _parse_int(text: str, pattern: re.Pattern[str], low: int, high: int) -> int:
    if not text:
        raise ParseIntError("cannot parse integer from empty string")
    if not pattern.fullmatch(text):
        raise ParseIntError("invalid digit found in string")
    value = int(text)
    if value > high:
        raise ParseIntError("number too large to fit in target type")
    if value < low:
        raise ParseIntError("number too small to fit in target type")
    return value


@dataclass
class Person:
    """A person with a name and an age."""

    name: str
    age: int

    @classmethod
    def default(cls) -> Person:
        """The fallback person: John, 30."""
        return cls(name="John", age=30)

    @classmethod
    def from_text(cls, text: str) -> Person:
        """Build a person from ``"name,age"``, falling back to the default."""
        if not text:
            return cls.default()
        fields = text.split(",")
        name = fields[0]
        if not name or len(fields) < 2:
            return cls.default()
        try:
            age = _parse_int(fields[1], _SIGNED_DIGITS, _I32_MIN, _I32_MAX)
        except ParseIntError:
            return cls.default()
        # A negative age wraps around to an unsigned word-sized value.
        return cls(name=name, age=age % _WORD)


def parse_person(text: str) -> Person:
    """Parse ``"name,age"`` strictly, raising a ParsePersonError subclass."""
    if not text:
        raise EmptyError()
    fields = text.split(",")
    if len(fields) != 2:
        raise BadLenError()
    name, age_text = fields
    if not name:
        raise NoNameError()
    age = _parse_int(age_text, _UNSIGNED_DIGITS, 0, _USIZE_MAX)
    return Person(name=name, age=age)