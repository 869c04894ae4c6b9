"""Iterator exercises: capitalising words, division results and counting progress."""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping, Sequence
from enum import Enum


def capitalize_first(text: str) -> str:
    """Uppercase the first character: ``"hello"`` becomes ``"Hello"``."""
    if not text:
        return ""
    return text[0].upper() + text[1:]


def capitalize_words_vector(words: Iterable[str]) -> list[str]:
    """Capitalise each word."""
    return [capitalize_first(word) for word in words]


def capitalize_words_string(words: Iterable[str]) -> str:
    """Capitalise each word and join them without a separator."""
    return "".join(capitalize_words_vector(words))


class DivisionError(Exception):
    """A division that does not give a whole result."""


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
        return hash((self.dividend, self.divisor))


class DivideByZeroError(DivisionError):
    """The divisor is zero."""

    def __init__(self) -> None:
        super().__init__("divide by zero")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DivideByZeroError):
            return NotImplemented
        return True

    def __hash__(self) -> int:
        return hash(DivideByZeroError)


def divide(a: int, b: int) -> int:
    """Divide ``a`` by ``b`` when ``b`` divides it evenly."""
    if b == 0:
        raise DivideByZeroError()
    quotient, remainder = divmod(abs(a), abs(b))
    if remainder:
        raise NotDivisibleError(a, b)
    return quotient if (a >= 0) == (b > 0) else -quotient


_NUMBERS = (27, 297, 38502, 81)


def result_with_list() -> list[int]:
    """Divide each number by 27; the first error is raised."""
    return [divide(n, 27) for n in _NUMBERS]


def _try_divide(a: int, b: int) -> int | DivisionError:
    try:
        return divide(a, b)
    except DivisionError as exc:
        return exc


def list_of_results() -> list[int | DivisionError]:
    """Divide each number by 27, keeping each result or error."""
    return [_try_divide(n, 27) for n in _NUMBERS]


def factorial(num: int) -> int:
    """Return ``num!``; zero and one give one."""
    if num < 0:
        raise ValueError("factorial is not defined for negative numbers")
    return math.prod(range(1, num + 1))


class Progress(Enum):
    """How far an exercise has got."""

    NONE = "none"
    SOME = "some"
    COMPLETE = "complete"


def count_for(progress_map: Mapping[str, Progress], value: Progress) -> int:
    """Count entries equal to ``value`` with an explicit loop."""
    count = 0
    for entry in progress_map.values():
        if entry == value:
            count += 1
    return count


def count_iterator(progress_map: Mapping[str, Progress], value: Progress) -> int:
    """Count entries equal to ``value``."""
    return sum(1 for entry in progress_map.values() if entry == value)


def count_collection_for(
    collection: Sequence[Mapping[str, Progress]], value: Progress
) -> int:
    """Count entries equal to ``value`` across maps with explicit loops."""
    count = 0
    for progress_map in collection:
        for entry in progress_map.values():
            if entry == value:
                count += 1
    return count


def count_collection_iterator(
    collection: Sequence[Mapping[str, Progress]], value: Progress
) -> int:
    """Count entries equal to ``value`` across maps."""
    return sum(count_iterator(progress_map, value) for progress_map in collection)