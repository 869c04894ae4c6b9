"""A cons list, and taking absolute values without copying needlessly."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Cons:
    """A cons cell; ``None`` stands for the empty list."""

    head: int
    tail: Cons | None = None

    def __iter__(self) -> Iterator[int]:
        cell: Cons | None = self
        while cell is not None:
            yield cell.head
            cell = cell.tail


def create_empty_list() -> Cons | None:
    """The empty cons list."""
    return None


def create_non_empty_list() -> Cons:
    """The cons list 1, 2."""
    return Cons(1, Cons(2, None))


def abs_all(values: Sequence[int]) -> Sequence[int]:
    """Absolute values of ``values``.

    The input itself is returned when nothing is negative; otherwise a new
    list is built, copying only once a change is needed.
    """
    result: list[int] | None = None
    for index, value in enumerate(values):
        if value < 0:
            if result is None:
                result = list(values)
            result[index] = -value
    return values if result is None else result