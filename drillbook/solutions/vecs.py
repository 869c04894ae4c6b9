"""Vector exercises: building lists and doubling their elements."""

from __future__ import annotations

from collections.abc import Iterable


def array_and_vec() -> tuple[tuple[int, ...], list[int]]:
    """Return a fixed tuple and a list holding the same elements."""
    fixed = (10, 20, 30, 40)
    values = [10, 20, 30, 40]
    return fixed, values


def vec_loop(values: list[int]) -> list[int]:
    """Double every element of ``values`` in place and return it."""
    values[:] = [element * 2 for element in values]
    return values


def vec_map(values: Iterable[int]) -> list[int]:
    """Return a new list with every element doubled."""
    return [element * 2 for element in values]