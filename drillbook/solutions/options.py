"""How much ice cream is left at a given hour."""

from __future__ import annotations


def maybe_icecream(time_of_day: int) -> int | None:
    """Five before 22:00, none left until 24:00, and None for later hours."""
    if time_of_day < 0:
        raise ValueError("time of day cannot be negative")
    if time_of_day < 22:
        return 5
    if time_of_day < 25:
        return 0
    return None