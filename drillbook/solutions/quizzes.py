"""Quiz solutions: apple prices, a string transformer and report cards."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterable, TypeVar

T = TypeVar("T")


def calculate_price_of_apples(num_apples: int) -> int:
    """Two per apple, or one per apple for orders above 40."""
    return num_apples * 2 if num_apples <= 40 else num_apples


@dataclass(frozen=True)
class Uppercase:
    """Uppercase the string."""


@dataclass(frozen=True)
class Trim:
    """Strip whitespace from both ends."""


@dataclass(frozen=True)
class Append:
    """Append ``"bar"`` ``count`` times."""

    count: int


Command = Uppercase | Trim | Append


def _apply(text: str, command: Command) -> str:
    match command:
        case Uppercase():
            return text.upper()
        case Trim():
            return text.strip()
        case Append(count=count):
            return text + "bar" * count
    raise TypeError(f"unknown command: {command!r}")


def transformer(items: Iterable[tuple[str, Command]]) -> list[str]:
    """Apply each command to its string."""
    return [_apply(text, command) for text, command in items]


@dataclass
class ReportCard(Generic[T]):
    """A report card whose grade may be numeric or alphabetical."""

    grade: T
    student_name: str
    student_age: int

    def render(self) -> str:
        return (
            f"{self.student_name} ({self.student_age}) - "
            f"achieved a grade of {self.grade}"
        )