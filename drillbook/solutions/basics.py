"""Small functions built from conditionals and string handling."""

from __future__ import annotations

_SALE_EVEN_DISCOUNT = 10
_SALE_ODD_DISCOUNT = 3
_HABITATS = {
    "crab": "Beach",
    "gopher": "Burrow",
    "snake": "Desert",
}
_COLOR_WORDS = frozenset({"green", "blue", "red"})


def bigger(a: int, b: int) -> int:
    """Return the larger of two numbers."""
    return a if a > b else b


def foo_if_fizz(fizzish: str) -> str:
    """Map ``"fizz"`` to ``"foo"``, ``"fuzz"`` to ``"bar"`` and anything else to ``"baz"``."""
    if fizzish == "fizz":
        return "foo"
    if fizzish == "fuzz":
        return "bar"
    return "baz"


def animal_habitat(animal: str) -> str:
    """Where the animal lives, or ``"Unknown"``."""
    return _HABITATS.get(animal, "Unknown")


def _is_even(num: int) -> bool:
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Take ten off an even price and three off an odd one."""
    if _is_even(price):
        return price - _SALE_EVEN_DISCOUNT
    return price - _SALE_ODD_DISCOUNT


def is_a_color_word(attempt: str) -> bool:
    """Whether ``attempt`` is one of the known colour words."""
    return attempt in _COLOR_WORDS


def trim_me(text: str) -> str:
    """Remove whitespace from both ends."""
    return text.strip()


def compose_me(text: str) -> str:
    """Append ``" world!"``."""
    return f"{text} world!"


def replace_me(text: str) -> str:
    """Replace every ``"cars"`` with ``"balloons"``."""
    return text.replace("cars", "balloons")