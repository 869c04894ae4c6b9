"""Records: colours, orders, packages and a message-driven state."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import NamedTuple

_MIN_PACKAGE_WEIGHT = 10


@dataclass
class ColorClassicStruct:
    """A colour with named components."""

    red: int
    green: int
    blue: int


class ColorTupleStruct(NamedTuple):
    """A colour whose components are reached by position."""

    red: int
    green: int
    blue: int


class UnitLikeStruct:
    """A value with no fields."""

    def __repr__(self) -> str:
        return "UnitLikeStruct"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, UnitLikeStruct)

    def __hash__(self) -> int:
        return hash(UnitLikeStruct)


@dataclass
class Order:
    """A customer order."""

    name: str
    year: int
    made_by_phone: bool
    made_by_mobile: bool
    made_by_email: bool
    item_number: int
    count: int


def create_order_template() -> Order:
    """The order that new orders are derived from."""
    return Order(
        name="Bob",
        year=2019,
        made_by_phone=False,
        made_by_mobile=False,
        made_by_email=True,
        item_number=123,
        count=0,
    )


@dataclass(frozen=True)
class Package:
    """A package to ship; it must weigh at least ten grams."""

    sender_country: str
    recipient_country: str
    weight_in_grams: int

    def __post_init__(self) -> None:
        if self.weight_in_grams < _MIN_PACKAGE_WEIGHT:
            raise ValueError("Can not ship a package with weight below 10 grams.")

    def is_international(self) -> bool:
        """Whether sender and recipient are in different countries."""
        return self.recipient_country != self.sender_country

    def get_fees(self, cents_per_gram: int) -> int:
        """Shipping fee in cents."""
        return self.weight_in_grams * cents_per_gram


@dataclass
class Point:
    """A position on a grid."""

    x: int
    y: int


@dataclass(frozen=True)
class Move:
    """Move to ``point``."""

    point: Point


@dataclass(frozen=True)
class Echo:
    """Replace the stored message."""

    text: str


@dataclass(frozen=True)
class ChangeColor:
    """Change the colour."""

    red: int
    green: int
    blue: int


@dataclass(frozen=True)
class Quit:
    """Ask the state to quit."""


Message = Move | Echo | ChangeColor | Quit


@dataclass
class State:
    """State that changes in response to messages."""

    color: tuple[int, int, int] = (0, 0, 0)
    position: Point = field(default_factory=lambda: Point(0, 0))
    quit: bool = False
    message: str = ""

    def process(self, message: Message) -> None:
        """Apply one message."""
        match message:
            case Move(point=point):
                self.position = Point(point.x, point.y)
            case Echo(text=text):
                self.message = text
            case ChangeColor(red=red, green=green, blue=blue):
                self.color = (red, green, blue)
            case Quit():
                self.quit = True
            case _:
                raise TypeError(f"unknown message: {message!r}")