"""Hash map exercises: fruit baskets and a football scores table."""

from __future__ import annotations

from collections.abc import MutableMapping
from dataclasses import dataclass
from enum import Enum

_U8_MAX = 255


def fruit_basket() -> dict[str, int]:
    """A basket of at least three kinds of fruit and at least five pieces."""
    return {
        "banana": 2,
        "apple": 1000,
        "braeburn": 10000,
        "oranges": 1000,
    }


class Fruit(Enum):
    """Kinds of fruit for the cake."""

    APPLE = "apple"
    BANANA = "banana"
    MANGO = "mango"
    LYCHEE = "lychee"
    PINEAPPLE = "pineapple"


def fill_fruit_basket(basket: MutableMapping[Fruit, int]) -> None:
    """Add one of every kind of fruit that is not yet in the basket."""
    for fruit in Fruit:
        basket.setdefault(fruit, 1)


@dataclass
class Team:
    """Goals a team has scored and conceded."""

    goals_scored: int = 0
    goals_conceded: int = 0

    def record(self, scored: int, conceded: int) -> None:
        self.goals_scored = _add_goals(self.goals_scored, scored)
        self.goals_conceded = _add_goals(self.goals_conceded, conceded)


def _add_goals(total: int, more: int) -> int:
    result = total + more
    if result > _U8_MAX:
        raise OverflowError("attempt to add goals with overflow")
    return result


def _parse_goals(text: str) -> int:
    if not text.isascii() or not text.lstrip("+").isdigit() or text.count("+") > 1:
        raise ValueError(f"invalid goal count: {text!r}")
    value = int(text)
    if value > _U8_MAX:
        raise ValueError(f"goal count too large: {text!r}")
    return value


def _lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


def build_scores_table(results: str) -> dict[str, Team]:
    """Build the scores table from lines of ``team1,team2,goals1,goals2``."""
    scores: dict[str, Team] = {}
    for line in _lines(results):
        fields = line.split(",")
        if len(fields) < 4:
            raise ValueError(f"malformed result line: {line!r}")
        team_1, team_2 = fields[0], fields[1]
        goals_1 = _parse_goals(fields[2])
        goals_2 = _parse_goals(fields[3])
        scores.setdefault(team_1, Team()).record(goals_1, goals_2)
        scores.setdefault(team_2, Team()).record(goals_2, goals_1)
    return scores