"""Drills on dictionaries: fruit baskets and a football scores table."""

from __future__ import annotations

import enum
from dataclasses import dataclass

_U8_MAX = 255


def default_fruit_basket() -> dict[str, int]:
    """A basket of at least three kinds and at least five fruits."""
    return {"banana": 2, "apple": 3, "mango": 5}


class Fruit(enum.Enum):
    APPLE = "apple"
    BANANA = "banana"
    MANGO = "mango"
    LYCHEE = "lychee"
    PINEAPPLE = "pineapple"


def fill_fruit_basket(basket: dict[Fruit, int]) -> None:
    """Add 11 of every kind of fruit not yet in the basket; leave the rest alone."""
    for fruit in Fruit:
        basket.setdefault(fruit, 11)


@dataclass
class Team:
    """Goals a team scored and conceded."""

    goals_scored: int = 0
    goals_conceded: int = 0


def _goals(text: str) -> int:
    try:
        value = int(text)
    except ValueError as exc:
        raise ValueError(f"invalid goal count: {text!r}") from exc
    if not 0 <= value <= _U8_MAX or not text.lstrip("+").isdigit():
        raise ValueError(f"invalid goal count: {text!r}")
    return value


def _add(team: Team, scored: int, conceded: int) -> None:
    team.goals_scored += scored
    team.goals_conceded += conceded
    if team.goals_scored > _U8_MAX or team.goals_conceded > _U8_MAX:
        raise OverflowError("goal count does not fit in the table")


def build_scores_table(results: str) -> dict[str, Team]:
    """Build the table from lines of "team_1,team_2,goals_1,goals_2"."""
    scores: dict[str, Team] = {}
    for line in results.splitlines():
        fields = line.split(",")
        if len(fields) < 4:
            raise ValueError(f"malformed result line: {line!r}")
        team_1, team_2 = fields[0], fields[1]
        score_1, score_2 = _goals(fields[2]), _goals(fields[3])
        _add(scores.setdefault(team_1, Team()), score_1, score_2)
        _add(scores.setdefault(team_2, Team()), score_2, score_1)
    return scores