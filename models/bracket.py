"""Bracket data structure.

The dataset only models the first round. Each region maps to its ordered list
of matchups; the source order of team1/team2 is kept as published, it is not
normalized to seed order.

    first_round = {
        "East": (Matchup(team1, team2, winner, probability), ...),
        "West": (...),
        ...
    }

`probability` is always the probability that the recorded winner wins.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

import config
from models.team import Team


class BracketValidationError(ValueError):
    """Raised when a bracket document breaks a schema or data invariant."""


@dataclass(frozen=True)
class Matchup:
    """A first-round game with its predicted winner."""

    team1: Team
    team2: Team
    winner: Team
    probability: float  # P(winner wins), 0-1

    @property
    def name(self) -> str:
        """Matchup label in source order, e.g. "Duke vs American"."""
        return f"{self.team1.name} vs {self.team2.name}"

    @property
    def team1_won(self) -> bool:
        return self.winner.name == self.team1.name

    def __str__(self):
        return f"{self.team1} vs {self.team2}  ->  {self.winner}"


@dataclass(frozen=True)
class Champion:
    name: str
    seed: str
    region: str
    probability: float  # P(wins the title), 0-1

    def __str__(self):
        return f"({self.seed}) {self.name}"


@dataclass(frozen=True)
class Bracket:
    """A first-round bracket plus the predicted champion.

    Fields cannot be reassigned, but `first_round` is a plain dict; nothing in
    the tool mutates it. Holding a dict makes brackets unhashable.
    """

    first_round: dict[str, tuple[Matchup, ...]] = field(default_factory=dict)
    champion: Champion | None = None

    __hash__ = None

    def region_matchups(self, region: str) -> tuple[Matchup, ...]:
        """Get a region's matchups. Missing regions have no matchups."""
        return self.first_round.get(region, ())

    def all_matchups(self, regions: list[str] | None = None) -> Iterator[tuple[str, Matchup]]:
        """Yield (region, matchup) pairs, region by region in bracket order."""
        for region in config.REGION_NAMES if regions is None else regions:
            for matchup in self.region_matchups(region):
                yield region, matchup

    def num_matchups(self, regions: list[str] | None = None) -> int:
        regions = config.REGION_NAMES if regions is None else regions
        return sum(len(self.region_matchups(r)) for r in regions)

    @property
    def regions(self) -> list[str]:
        """Regions that actually carry matchups, in bracket order."""
        return [r for r in config.REGION_NAMES if self.first_round.get(r)]
