"""Derived statistics over a loaded bracket.

Everything here is a pure function of the bracket. The record types carry a
`to_dict()` that produces the camelCase chart keys (upsetPercentage,
matchupName, ...), which are also the exported column names.

Two upset rules exist side by side:
- `is_upset`: the winner has the strictly larger seed number. This is the
  rule used for the flattened matchup list and the top upsets.
- the positional rule in `region_upset_stats`: only counts a game where team1
  is the weaker seed and team1 wins. It is the default for the region chart
  (config.POSITIONAL_REGION_UPSETS) and misses upsets won by team2.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass

import config
from models.bracket import Bracket, Matchup
from models.team import parse_seed


@dataclass(frozen=True)
class RegionUpsetStats:
    region: str
    upset_count: int
    total_matchups: int
    upset_percentage: float

    def to_dict(self) -> dict:
        return {
            "region": self.region,
            "upsetCount": self.upset_count,
            "totalMatchups": self.total_matchups,
            "upsetPercentage": self.upset_percentage,
        }


@dataclass(frozen=True)
class FlatMatchup:
    """One first-round matchup annotated for the upset charts."""

    matchup_name: str
    region: str
    upset_probability: float  # recorded winner's probability, 0-100
    higher_seed: str  # team name of the favored (smaller) seed
    lower_seed: str  # team name of the underdog (larger) seed
    winner: str
    is_upset: bool

    def to_dict(self) -> dict:
        return {
            "matchupName": self.matchup_name,
            "region": self.region,
            "upsetProbability": self.upset_probability,
            "higherSeed": self.higher_seed,
            "lowerSeed": self.lower_seed,
            "winner": self.winner,
            "isUpset": self.is_upset,
        }


@dataclass(frozen=True)
class ChampionSplit:
    name: str
    champion_share: float
    other_share: float

    def to_chart_data(self) -> list[dict]:
        """Pie slices: the champion and everyone else."""
        return [
            {"name": self.name, "value": self.champion_share},
            {"name": config.OTHER_TEAMS_LABEL, "value": self.other_share},
        ]

    def to_dict(self) -> dict:
        return asdict(self)


def is_upset(matchup: Matchup) -> bool:
    """True if the weaker (numerically larger) seed is the recorded winner."""
    seed1 = matchup.team1.seed_number
    seed2 = matchup.team2.seed_number
    return ((seed1 > seed2 and matchup.team1_won) or
            (seed2 > seed1 and not matchup.team1_won))


def is_positional_upset(matchup: Matchup) -> bool:
    """True if team1 is the weaker seed and team1 won."""
    return matchup.team1.seed_number > matchup.team2.seed_number and matchup.team1_won


def seed_strength_factor(seed: str | int) -> float:
    """Inverse seed number: 1.0 for a 1-seed down to 0.0625 for a 16-seed."""
    return 1 / parse_seed(seed)


def region_upset_stats(bracket: Bracket,
                       regions: list[str] | None = None,
                       positional: bool = config.POSITIONAL_REGION_UPSETS) -> list[RegionUpsetStats]:
    """Count first-round upsets per region.

    Args:
        bracket: The loaded bracket
        regions: Regions to report, in order (default: all four)
        positional: Use the team1-only upset rule instead of `is_upset`

    Returns:
        One RegionUpsetStats per region. A region with no matchups reports
        0 upsets and 0.0%.
    """
    check = is_positional_upset if positional else is_upset
    stats = []

    for region in config.REGION_NAMES if regions is None else regions:
        matchups = bracket.region_matchups(region)
        total = len(matchups)
        upsets = sum(1 for m in matchups if check(m))
        pct = 100 * upsets / total if total else 0.0
        stats.append(RegionUpsetStats(region, upsets, total, pct))

    return stats


def flatten_matchups(bracket: Bracket, regions: list[str] | None = None) -> list[FlatMatchup]:
    """Flatten every region's matchups into one annotated list.

    When both teams have the same seed number (e.g. "16a" vs "16b") team2 is
    reported as both the higher and the lower seed.
    """
    flat = []

    for region, m in bracket.all_matchups(regions):
        seed1 = m.team1.seed_number
        seed2 = m.team2.seed_number
        higher = m.team1 if seed1 < seed2 else m.team2
        lower = m.team1 if seed1 > seed2 else m.team2

        flat.append(FlatMatchup(
            matchup_name=m.name,
            region=region,
            upset_probability=m.probability * 100,
            higher_seed=higher.name,
            lower_seed=lower.name,
            winner=m.winner.name,
            is_upset=m.winner.name == lower.name,
        ))

    return flat


def top_upsets(flattened: list[FlatMatchup],
               threshold: float = config.DEFAULT_UPSET_THRESHOLD,
               limit: int = config.DEFAULT_TOP_UPSETS) -> list[FlatMatchup]:
    """Matchups above the probability threshold, most likely first.

    Ties keep their flattened order.
    """
    if limit < 0:
        raise ValueError(f"limit must be non-negative, got {limit}")

    candidates = [m for m in flattened if m.upset_probability > threshold]
    candidates.sort(key=lambda m: m.upset_probability, reverse=True)
    return candidates[:limit]


def champion_split(bracket: Bracket) -> ChampionSplit:
    """Split 100% between the predicted champion and the rest of the field."""
    champ = bracket.champion
    if champ is None:
        raise ValueError("Bracket has no champion")
    if not 0.0 <= champ.probability <= 1.0:
        raise ValueError(f"Champion probability {champ.probability} is outside [0, 1]")

    share = champ.probability * 100
    return ChampionSplit(name=champ.name, champion_share=share, other_share=100 - share)


def region_summary(bracket: Bracket, region: str) -> dict:
    """Headline counts for one region's bracket view."""
    matchups = bracket.region_matchups(region)
    upsets = sum(1 for m in matchups if is_upset(m))
    return {
        "region": region,
        "matchups": len(matchups),
        "favorites": len(matchups) - upsets,
        "upsets": upsets,
    }
