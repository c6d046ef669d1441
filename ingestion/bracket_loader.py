"""Bracket loader - read the precomputed bracket document.

Expected format:
{
    "first_round": {
        "East": [
            {
                "team1": {"name": "Duke", "seed": "1", "region": "East"},
                "team2": {"name": "American", "seed": "16", "region": "East"},
                "winner": {"name": "Duke", "seed": "1", "region": "East"},
                "probability": 0.97
            },
            ...
        ],
        ...
    },
    "champion": {"name": "Duke", "seed": "1", "region": "East", "probability": 0.24}
}

The whole document is validated up front so the statistics never see a bad
seed label or an out-of-range probability.
"""

import json

import config
from models.bracket import Bracket, BracketValidationError, Champion, Matchup
from models.team import SeedParseError, Team, parse_seed


def load_bracket_from_json(filepath: str = config.DEFAULT_BRACKET_FILE) -> Bracket:
    """Load and validate a bracket from a JSON file."""
    with open(filepath, "r", encoding="utf-8") as f:
        data = json.load(f)

    bracket = bracket_from_dict(data)
    print(f"Loaded bracket from {filepath}: {bracket.num_matchups()} matchups "
          f"in {len(bracket.regions)} regions")
    return bracket


def bracket_from_dict(data: dict) -> Bracket:
    """Build a Bracket from the parsed JSON document.

    Raises:
        BracketValidationError: on missing keys, unknown regions, a winner that
            is not in its matchup, a probability outside [0, 1] or a bad seed
    """
    if not isinstance(data, dict):
        raise BracketValidationError("Bracket document must be a JSON object")

    first_round_data = data.get("first_round")
    if not isinstance(first_round_data, dict):
        raise BracketValidationError("Bracket document has no 'first_round' mapping")

    first_round = {}
    for region, matchups_data in first_round_data.items():
        if region not in config.REGION_NAMES:
            raise BracketValidationError(f"Unknown region: {region!r}")
        if not isinstance(matchups_data, list):
            raise BracketValidationError(f"{region}: matchups must be a list")
        first_round[region] = tuple(
            _parse_matchup(m, region, i) for i, m in enumerate(matchups_data)
        )

    if "champion" not in data:
        raise BracketValidationError("Bracket document has no 'champion'")
    champion = _parse_champion(data["champion"])

    return Bracket(first_round=first_round, champion=champion)


def _parse_team(data: dict, region: str, where: str) -> Team:
    if not isinstance(data, dict) or "name" not in data or "seed" not in data:
        raise BracketValidationError(f"{where}: team needs 'name' and 'seed'")

    seed = str(data["seed"]).strip()
    try:
        parse_seed(seed)
    except SeedParseError as e:
        raise BracketValidationError(f"{where}: {e}") from e

    team_region = data.get("region", region)
    if team_region != region:
        raise BracketValidationError(f"{where}: team {data['name']!r} is listed in region "
                                     f"{team_region!r}, not {region!r}")

    return Team(name=str(data["name"]), seed=seed, region=team_region)


def _parse_matchup(data: dict, region: str, index: int) -> Matchup:
    where = f"{region} matchup {index}"
    if not isinstance(data, dict):
        raise BracketValidationError(f"{where}: matchup must be an object")
    for key in ("team1", "team2", "winner", "probability"):
        if key not in data:
            raise BracketValidationError(f"{where}: missing '{key}'")

    team1 = _parse_team(data["team1"], region, where)
    team2 = _parse_team(data["team2"], region, where)

    winner_data = data["winner"]
    winner_name = winner_data.get("name") if isinstance(winner_data, dict) else None
    if winner_name == team1.name:
        winner = team1
    elif winner_name == team2.name:
        winner = team2
    else:
        raise BracketValidationError(
            f"{where}: winner {winner_name!r} is neither {team1.name!r} nor {team2.name!r}"
        )

    probability = _parse_probability(data["probability"], where)
    return Matchup(team1=team1, team2=team2, winner=winner, probability=probability)


def _parse_champion(data: dict) -> Champion:
    where = "champion"
    if not isinstance(data, dict):
        raise BracketValidationError(f"{where}: must be an object")
    for key in ("name", "seed", "region", "probability"):
        if key not in data:
            raise BracketValidationError(f"{where}: missing '{key}'")

    seed = str(data["seed"]).strip()
    try:
        parse_seed(seed)
    except SeedParseError as e:
        raise BracketValidationError(f"{where}: {e}") from e
    if data["region"] not in config.REGION_NAMES:
        raise BracketValidationError(f"{where}: unknown region {data['region']!r}")

    return Champion(
        name=str(data["name"]),
        seed=seed,
        region=str(data["region"]),
        probability=_parse_probability(data["probability"], where),
    )


def _parse_probability(value, where: str) -> float:
    if isinstance(value, bool):
        raise BracketValidationError(f"{where}: probability must be a number")
    try:
        p = float(value)
    except (TypeError, ValueError) as e:
        raise BracketValidationError(f"{where}: probability must be a number") from e
    if not 0.0 <= p <= 1.0:
        raise BracketValidationError(f"{where}: probability {p} is outside [0, 1]")
    return p
