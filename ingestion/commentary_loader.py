"""Load commentary text from a JSON file.

Any subset of the tables may be given; entries are merged over the base
tables, so a file only needs the teams and matchups it has text for.

{
    "seed_win_rates": {"1": 98.8, "16": 1.2},
    "team_descriptions": {"Duke": "..."},
    "matchup_analyses": {"Duke vs American": "..."},
    "upset_analyses": {"UC San Diego vs Michigan": "..."},
    "default_win_rate": 50,
    "default_team_description": "...",
    "default_upset_analysis": "..."
}
"""

import json
from dataclasses import replace

from analysis.commentary import DEFAULT_TABLES, CommentaryTables
from models.team import parse_seed

_TABLE_KEYS = ("seed_win_rates", "team_descriptions", "matchup_analyses", "upset_analyses")
_FALLBACK_KEYS = ("default_win_rate", "default_team_description", "default_upset_analysis")


def load_commentary_from_json(filepath: str, base: CommentaryTables = DEFAULT_TABLES) -> CommentaryTables:
    """Load a commentary override and merge it onto `base`."""
    with open(filepath, "r", encoding="utf-8") as f:
        data = json.load(f)

    tables = commentary_from_dict(data, base)
    print(f"Loaded commentary from {filepath}: {len(tables.team_descriptions)} team descriptions, "
          f"{len(tables.matchup_analyses)} matchup analyses")
    return tables


def commentary_from_dict(data: dict, base: CommentaryTables = DEFAULT_TABLES) -> CommentaryTables:
    if not isinstance(data, dict):
        raise ValueError("Commentary document must be a JSON object")

    unknown = set(data) - set(_TABLE_KEYS) - set(_FALLBACK_KEYS)
    if unknown:
        raise ValueError(f"Unknown commentary keys: {', '.join(sorted(unknown))}")

    changes = {}
    for key in _TABLE_KEYS:
        if key not in data:
            continue
        if not isinstance(data[key], dict):
            raise ValueError(f"Commentary '{key}' must be an object")
        merged = dict(getattr(base, key))
        if key == "seed_win_rates":
            merged.update({parse_seed(s): _rate(rate, f"{key}.{s}") for s, rate in data[key].items()})
        else:
            merged.update({str(k): _text(v, f"{key}.{k}") for k, v in data[key].items()})
        changes[key] = merged

    if "default_win_rate" in data:
        changes["default_win_rate"] = _rate(data["default_win_rate"], "default_win_rate")
    for key in ("default_team_description", "default_upset_analysis"):
        if key in data:
            changes[key] = _text(data[key], key)

    return replace(base, **changes)


def _rate(value, key: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"Commentary '{key}' must be a number, got {value!r}")
    return float(value)


def _text(value, key: str) -> str:
    if not isinstance(value, str):
        raise ValueError(f"Commentary '{key}' must be a string, got {value!r}")
    return value
