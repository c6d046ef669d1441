import json

import pytest

from analysis.commentary import (
    DEFAULT_TABLES,
    SEED_WIN_RATES,
    matchup_analysis,
    seed_historical_win_rate,
    team_strength_description,
    upset_analysis,
)
from analysis.stats import FlatMatchup
from conftest import make_matchup
from ingestion.commentary_loader import commentary_from_dict, load_commentary_from_json


def test_seed_table_has_all_sixteen_seeds():
    assert sorted(SEED_WIN_RATES) == list(range(1, 17))
    assert SEED_WIN_RATES[1] == 98.8
    assert SEED_WIN_RATES[8] == 48.1
    assert SEED_WIN_RATES[16] == 1.2


def test_seed_win_rate_lookup():
    assert seed_historical_win_rate("1") == 98.8
    assert seed_historical_win_rate("16a") == 1.2
    assert seed_historical_win_rate(12) == 35.3


@pytest.mark.parametrize("seed", ["17", "bye", ""])
def test_seed_win_rate_fallback(seed):
    assert seed_historical_win_rate(seed) == 50


def test_team_descriptions():
    assert team_strength_description("Houston") == \
        "Best defensive efficiency in nation with 19-1 conference record"
    assert team_strength_description("Michigan State") == \
        "Tom Izzo's exceptional tournament coaching and seven-game win streak"
    assert team_strength_description("Gonzaga") == \
        "Balanced team with typical strengths and weaknesses for their seed"


def test_written_matchup_analysis():
    game = make_matchup("South", "Michigan", "5", "UC San Diego", "12", team1_wins=False)
    assert matchup_analysis(game).startswith("Despite UC San Diego's 15-game win streak")


def test_matchup_key_is_source_order():
    game = make_matchup("South", "UC San Diego", "12", "Michigan", "5", team1_wins=True)
    assert not matchup_analysis(game).startswith("Despite")


def test_generated_analysis_for_favorite():
    game = make_matchup("West", "Texas Tech", "3", "UNC Wilmington", "14", team1_wins=True)
    assert matchup_analysis(game) == (
        "The higher seed is favored as expected in this matchup. "
        "Historical data shows 3-seeds win approximately 84.6% of the time against 14-seeds."
    )


def test_generated_analysis_for_upset():
    game = make_matchup("West", "Missouri", "6", "Drake", "11", team1_wins=False)
    assert matchup_analysis(game) == (
        "This represents a potential upset based on specific team factors that overcome "
        "the typical seed advantage. Historical data shows 6-seeds win approximately "
        "62.5% of the time against 11-seeds."
    )


def test_generated_analysis_for_play_in_pair():
    game = make_matchup("Midwest", "Alabama State", "16a", "Saint Francis", "16b")
    assert matchup_analysis(game).startswith("The higher seed is favored")
    assert "16-seeds win approximately 1.2% of the time against 16-seeds" in matchup_analysis(game)


def _flat(lower, higher):
    return FlatMatchup(f"{higher} vs {lower}", "West", 51.0, higher, lower, lower, True)


def test_upset_analysis_lookup_and_fallback():
    assert upset_analysis(_flat("Team_West_9", "Team_West_8")) == \
        "8-9 matchups are historically even, with 9-seeds winning 51.9% of these games."
    assert upset_analysis(_flat("Drake", "Missouri")) == DEFAULT_TABLES.default_upset_analysis


def test_override_merges_onto_defaults():
    tables = commentary_from_dict({
        "seed_win_rates": {"16": 2.5},
        "team_descriptions": {"Gonzaga": "Perennial contender"},
        "default_team_description": "No notes",
    })
    assert seed_historical_win_rate("16", tables) == 2.5
    assert seed_historical_win_rate("1", tables) == 98.8
    assert team_strength_description("Gonzaga", tables) == "Perennial contender"
    assert team_strength_description("Duke", tables).startswith("Elite offensive")
    assert team_strength_description("Nobody", tables) == "No notes"
    # defaults are untouched
    assert team_strength_description("Gonzaga") == DEFAULT_TABLES.default_team_description
    assert DEFAULT_TABLES.seed_win_rates[16] == 1.2


def test_override_matchup_text():
    tables = commentary_from_dict({"matchup_analyses": {"Gonzaga vs Georgia": "Gonzaga rolls."}})
    game = make_matchup("Midwest", "Gonzaga", "8", "Georgia", "9")
    assert matchup_analysis(game, tables) == "Gonzaga rolls."


def test_override_rejects_unknown_keys():
    with pytest.raises(ValueError, match="Unknown commentary keys"):
        commentary_from_dict({"team_blurbs": {}})


def test_override_rejects_non_mapping_table():
    with pytest.raises(ValueError):
        commentary_from_dict({"team_descriptions": ["Duke"]})


def test_load_commentary_file(tmp_path):
    path = tmp_path / "commentary.json"
    path.write_text(json.dumps({"upset_analyses": {"Drake vs Missouri": "Drake's pace wins."}}))
    tables = load_commentary_from_json(str(path))
    assert upset_analysis(_flat("Drake", "Missouri"), tables) == "Drake's pace wins."


def test_zero_rate_falls_back_to_default():
    tables = commentary_from_dict({"seed_win_rates": {"16": 0}})
    assert seed_historical_win_rate("16", tables) == 50


@pytest.mark.parametrize("data, key", [
    ({"seed_win_rates": {"1": None}}, "seed_win_rates.1"),
    ({"seed_win_rates": {"2": [90]}}, "seed_win_rates.2"),
    ({"seed_win_rates": {"3": "84.6"}}, "seed_win_rates.3"),
    ({"team_descriptions": {"Duke": {"text": "Elite"}}}, "team_descriptions.Duke"),
    ({"default_win_rate": "fifty"}, "default_win_rate"),
    ({"default_win_rate": True}, "default_win_rate"),
    ({"default_upset_analysis": None}, "default_upset_analysis"),
])
def test_override_rejects_bad_values(data, key):
    with pytest.raises(ValueError, match=f"'{key}'"):
        commentary_from_dict(data)
