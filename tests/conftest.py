import pytest

import config
from ingestion.bracket_loader import load_bracket_from_json
from models.bracket import Bracket, Champion, Matchup
from models.team import Team


def make_matchup(region, name1, seed1, name2, seed2, team1_wins=True, probability=0.6):
    team1 = Team(name1, seed1, region)
    team2 = Team(name2, seed2, region)
    winner = team1 if team1_wins else team2
    return Matchup(team1=team1, team2=team2, winner=winner, probability=probability)


@pytest.fixture
def bracket_2025():
    return load_bracket_from_json(config.DEFAULT_BRACKET_FILE)


@pytest.fixture
def east_only():
    """The two-game East region: chalk 1-16, then a 9-seed over an 8-seed."""
    return Bracket(
        first_round={
            "East": (
                make_matchup("East", "Duke", "1", "American", "16", True, 0.95),
                make_matchup("East", "Kentucky", "8", "Baylor", "9", False, 0.55),
            ),
        },
        champion=Champion("Duke", "1", "East", 0.3),
    )
