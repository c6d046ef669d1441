from models.bracket import Bracket, Champion
from output.printer import bar, print_bracket_view, print_stats_view, print_upsets_view, render
from output.view_state import ViewState


def test_bar():
    assert bar(0, width=10) == "░" * 10
    assert bar(50, width=10) == "█" * 5 + "░" * 5
    assert bar(100, width=10) == "█" * 10
    assert bar(140, width=4) == "█" * 4


def test_bracket_view_lists_region(bracket_2025, capsys):
    print_bracket_view(bracket_2025, ViewState(region="South"))
    out = capsys.readouterr().out
    assert "SOUTH REGION" in out
    assert "(1) Auburn ✓" in out
    assert "(12) UC San Diego ✓" in out
    assert "99.0%" in out
    assert "8 games, 6 favorites advance, 2 upsets picked" in out
    assert "MATCHUP ANALYSIS" not in out


def test_bracket_view_with_selection(bracket_2025, capsys):
    print_bracket_view(bracket_2025, ViewState(region="South", selected_matchup=2))
    out = capsys.readouterr().out
    assert "MATCHUP ANALYSIS" in out
    assert "Michigan (5)" in out
    assert "Seed strength factor: 0.20" in out
    assert "Historical win rate for seed: 35.3%" in out
    assert "15-game winning streak entering tournament with momentum" in out
    assert "Prediction: UC San Diego wins (52.0% probability)" in out
    assert "Despite UC San Diego's 15-game win streak" in out


def test_bracket_view_selection_out_of_range(bracket_2025, capsys):
    print_bracket_view(bracket_2025, ViewState(region="East", selected_matchup=12))
    assert "WARNING: No matchup #12" in capsys.readouterr().out


def test_bracket_view_empty_region(east_only, capsys):
    print_bracket_view(east_only, ViewState(region="West"))
    assert "No matchups for the West region" in capsys.readouterr().out


def test_stats_view(bracket_2025, capsys):
    print_stats_view(bracket_2025)
    out = capsys.readouterr().out
    assert "Duke (1)" in out
    assert "Region: East" in out
    assert "Championship Probability: 24.0%" in out
    assert "Other Teams" in out
    assert "12.5%" in out


def test_upsets_view(bracket_2025, capsys):
    print_upsets_view(bracket_2025)
    out = capsys.readouterr().out
    assert "TOP 5 POTENTIAL UPSETS" in out
    assert "Auburn vs Team_South_16b" in out
    assert "Upset Probability: 99.0%" in out


def test_upsets_view_with_nothing_above_threshold(east_only, capsys):
    print_upsets_view(east_only, threshold=99)
    assert "No matchups above 99% upset probability" in capsys.readouterr().out


def test_render_dispatches_on_view(east_only, capsys):
    render(east_only, ViewState(view="stats"))
    assert "TOURNAMENT STATISTICS" in capsys.readouterr().out

    render(east_only, ViewState(view="upsets"))
    out = capsys.readouterr().out
    assert "POTENTIAL UPSETS" in out
    assert "Baylor vs Kentucky" in out

    render(east_only, ViewState())
    assert "EAST REGION" in capsys.readouterr().out


def test_stats_view_without_matchups(capsys):
    print_stats_view(Bracket(champion=Champion("Houston", "1", "Midwest", 0.2)))
    out = capsys.readouterr().out
    assert "Houston (1)" in out
    assert "0.0%" in out
