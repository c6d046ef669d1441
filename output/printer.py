"""Pretty-print the bracket, statistics and upset views."""

from tabulate import tabulate

import config
from analysis.commentary import (
    DEFAULT_TABLES,
    CommentaryTables,
    matchup_analysis,
    seed_historical_win_rate,
    team_strength_description,
    upset_analysis,
)
from analysis.stats import (
    champion_split,
    flatten_matchups,
    region_summary,
    region_upset_stats,
    seed_strength_factor,
    top_upsets,
)
from models.bracket import Bracket, Matchup
from models.team import Team
from output.view_state import ViewState


def bar(pct: float, width: int = config.BAR_WIDTH) -> str:
    """Text bar for a 0-100 percentage."""
    filled = round(max(0.0, min(pct, 100.0)) / 100 * width)
    return "█" * filled + "░" * (width - filled)


def _header(title: str):
    print("\n" + "=" * 60)
    print(f"           {title}")
    print("=" * 60)


def print_bracket_view(bracket: Bracket, state: ViewState, tables: CommentaryTables = DEFAULT_TABLES):
    """Print a region's first-round matchups and the selected matchup's analysis."""
    matchups = bracket.region_matchups(state.region)
    _header(f"FIRST ROUND MATCHUPS - {state.region.upper()} REGION")

    if not matchups:
        print(f"\n  No matchups for the {state.region} region.")
        return

    summary = region_summary(bracket, state.region)
    print(f"\n  {summary['matchups']} games, {summary['favorites']} favorites advance, "
          f"{summary['upsets']} upsets picked\n")

    rows = []
    for i, m in enumerate(matchups):
        rows.append([
            i,
            str(m.team1) + (" ✓" if m.team1_won else ""),
            str(m.team2) + ("" if m.team1_won else " ✓"),
            f"{m.probability * 100:.1f}%",
        ])
    print(tabulate(rows, headers=["#", "Team 1", "Team 2", "Win Prob"], tablefmt="simple"))

    if state.selected_matchup is None:
        return
    if state.selected_matchup >= len(matchups):
        print(f"\nWARNING: No matchup #{state.selected_matchup} in the {state.region} region.")
        return
    print_matchup_detail(matchups[state.selected_matchup], tables)


def print_matchup_detail(matchup: Matchup, tables: CommentaryTables = DEFAULT_TABLES):
    print("\n--- MATCHUP ANALYSIS ---")
    for team in (matchup.team1, matchup.team2):
        _print_team_panel(team, tables)

    print(f"\n  Prediction: {matchup.winner.name} wins "
          f"({matchup.probability * 100:.1f}% probability)")
    print(f"  {matchup_analysis(matchup, tables)}")


def _print_team_panel(team: Team, tables: CommentaryTables):
    print(f"\n  {team.name} ({team.seed})")
    print(f"    - Seed strength factor: {seed_strength_factor(team.seed):.2f}")
    print(f"    - Historical win rate for seed: {seed_historical_win_rate(team.seed, tables):g}%")
    print(f"    - {team_strength_description(team.name, tables)}")


def print_stats_view(bracket: Bracket):
    """Print the championship split and upset percentage per region."""
    _header("TOURNAMENT STATISTICS")

    split = champion_split(bracket)
    champ = bracket.champion
    print("\n--- CHAMPIONSHIP PROBABILITY ---\n")
    rows = [[s["name"], f"{s['value']:.1f}%", bar(s["value"])] for s in split.to_chart_data()]
    print(tabulate(rows, headers=["Team", "Share", ""], tablefmt="simple"))
    print(f"\n  {champ.name} ({champ.seed})")
    print(f"  Region: {champ.region}")
    print(f"  Championship Probability: {split.champion_share:.1f}%")

    print("\n--- UPSET POTENTIAL BY REGION ---\n")
    rows = []
    for s in region_upset_stats(bracket):
        rows.append([s.region, s.upset_count, s.total_matchups,
                     f"{s.upset_percentage:.1f}%", bar(s.upset_percentage)])
    print(tabulate(rows, headers=["Region", "Upsets", "Games", "Upset %", ""], tablefmt="simple"))


def print_upsets_view(bracket: Bracket, tables: CommentaryTables = DEFAULT_TABLES,
                      threshold: float = config.DEFAULT_UPSET_THRESHOLD,
                      limit: int = config.DEFAULT_TOP_UPSETS):
    """Print the most likely upsets with their analysis."""
    _header("POTENTIAL UPSETS")

    upsets = top_upsets(flatten_matchups(bracket), threshold=threshold, limit=limit)
    if not upsets:
        print(f"\n  No matchups above {threshold:g}% upset probability.")
        return

    print(f"\n--- TOP {len(upsets)} POTENTIAL UPSETS ---\n")
    rows = [[m.matchup_name, m.region, f"{m.upset_probability:.1f}%", bar(m.upset_probability)]
            for m in upsets]
    print(tabulate(rows, headers=["Matchup", "Region", "Upset Prob", ""], tablefmt="simple"))

    for m in upsets:
        print(f"\n  {m.lower_seed} vs {m.higher_seed}")
        print(f"    Region: {m.region}")
        print(f"    Upset Probability: {m.upset_probability:.1f}%")
        print(f"    {upset_analysis(m, tables)}")


def render(bracket: Bracket, state: ViewState, tables: CommentaryTables = DEFAULT_TABLES):
    """Print whichever view the state points at."""
    if state.view == "bracket":
        print_bracket_view(bracket, state, tables)
    elif state.view == "stats":
        print_stats_view(bracket)
    elif state.view == "upsets":
        print_upsets_view(bracket, tables)
