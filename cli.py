"""NCAA Bracket Insights - CLI entry point.

Usage:
    python cli.py load [--file path.json] [--commentary path.json]
    python cli.py show
    python cli.py view bracket|stats|upsets
    python cli.py region East|West|South|Midwest
    python cli.py select INDEX | --clear
    python cli.py export [--what matchups|regions] [--output path.csv]
"""

import argparse
import os
import pickle
import sys

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

import config
from output.view_state import ViewState


def save_state(state: dict):
    """Save the session state to disk."""
    os.makedirs(os.path.dirname(config.STATE_FILE), exist_ok=True)
    with open(config.STATE_FILE, "wb") as f:
        pickle.dump(state, f)


def load_state() -> dict:
    """Load the session state from disk."""
    if os.path.exists(config.STATE_FILE):
        with open(config.STATE_FILE, "rb") as f:
            return pickle.load(f)
    return {}


def _require_bracket(state: dict):
    bracket = state.get("bracket")
    if not bracket:
        print("ERROR: No bracket loaded. Run 'python cli.py load' first.")
    return bracket


def _current_view(state: dict) -> ViewState:
    return ViewState.from_dict(state.get("view", {}))


def _render(state: dict):
    from analysis.commentary import DEFAULT_TABLES
    from output.printer import render
    render(state["bracket"], _current_view(state), state.get("tables", DEFAULT_TABLES))


# --- Commands ---

def cmd_load(args) -> int:
    """Load and validate the bracket dataset."""
    from ingestion.bracket_loader import load_bracket_from_json
    bracket = load_bracket_from_json(args.file)

    state = {"bracket": bracket, "view": ViewState().to_dict()}
    if args.commentary:
        from ingestion.commentary_loader import load_commentary_from_json
        state["tables"] = load_commentary_from_json(args.commentary)

    save_state(state)

    missing = [r for r in config.REGION_NAMES if r not in bracket.regions]
    if missing:
        print(f"WARNING: No matchups for {', '.join(missing)}")
    print(f"Champion pick: {bracket.champion} ({bracket.champion.probability:.1%})")
    return 0


def cmd_show(args) -> int:
    """Display the current view."""
    state = load_state()
    if not _require_bracket(state):
        return 1
    _render(state)
    return 0


def cmd_view(args) -> int:
    state = load_state()
    if not _require_bracket(state):
        return 1
    state["view"] = _current_view(state).with_view(args.name).to_dict()
    save_state(state)
    _render(state)
    return 0


def cmd_region(args) -> int:
    state = load_state()
    if not _require_bracket(state):
        return 1
    view = _current_view(state).with_region(args.name).with_view("bracket")
    state["view"] = view.to_dict()
    save_state(state)
    _render(state)
    return 0


def cmd_select(args) -> int:
    """Select a matchup in the current region for the analysis panel."""
    state = load_state()
    bracket = _require_bracket(state)
    if not bracket:
        return 1

    view = _current_view(state)
    if args.clear:
        index = None
    elif args.index is None:
        print("ERROR: Give a matchup index or --clear.")
        return 1
    else:
        index = args.index
        count = len(bracket.region_matchups(view.region))
        if not 0 <= index < count:
            print(f"ERROR: {view.region} has {count} matchups; pick an index from 0 to {count - 1}.")
            return 1

    state["view"] = view.with_selection(index).with_view("bracket").to_dict()
    save_state(state)
    _render(state)
    return 0


def cmd_export(args) -> int:
    """Export a derived table as CSV."""
    state = load_state()
    bracket = _require_bracket(state)
    if not bracket:
        return 1

    from output.export import export_matchups_csv, export_region_stats_csv
    if args.what == "matchups":
        output_path = args.output or os.path.join(config.DATA_DIR, "matchups.csv")
        export_matchups_csv(bracket, output_path)
    elif args.what == "regions":
        output_path = args.output or os.path.join(config.DATA_DIR, "region_upsets.csv")
        export_region_stats_csv(bracket, output_path)
    return 0


# --- Main ---

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="NCAA Bracket Insights",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Workflow:
  1. python cli.py load                  # Load data/final_bracket.json
  2. python cli.py region South          # First-round matchups for a region
  3. python cli.py select 2              # Analysis panel for matchup #2
  4. python cli.py view stats            # Champion odds and upsets by region
  5. python cli.py view upsets           # Top potential upsets
  6. python cli.py export --what matchups
        """
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # load
    p_load = subparsers.add_parser("load", help="Load the bracket dataset")
    p_load.add_argument("--file", default=config.DEFAULT_BRACKET_FILE, help="Bracket JSON file")
    p_load.add_argument("--commentary", help="JSON file overriding the commentary text")

    # show
    subparsers.add_parser("show", help="Display the current view")

    # view
    p_view = subparsers.add_parser("view", help="Switch view")
    p_view.add_argument("name", choices=config.VIEWS)

    # region
    p_region = subparsers.add_parser("region", help="Switch region (bracket view)")
    p_region.add_argument("name", choices=config.REGION_NAMES)

    # select
    p_select = subparsers.add_parser("select", help="Select a matchup for analysis")
    p_select.add_argument("index", type=int, nargs="?", help="Matchup number in the region")
    p_select.add_argument("--clear", action="store_true", help="Clear the selection")

    # export
    p_export = subparsers.add_parser("export", help="Export derived tables")
    p_export.add_argument("--what", choices=["matchups", "regions"], default="matchups")
    p_export.add_argument("--output", help="Output CSV path")

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    commands = {
        "load": cmd_load,
        "show": cmd_show,
        "view": cmd_view,
        "region": cmd_region,
        "select": cmd_select,
        "export": cmd_export,
    }

    try:
        return commands[args.command](args)
    except (ValueError, OSError) as e:
        print(f"ERROR: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
