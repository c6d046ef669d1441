"""Central configuration for the bracket insights tool."""

import os

# Project paths
PROJECT_ROOT = os.path.dirname(os.path.abspath(__file__))
DATA_DIR = os.path.join(PROJECT_ROOT, "data")
DEFAULT_BRACKET_FILE = os.path.join(DATA_DIR, "final_bracket.json")
STATE_FILE = os.path.join(DATA_DIR, "state.pkl")

# Bracket structure
REGION_NAMES = ["East", "West", "South", "Midwest"]

# Upsets
DEFAULT_UPSET_THRESHOLD = 30.0  # percent; strictly greater than this to be listed
DEFAULT_TOP_UPSETS = 5
# Region stats count only upsets where team1 is the weaker seed and wins.
# Set False to count any win by the weaker seed, regardless of position.
POSITIONAL_REGION_UPSETS = True

# Views
VIEWS = ["bracket", "stats", "upsets"]
DEFAULT_VIEW = "bracket"
DEFAULT_REGION = "East"
OTHER_TEAMS_LABEL = "Other Teams"

# Text charts
BAR_WIDTH = 30
