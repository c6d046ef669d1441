"""Export derived tables as CSV."""

import os

import pandas as pd

from analysis.stats import flatten_matchups, region_upset_stats
from models.bracket import Bracket


def matchups_dataframe(bracket: Bracket) -> pd.DataFrame:
    """All first-round matchups with their upset annotations, one row each."""
    return pd.DataFrame([m.to_dict() for m in flatten_matchups(bracket)],
                        columns=["matchupName", "region", "upsetProbability", "higherSeed",
                                 "lowerSeed", "winner", "isUpset"])


def region_stats_dataframe(bracket: Bracket) -> pd.DataFrame:
    return pd.DataFrame([s.to_dict() for s in region_upset_stats(bracket)],
                        columns=["region", "upsetCount", "totalMatchups", "upsetPercentage"])


def export_matchups_csv(bracket: Bracket, filepath: str):
    """Export the flattened matchup list.

    Columns: matchupName, region, upsetProbability, higherSeed, lowerSeed, winner, isUpset
    """
    df = matchups_dataframe(bracket)
    _write_csv(df, filepath)
    print(f"Exported {len(df)} matchups to {filepath}")


def export_region_stats_csv(bracket: Bracket, filepath: str):
    """Export upset counts per region.

    Columns: region, upsetCount, totalMatchups, upsetPercentage
    """
    df = region_stats_dataframe(bracket)
    _write_csv(df, filepath)
    print(f"Exported {len(df)} regions to {filepath}")


def _write_csv(df: pd.DataFrame, filepath: str):
    dirname = os.path.dirname(filepath)
    if dirname:
        os.makedirs(dirname, exist_ok=True)
    df.to_csv(filepath, index=False)
