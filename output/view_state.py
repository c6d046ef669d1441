"""Presentation state: which view, region and matchup are on screen."""

from __future__ import annotations

from dataclasses import asdict, dataclass, replace

import config


@dataclass(frozen=True)
class ViewState:
    view: str = config.DEFAULT_VIEW
    region: str = config.DEFAULT_REGION
    selected_matchup: int | None = None  # index into the region's matchups

    def __post_init__(self):
        if self.view not in config.VIEWS:
            raise ValueError(f"Unknown view: {self.view!r} (choose from {', '.join(config.VIEWS)})")
        if self.region not in config.REGION_NAMES:
            raise ValueError(f"Unknown region: {self.region!r} "
                             f"(choose from {', '.join(config.REGION_NAMES)})")
        if self.selected_matchup is not None and self.selected_matchup < 0:
            raise ValueError(f"Matchup index must be non-negative, got {self.selected_matchup}")

    def with_view(self, view: str) -> ViewState:
        return replace(self, view=view)

    def with_region(self, region: str) -> ViewState:
        """Switch region. The selection belongs to the old region, so it is cleared."""
        return replace(self, region=region, selected_matchup=None)

    def with_selection(self, index: int | None) -> ViewState:
        return replace(self, selected_matchup=index)

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> ViewState:
        return cls(
            view=data.get("view", config.DEFAULT_VIEW),
            region=data.get("region", config.DEFAULT_REGION),
            selected_matchup=data.get("selected_matchup"),
        )
