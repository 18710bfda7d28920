"""Domain models for release frequency reporting.

Field names follow Python conventions; ``to_payload`` methods produce the
camelCase mappings consumed by the dashboard's script.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple


@dataclass(frozen=True, slots=True)
class ProjectConfig:
    """Represents one configured repository/base-branch pair."""

    id: str
    name: str
    repo: str
    base: str


@dataclass(frozen=True, slots=True)
class Release:
    """Represents one merged pull request with its derived calendar fields."""

    number: int
    date: str
    author: str
    day_of_week: int
    iso_week: str
    month: str
    year: str


@dataclass(frozen=True, slots=True)
class HeatmapRow:
    """Represents one year of the year x month heatmap."""

    year: str
    counts: Tuple[int, ...]
    total: int

    def to_payload(self) -> Dict[str, Any]:
        return {"year": self.year, "counts": list(self.counts), "total": self.total}


@dataclass(frozen=True, slots=True)
class WeeklySeries:
    """Represents the 53 ISO-week buckets of one year."""

    year: str
    data: Tuple[int, ...]

    def to_payload(self) -> Dict[str, Any]:
        return {"year": self.year, "data": list(self.data)}


@dataclass(frozen=True, slots=True)
class ProjectStats:
    """Represents aggregated release statistics for a single project."""

    total: int
    date_range: Tuple[str, str]
    month_keys: List[str]
    month_data: List[int]
    moving_avg: List[Optional[float]]
    year_keys: List[str]
    year_data: List[int]
    day_data: List[int]
    heatmap_grid: List[HeatmapRow]
    weekly_per_year: List[WeeklySeries]
    month_totals: List[int]

    def to_payload(self) -> Dict[str, Any]:
        """Return the JSON-ready mapping embedded in the dashboard."""
        return {
            "total": self.total,
            "dateRange": list(self.date_range),
            "monthKeys": list(self.month_keys),
            "monthData": list(self.month_data),
            "movingAvg": list(self.moving_avg),
            "yearKeys": list(self.year_keys),
            "yearData": list(self.year_data),
            "dayData": list(self.day_data),
            "heatmapGrid": [row.to_payload() for row in self.heatmap_grid],
            "weeklyPerYear": [series.to_payload() for series in self.weekly_per_year],
            "monthTotals": list(self.month_totals),
        }
