"""Aggregation of releases into dashboard time series.

This module provides:
- Counting helpers keyed by month, year, weekday and ISO week.
- A trailing moving average rounded to one decimal place.
- The year x month heatmap grid with row and column totals.
- Per-year weekly series, newest year first.
"""

from __future__ import annotations

from collections import Counter
from decimal import ROUND_HALF_UP, Decimal
from typing import Callable, Dict, Iterable, List, Optional, Sequence, TypeVar

from .models import HeatmapRow, ProjectStats, Release, WeeklySeries

T = TypeVar("T")

MONTHS_PER_YEAR = 12
WEEKS_PER_YEAR = 53
DAYS_PER_WEEK = 7
MOVING_AVERAGE_WINDOW = 3
EMPTY_DATE_PLACEHOLDER = "?"


def count_by(items: Iterable[T], key: Callable[[T], str]) -> Dict[str, int]:
    """Count items grouped by ``key``."""
    return dict(Counter(key(item) for item in items))


def round_one_decimal(value: float) -> float:
    """Round to one decimal place, halves away from zero."""
    quantized = Decimal(repr(value)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
    return float(quantized)


def moving_average(values: Sequence[int], window: int = MOVING_AVERAGE_WINDOW) -> List[Optional[float]]:
    """Compute a trailing moving average aligned to ``values``.

    The first ``window - 1`` entries are ``None`` because there is not enough
    history to average.
    """
    averages: List[Optional[float]] = []
    for index in range(len(values)):
        if index < window - 1:
            averages.append(None)
            continue
        span = values[index - window + 1 : index + 1]
        averages.append(round_one_decimal(sum(span) / window))
    return averages


def _heatmap_grid(year_keys: Sequence[str], per_month: Dict[str, int]) -> List[HeatmapRow]:
    grid: List[HeatmapRow] = []
    for year in year_keys:
        counts = tuple(
            per_month.get(f"{year}-{month:02d}", 0) for month in range(1, MONTHS_PER_YEAR + 1)
        )
        grid.append(HeatmapRow(year=year, counts=counts, total=sum(counts)))
    return grid


def _weekly_series(year_keys: Sequence[str], releases: Sequence[Release]) -> List[WeeklySeries]:
    series: List[WeeklySeries] = []
    for year in reversed(year_keys):
        per_week = count_by((r for r in releases if r.year == year), lambda r: r.iso_week)
        data = tuple(
            per_week.get(f"{year}-W{week:02d}", 0) for week in range(1, WEEKS_PER_YEAR + 1)
        )
        series.append(WeeklySeries(year=year, data=data))
    return series


def aggregate(releases: Sequence[Release]) -> ProjectStats:
    """Aggregate a project's releases into dashboard statistics.

    ``releases`` is expected in ascending date order; the date range is read
    from its first and last entries. Month and year keys come only from
    observed data, so months without releases are gaps rather than zeros in
    the monthly series. The heatmap, weekly series and weekday counts are
    zero-filled.

    Weekly buckets are keyed by calendar year but matched on ISO week
    strings, so a release whose ISO week belongs to a neighbouring year (for
    example 2023-01-01, ISO week 2022-W52) is not counted in any weekly row.
    """
    per_month = count_by(releases, lambda r: r.month)
    per_year = count_by(releases, lambda r: r.year)
    per_day = Counter(r.day_of_week for r in releases)

    month_keys = sorted(per_month)
    month_data = [per_month[key] for key in month_keys]

    year_keys = sorted(per_year)
    year_data = [per_year[key] for key in year_keys]

    heatmap_grid = _heatmap_grid(year_keys, per_month)
    month_totals = [
        sum(row.counts[month] for row in heatmap_grid) for month in range(MONTHS_PER_YEAR)
    ]

    if releases:
        date_range = (releases[0].date, releases[-1].date)
    else:
        date_range = (EMPTY_DATE_PLACEHOLDER, EMPTY_DATE_PLACEHOLDER)

    return ProjectStats(
        total=len(releases),
        date_range=date_range,
        month_keys=month_keys,
        month_data=month_data,
        moving_avg=moving_average(month_data),
        year_keys=year_keys,
        year_data=year_data,
        day_data=[per_day.get(day, 0) for day in range(DAYS_PER_WEEK)],
        heatmap_grid=heatmap_grid,
        weekly_per_year=_weekly_series(year_keys, releases),
        month_totals=month_totals,
    )
