"""Tests for calendar helpers."""

import sys
from datetime import date, datetime, timezone
from pathlib import Path

import pytest

# Add src directory to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from release_dashboard.dates import day_of_week, iso_week, parse_date, parse_timestamp


def test_iso_week_first_monday_of_2024_is_week_one():
    """Verify 2024-01-01 (a Monday) falls in ISO week 1 of 2024."""
    assert iso_week(date(2024, 1, 1)) == "2024-W01"


def test_iso_week_sunday_jan_first_belongs_to_previous_iso_year():
    """Verify 2023-01-01 (a Sunday) is the last ISO week of 2022."""
    assert iso_week(date(2023, 1, 1)) == "2022-W52"


def test_iso_week_late_december_can_belong_to_next_iso_year():
    """Verify 2024-12-30 (a Monday) starts ISO week 1 of 2025."""
    assert iso_week(date(2024, 12, 30)) == "2025-W01"


def test_iso_week_long_year_has_week_53():
    """Verify 2020-12-31 (a Thursday) is in ISO week 53."""
    assert iso_week(date(2020, 12, 31)) == "2020-W53"


def test_iso_week_pads_single_digit_weeks():
    """Verify week numbers are zero-padded to two digits."""
    assert iso_week(date(2024, 2, 2)) == "2024-W05"


def test_day_of_week_uses_sunday_as_zero():
    """Verify weekday indices run from Sunday=0 to Saturday=6."""
    assert day_of_week(date(2023, 1, 1)) == 0
    assert day_of_week(date(2024, 1, 1)) == 1
    assert day_of_week(date(2024, 1, 5)) == 5
    assert day_of_week(date(2024, 1, 6)) == 6


def test_parse_timestamp_normalizes_z_suffix_to_utc():
    """Verify GitHub 'Z' timestamps parse to timezone-aware UTC datetimes."""
    parsed = parse_timestamp("2024-01-05T13:45:00Z")

    assert parsed == datetime(2024, 1, 5, 13, 45, tzinfo=timezone.utc)


def test_parse_timestamp_rejects_garbage():
    """Verify malformed timestamps raise ValueError."""
    with pytest.raises(ValueError):
        parse_timestamp("yesterday")


def test_parse_date_rejects_non_calendar_values():
    """Verify parse_date accepts only real YYYY-MM-DD dates."""
    assert parse_date("2024-02-29") == date(2024, 2, 29)
    with pytest.raises(ValueError):
        parse_date("2023-02-29")
    with pytest.raises(ValueError):
        parse_date("2024-1-5")
