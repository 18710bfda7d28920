"""Calendar helpers for release records.

All values are plain calendar dates taken from UTC timestamps, so results do
not depend on the machine's local time zone.
"""

from __future__ import annotations

from datetime import date, datetime, timezone


def parse_timestamp(value: str) -> datetime:
    """Parse a GitHub ISO-8601 timestamp into a timezone-aware UTC datetime.

    Raises:
        ValueError: If ``value`` is not a valid ISO-8601 timestamp.
    """
    normalized = value[:-1] + "+00:00" if value.endswith("Z") else value
    parsed = datetime.fromisoformat(normalized)
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def parse_date(value: str) -> date:
    """Parse a ``YYYY-MM-DD`` string.

    Raises:
        ValueError: If ``value`` is not exactly a calendar date.
    """
    if len(value) != 10:
        raise ValueError(f"Invalid date {value!r}: expected YYYY-MM-DD.")
    return date.fromisoformat(value)


def iso_week(day: date) -> str:
    """Return the ISO-8601 week identifier of ``day`` as ``YYYY-Www``.

    Week 1 is the week containing the year's first Thursday and weeks start
    on Monday, so early January can belong to the previous ISO year and late
    December to the next one.
    """
    iso_year, week, _ = day.isocalendar()
    return f"{iso_year}-W{week:02d}"


def day_of_week(day: date) -> int:
    """Return the weekday index with 0 for Sunday through 6 for Saturday."""
    return day.isoweekday() % 7
