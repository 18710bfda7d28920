"""Conversion of raw pull request records and cached rows into releases."""

from __future__ import annotations

from typing import Any, Mapping

from .dates import day_of_week, iso_week, parse_date, parse_timestamp
from .errors import DataValidationError
from .models import Release

GHOST_LOGIN = "ghost"


def build_release(number: int, date_text: str, author: str) -> Release:
    """Build a release, deriving every calendar field from ``date_text``.

    Raises:
        DataValidationError: If ``date_text`` is not a ``YYYY-MM-DD`` date.
    """
    try:
        day = parse_date(date_text)
    except ValueError as exc:
        raise DataValidationError(f"Invalid release date {date_text!r} for PR #{number}.") from exc

    return Release(
        number=number,
        date=date_text,
        author=author,
        day_of_week=day_of_week(day),
        iso_week=iso_week(day),
        month=date_text[:7],
        year=date_text[:4],
    )


def normalize(raw: Mapping[str, Any]) -> Release:
    """Normalize a ``gh pr list`` record into a :class:`Release`.

    The release date is the first ten characters of ``mergedAt``; the full
    timestamp must still parse so truncated or garbled values are rejected.

    Raises:
        DataValidationError: If the record is missing required fields or
            carries a malformed merge timestamp.
    """
    if not isinstance(raw, Mapping):
        raise DataValidationError(f"Pull request record must be an object, got {raw!r}")

    number = raw.get("number")
    merged_at = raw.get("mergedAt")

    if not isinstance(number, int) or isinstance(number, bool):
        raise DataValidationError(f"Pull request record has no integer 'number': {dict(raw)}")
    if not isinstance(merged_at, str) or not merged_at:
        raise DataValidationError(f"Pull request #{number} has no 'mergedAt' timestamp.")

    try:
        parse_timestamp(merged_at)
    except ValueError as exc:
        raise DataValidationError(
            f"Pull request #{number} has a malformed 'mergedAt' timestamp: {merged_at!r}"
        ) from exc

    author = (raw.get("author") or {}).get("login") or GHOST_LOGIN
    return build_release(number, merged_at[:10], str(author))


def parse_row(row: Mapping[str, Any]) -> Release:
    """Rebuild a :class:`Release` from a cached ``number,date,author`` row.

    Derived fields are recomputed from ``date`` rather than read from the
    cache.

    Raises:
        DataValidationError: If a column is missing or malformed.
    """
    number_text = row.get("number")
    date_text = row.get("date")
    author = row.get("author")

    if number_text is None or date_text is None or author is None:
        raise DataValidationError(f"Cached row is missing columns: {dict(row)}")

    try:
        number = int(number_text)
    except ValueError as exc:
        raise DataValidationError(f"Cached row has a non-integer PR number: {number_text!r}") from exc

    return build_release(number, date_text, author)
