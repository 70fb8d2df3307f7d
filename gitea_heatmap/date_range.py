"""
Date helpers and the date range normalizer.

Every timestamp coming from the Gitea API is reduced to a UTC calendar day
here, so all other modules compare plain dates and never instants.
"""

from datetime import date, datetime, timedelta, timezone
from typing import Iterator


def parse_date(value: str) -> date:
    """Parse a YYYY-MM-DD string into a date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def iter_dates(start: date, end: date) -> Iterator[date]:
    """Yield every calendar day from start to end, inclusive."""
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)


def utc_date_from_timestamp(seconds: int | float) -> date:
    """Convert Unix epoch seconds to the UTC calendar day."""
    return datetime.fromtimestamp(seconds, tz=timezone.utc).date()


def utc_date_from_iso(value: str) -> date:
    """
    Convert an ISO 8601 timestamp to the UTC calendar day.

    Timestamps without an offset are treated as UTC.
    """
    parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        return parsed.date()
    return parsed.astimezone(timezone.utc).date()


def fill_missing_dates(
    counts: dict[str, int], start: date, end: date
) -> dict[str, int]:
    """
    Build a dense daily series covering the whole range.

    Args:
        counts: Mapping of ISO date string -> contribution count
        start: First day of the range
        end: Last day of the range (inclusive)

    Returns:
        New mapping with one entry per day in range. Days missing from
        counts get 0; entries outside the range are dropped.
    """
    filled = {}
    for day in iter_dates(start, end):
        date_str = day.isoformat()
        filled[date_str] = counts.get(date_str, 0)
    return filled
