"""
Calculate summary statistics for the contribution heatmap.
"""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal


@dataclass(frozen=True)
class Statistics:
    """Aggregate counters over the dense daily series."""

    total: int
    days_with_contributions: int
    total_days: int
    max_count: int
    avg_count: str


def format_average(total: int, days: int) -> str:
    """Average per day with two decimals, rounding half up. "0.00" when days is 0."""
    if days == 0:
        return "0.00"
    average = Decimal(total) / Decimal(days)
    return str(average.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def calculate_statistics(counts: dict[str, int]) -> Statistics:
    """
    Calculate summary statistics.

    Args:
        counts: Dense mapping of ISO date -> count from fill_missing_dates()

    Returns:
        Statistics with:
        - total: Sum of all counts
        - days_with_contributions: Days with at least one contribution
        - total_days: Number of days in the series
        - max_count: Highest daily count (0 if empty)
        - avg_count: Average per day as a string, e.g. "1.67"
    """
    values = list(counts.values())
    total = sum(values)

    return Statistics(
        total=total,
        days_with_contributions=sum(1 for count in values if count > 0),
        total_days=len(values),
        max_count=max(values, default=0),
        avg_count=format_average(total, len(values)),
    )
