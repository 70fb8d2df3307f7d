"""
Week grid builder for the contribution heatmap.

Groups the dense daily series into week columns, assigns each day an
intensity level relative to the busiest day, and locates month labels.
"""

from dataclasses import dataclass
from datetime import date

from gitea_heatmap.date_range import parse_date

MONTH_NAMES = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

DAYS_PER_WEEK = 7


@dataclass(frozen=True)
class ContributionDay:
    """A single heatmap cell."""

    date: str
    count: int
    level: int
    weekday: int  # 0=Sunday .. 6=Saturday


@dataclass(frozen=True)
class MonthLabel:
    """Month name and the index of the week column it starts in."""

    month: str
    week_index: int


Week = tuple[ContributionDay, ...]


def contribution_level(count: int, max_count: int) -> int:
    """
    Calculate intensity level for heatmap coloring.

    Args:
        count: Contributions on the day
        max_count: Highest daily count in the series

    Returns:
        Level from 0-4:
            0: No contributions
            1: Below 25% of the maximum
            2: 25% or more
            3: 50% or more
            4: 75% or more
    """
    if count == 0 or max_count == 0:
        return 0

    ratio = count / max_count
    if ratio >= 0.75:
        return 4
    elif ratio >= 0.50:
        return 3
    elif ratio >= 0.25:
        return 2
    else:
        return 1


def sunday_weekday(day: date) -> int:
    """Weekday index with Sunday as 0."""
    return (day.weekday() + 1) % 7


def build_week_grid(counts: dict[str, int], start: date) -> tuple[Week, ...]:
    """
    Partition the dense daily series into weeks.

    Weeks are consecutive runs of 7 days beginning at the first day of the
    range, not at a Sunday; only the last week may be shorter. Renderers
    place each cell by its weekday.

    Args:
        counts: Dense mapping of ISO date -> count from fill_missing_dates()
        start: First day of the range. Unused for grouping, which starts
            at the earliest date in counts.

    Returns:
        Tuple of weeks, each a tuple of ContributionDay
    """
    max_count = max(counts.values(), default=0)
    dates = sorted(counts)

    days = []
    for date_str in dates:
        count = counts[date_str]
        days.append(
            ContributionDay(
                date=date_str,
                count=count,
                level=contribution_level(count, max_count),
                weekday=sunday_weekday(parse_date(date_str)),
            )
        )

    return tuple(
        tuple(days[i:i + DAYS_PER_WEEK]) for i in range(0, len(days), DAYS_PER_WEEK)
    )


def get_month_labels(weeks: tuple[Week, ...]) -> tuple[MonthLabel, ...]:
    """
    Find the week column where each month first appears.

    A label is emitted whenever the first day of a week falls in a
    different month than the previous label.
    """
    labels = []
    last_month = None

    for week_index, week in enumerate(weeks):
        if not week:
            continue
        month = parse_date(week[0].date).month
        if month != last_month:
            labels.append(MonthLabel(month=MONTH_NAMES[month - 1], week_index=week_index))
            last_month = month

    return tuple(labels)
