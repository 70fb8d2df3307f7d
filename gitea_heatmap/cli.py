"""
CLI display functions for gitea-heatmap.
"""

from datetime import date
from pathlib import Path

from gitea_heatmap.sources import DATA_SOURCES
from gitea_heatmap.stats_calculator import Statistics

TROUBLESHOOTING_TIPS = (
    "Make sure a .env file exists with the right values, or pass them as options",
    "Check the Gitea URL is correct (e.g. https://git.example.com)",
    "Confirm the access token is valid and has read permission",
    "Verify the username exists on the instance",
)


def display_config(
    url: str, username: str, start: date, end: date, output: Path
) -> None:
    """Display the resolved run configuration."""
    print("📋 Configuration:")
    print(f"   Gitea URL:  {url}")
    print(f"   Username:   {username}")
    print(f"   Date range: {start.isoformat()} to {end.isoformat()}")
    print(f"   Output:     {output}")
    print()


def describe_source(name: str) -> str:
    """Human-readable description of a data source name."""
    for source in DATA_SOURCES:
        if source.name == name:
            return source.description
    return name


def display_source_result(source: str, day_count: int) -> None:
    """Report which data source produced the counts."""
    day_word = "day" if day_count == 1 else "days"
    print(f"✅ Got {day_count} {day_word} of data from the {describe_source(source)}")
    print()


def display_statistics(stats: Statistics) -> None:
    """
    Display summary statistics to the console.

    Args:
        stats: Statistics from calculate_statistics()
    """
    print("📊 Contribution Stats:")
    print(f"   Total:       {stats.total}")
    print(f"   Active days: {stats.days_with_contributions}/{stats.total_days}")
    print(f"   Max:         {stats.max_count} per day")
    print(f"   Average:     {stats.avg_count} per day")
    print()


def display_error(message: str) -> None:
    """Display a fatal error followed by troubleshooting tips."""
    print(f"\n❌ Error: {message}")
    print("\n💡 Tips:")
    for number, tip in enumerate(TROUBLESHOOTING_TIPS, start=1):
        print(f"   {number}. {tip}")
    print()
