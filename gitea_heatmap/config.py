"""
Configuration management for gitea-heatmap.

Loads Gitea credentials and output settings from environment variables.
"""

import os
from datetime import date
from pathlib import Path

from dotenv import load_dotenv

from gitea_heatmap.date_range import parse_date

# Load .env file from the working directory
load_dotenv()

GITEA_URL = os.getenv("GITEA_URL")
GITEA_TOKEN = os.getenv("GITEA_TOKEN")
GITEA_USERNAME = os.getenv("GITEA_USERNAME")
OUTPUT_FILE = os.getenv("OUTPUT_FILE")
START_DATE = os.getenv("START_DATE")
END_DATE = os.getenv("END_DATE")

DEFAULT_OUTPUT_FILE = "contribution-heatmap.svg"

PLACEHOLDERS = {
    "GITEA_TOKEN": "your_token_here",
    "GITEA_USERNAME": "your_username_here",
}


class ConfigurationError(ValueError):
    """Raised when a required setting is missing or invalid."""

    pass


def validate_config(url: str | None, token: str | None, username: str | None) -> None:
    """Validate that required configuration is present."""
    missing = []

    for name, value in (
        ("GITEA_URL", url),
        ("GITEA_TOKEN", token),
        ("GITEA_USERNAME", username),
    ):
        if not value or value == PLACEHOLDERS.get(name):
            missing.append(name)

    if missing:
        raise ConfigurationError(
            f"Missing required configuration: {', '.join(missing)}\n"
            "Please copy .env.example to .env and fill in your values,\n"
            "or pass them with --url, --token and --username."
        )


def normalize_base_url(url: str) -> str:
    """Strip trailing slashes so endpoint paths can be appended directly."""
    return url.rstrip("/")


def resolve_date_range(
    start: str | None = None,
    end: str | None = None,
    today: date | None = None,
) -> tuple[date, date]:
    """
    Resolve the inclusive date range to report on.

    Args:
        start: Start date (YYYY-MM-DD). Defaults to Jan 1 of the current year.
        end: End date (YYYY-MM-DD). Defaults to Dec 31 of the current year.
        today: Override today's date (for testing)

    Returns:
        Tuple of (start_date, end_date)

    Raises:
        ConfigurationError: If a date is malformed or start is after end
    """
    if today is None:
        today = date.today()

    try:
        start_date = parse_date(start) if start else date(today.year, 1, 1)
        end_date = parse_date(end) if end else date(today.year, 12, 31)
    except ValueError as e:
        raise ConfigurationError(f"Invalid date: {e}. Use the YYYY-MM-DD format.") from e

    if start_date > end_date:
        raise ConfigurationError(
            f"Start date {start_date.isoformat()} is after end date "
            f"{end_date.isoformat()}."
        )

    return start_date, end_date


def html_output_path(svg_path: str | Path) -> Path:
    """Derive the HTML output file from the SVG one (heatmap.svg -> heatmap.html)."""
    svg_path = Path(svg_path)
    if svg_path.suffix.lower() == ".svg":
        return svg_path.with_suffix(".html")
    return svg_path.with_name(svg_path.name + ".html")
