"""
gitea-heatmap: contribution heatmaps for self-hosted Gitea instances

Entry point for the application.
"""

import argparse
import logging
from pathlib import Path

from gitea_heatmap import config
from gitea_heatmap.cli import (
    display_config,
    display_error,
    display_source_result,
    display_statistics,
)
from gitea_heatmap.config import ConfigurationError
from gitea_heatmap.date_range import fill_missing_dates
from gitea_heatmap.gitea_client import GiteaClient, GiteaClientError
from gitea_heatmap.renderers import render_html, render_svg
from gitea_heatmap.sources import fetch_contributions
from gitea_heatmap.stats_calculator import calculate_statistics
from gitea_heatmap.week_grid import build_week_grid, get_month_labels


def build_parser() -> argparse.ArgumentParser:
    """Command-line options. Each falls back to its environment variable."""
    parser = argparse.ArgumentParser(
        prog="gitea-heatmap",
        description="Generate a contribution heatmap (SVG and HTML) for a Gitea user.",
    )
    parser.add_argument("--url", help="Gitea instance URL (GITEA_URL)")
    parser.add_argument("--token", help="Gitea access token (GITEA_TOKEN)")
    parser.add_argument("--username", help="Gitea username (GITEA_USERNAME)")
    parser.add_argument(
        "--start-date", help="First day, YYYY-MM-DD (START_DATE, default Jan 1)"
    )
    parser.add_argument(
        "--end-date", help="Last day, YYYY-MM-DD (END_DATE, default Dec 31)"
    )
    parser.add_argument(
        "--output",
        help=f"SVG output file (OUTPUT_FILE, default {config.DEFAULT_OUTPUT_FILE})",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Show per-repository progress"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="   %(levelname)s %(message)s",
    )

    print("🚀 Gitea Contribution Heatmap Generator")
    print("-" * 50)

    url = args.url or config.GITEA_URL
    token = args.token or config.GITEA_TOKEN
    username = args.username or config.GITEA_USERNAME
    svg_path = Path(args.output or config.OUTPUT_FILE or config.DEFAULT_OUTPUT_FILE)
    html_path = config.html_output_path(svg_path)

    try:
        config.validate_config(url, token, username)
        start, end = config.resolve_date_range(
            args.start_date or config.START_DATE,
            args.end_date or config.END_DATE,
        )
    except ConfigurationError as e:
        display_error(f"Configuration Error:\n{e}")
        return 1

    url = config.normalize_base_url(url)
    display_config(url, username, start, end, svg_path)

    client = GiteaClient(url, token, username)

    try:
        print(f"🔍 Fetching contributions for {username}...")
        data = fetch_contributions(client, start, end)
    except GiteaClientError as e:
        display_error(str(e))
        return 1

    display_source_result(data.source, len(data.counts))

    # Process data
    filled = fill_missing_dates(data.counts, start, end)
    weeks = build_week_grid(filled, start)
    month_labels = get_month_labels(weeks)
    stats = calculate_statistics(filled)
    display_statistics(stats)

    # Render both documents before writing either
    svg = render_svg(weeks, month_labels, stats, username)
    html = render_html(weeks, month_labels, stats, username)

    svg_path.write_text(svg, encoding="utf-8")
    html_path.write_text(html, encoding="utf-8")

    print(f"✅ SVG heatmap written to {svg_path.resolve()}")
    print(f"✅ HTML heatmap written to {html_path.resolve()}")
    print()
    return 0


if __name__ == "__main__":
    exit(main())
