"""
Render the heatmap as SVG and HTML documents.
"""

from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from gitea_heatmap.stats_calculator import Statistics
from gitea_heatmap.week_grid import MonthLabel, Week

# GitHub-style palette, indexed by contribution level
COLORS = ("#ebedf0", "#9be9a8", "#40c463", "#30a14e", "#216e39")

CELL_SIZE = 10
CELL_SPACING = 2
MONTH_LABEL_HEIGHT = 20
DAY_LABEL_WIDTH = 30

# Row labels shown beside the grid: (weekday index, label)
DAY_LABELS = ((1, "Mon"), (3, "Wed"), (5, "Fri"))

templates = Environment(
    loader=FileSystemLoader(Path(__file__).parent / "templates"),
    autoescape=select_autoescape(["html", "svg"]),
    undefined=StrictUndefined,
    trim_blocks=True,
    lstrip_blocks=True,
)


def _context(
    weeks: tuple[Week, ...],
    month_labels: tuple[MonthLabel, ...],
    stats: Statistics,
    username: str,
) -> dict:
    return {
        "weeks": weeks,
        "month_labels": month_labels,
        "stats": stats,
        "username": username,
        "colors": COLORS,
        "cell_size": CELL_SIZE,
        "cell_step": CELL_SIZE + CELL_SPACING,
        "cell_spacing": CELL_SPACING,
        "day_labels": DAY_LABELS,
    }


def render_svg(
    weeks: tuple[Week, ...],
    month_labels: tuple[MonthLabel, ...],
    stats: Statistics,
    username: str,
) -> str:
    """
    Render a standalone SVG heatmap.

    Each cell sits in the column of its week and the row of its weekday,
    and carries data-date/data-count attributes plus a hover title.
    """
    step = CELL_SIZE + CELL_SPACING
    width = len(weeks) * step + DAY_LABEL_WIDTH + 20
    height = 7 * step + MONTH_LABEL_HEIGHT + 40

    context = _context(weeks, month_labels, stats, username)
    context.update(
        width=width,
        height=height,
        grid_x=DAY_LABEL_WIDTH,
        grid_y=MONTH_LABEL_HEIGHT + 20,
        # keep the legend inside the canvas for short ranges
        legend_x=max(width - 200, 10),
        legend_y=height - 20,
    )
    return templates.get_template("heatmap.svg").render(context)


def render_html(
    weeks: tuple[Week, ...],
    month_labels: tuple[MonthLabel, ...],
    stats: Statistics,
    username: str,
) -> str:
    """Render a self-contained HTML page with a hover tooltip."""
    context = _context(weeks, month_labels, stats, username)
    context.update(container_width=len(weeks) * (CELL_SIZE + CELL_SPACING) + 60)
    return templates.get_template("heatmap.html").render(context)
