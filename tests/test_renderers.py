"""
Tests for the SVG and HTML renderers.
"""

import xml.etree.ElementTree as ET
from datetime import date

import pytest

from gitea_heatmap.date_range import fill_missing_dates
from gitea_heatmap.renderers import COLORS, render_html, render_svg
from gitea_heatmap.stats_calculator import calculate_statistics
from gitea_heatmap.week_grid import build_week_grid, get_month_labels

SVG_NS = "{http://www.w3.org/2000/svg}"


@pytest.fixture
def heatmap_data():
    """Grid, labels and stats for 2024-01-01..2024-02-10 with two active days."""
    start = date(2024, 1, 1)
    filled = fill_missing_dates(
        {"2024-01-02": 5, "2024-02-01": 1}, start, date(2024, 2, 10)
    )
    weeks = build_week_grid(filled, start)
    return weeks, get_month_labels(weeks), calculate_statistics(filled)


class TestRenderSvg:
    """Tests for render_svg."""

    def test_is_well_formed_xml(self, heatmap_data):
        svg = render_svg(*heatmap_data, "alice")

        assert svg.startswith('<?xml version="1.0" encoding="UTF-8"?>')
        root = ET.fromstring(svg.encode("utf-8"))
        assert root.tag == f"{SVG_NS}svg"

    def test_one_cell_per_day(self, heatmap_data):
        svg = render_svg(*heatmap_data, "alice")
        root = ET.fromstring(svg.encode("utf-8"))

        cells = [rect for rect in root.iter(f"{SVG_NS}rect") if rect.get("data-date")]

        assert len(cells) == 41

    def test_cell_attributes(self, heatmap_data):
        svg = render_svg(*heatmap_data, "alice")
        root = ET.fromstring(svg.encode("utf-8"))

        cells = {
            rect.get("data-date"): rect
            for rect in root.iter(f"{SVG_NS}rect")
            if rect.get("data-date")
        }
        busy = cells["2024-01-02"]

        assert busy.get("data-count") == "5"
        assert busy.get("fill") == COLORS[4]
        # Tuesday row, first column
        assert busy.get("x") == "0"
        assert busy.get("y") == "24"
        assert busy.find(f"{SVG_NS}title").text == "2024-01-02: 5 contributions"
        assert cells["2024-01-03"].get("fill") == COLORS[0]

    def test_title_stats_and_labels(self, heatmap_data):
        svg = render_svg(*heatmap_data, "alice")

        assert "alice's contributions" in svg
        assert "Total: 6" in svg
        assert "Active days: 2/41" in svg
        assert ">Jan</text>" in svg
        assert ">Feb</text>" in svg
        assert ">Mon</text>" in svg
        assert ">Less</text>" in svg and ">More</text>" in svg

    def test_username_is_escaped(self, heatmap_data):
        svg = render_svg(*heatmap_data, "<script>")

        assert "<script>" not in svg
        ET.fromstring(svg.encode("utf-8"))


class TestRenderHtml:
    """Tests for render_html."""

    def test_contains_cells_and_tooltip(self, heatmap_data):
        html = render_html(*heatmap_data, "alice")

        assert html.startswith("<!DOCTYPE html>")
        assert html.count('class="cell"') == 41
        assert 'data-date="2024-01-02" data-count="5"' in html
        assert 'id="tooltip"' in html
        assert "mouseenter" in html

    def test_cells_placed_by_weekday(self, heatmap_data):
        html = render_html(*heatmap_data, "alice")

        # 2024-01-07 is a Sunday, the first grid row
        assert f'style="grid-row: 1; background: {COLORS[0]};" data-date="2024-01-07"' in html

    def test_stats_and_labels(self, heatmap_data):
        html = render_html(*heatmap_data, "alice")

        assert "<title>alice&#39;s contributions</title>" not in html
        assert "<title>alice's contributions</title>" in html
        assert '<span class="stat-value">6</span>' in html
        assert '<span class="stat-value">2/41</span>' in html
        assert '<span class="stat-value">0.15</span>' in html
        assert ">Jan</div>" in html
        assert ">Feb</div>" in html

    def test_username_is_escaped(self, heatmap_data):
        html = render_html(*heatmap_data, "<b>bob</b>")

        assert "<b>bob</b>" not in html
        assert "&lt;b&gt;bob&lt;/b&gt;" in html
