"""
Tests for configuration validation and date range resolution.
"""

from datetime import date
from pathlib import Path

import pytest

from gitea_heatmap.config import (
    ConfigurationError,
    html_output_path,
    normalize_base_url,
    resolve_date_range,
    validate_config,
)


class TestValidateConfig:
    """Tests for required settings."""

    def test_valid_config(self):
        validate_config("https://git.example.com", "token", "alice")

    def test_missing_url(self):
        with pytest.raises(ConfigurationError, match="GITEA_URL"):
            validate_config(None, "token", "alice")

    def test_missing_token(self):
        with pytest.raises(ConfigurationError, match="GITEA_TOKEN"):
            validate_config("https://git.example.com", "", "alice")

    def test_missing_username(self):
        with pytest.raises(ConfigurationError, match="GITEA_USERNAME"):
            validate_config("https://git.example.com", "token", None)

    def test_lists_every_missing_setting(self):
        with pytest.raises(ConfigurationError) as exc_info:
            validate_config(None, None, None)

        message = str(exc_info.value)
        assert "GITEA_URL, GITEA_TOKEN, GITEA_USERNAME" in message

    def test_placeholder_values(self):
        """Should reject placeholder values from .env.example."""
        with pytest.raises(ConfigurationError):
            validate_config("https://git.example.com", "your_token_here", "your_username_here")

    def test_is_a_value_error(self):
        with pytest.raises(ValueError):
            validate_config(None, "token", "alice")


class TestResolveDateRange:
    """Tests for date range defaults and validation."""

    def test_defaults_to_current_year(self):
        start, end = resolve_date_range(today=date(2025, 6, 15))

        assert start == date(2025, 1, 1)
        assert end == date(2025, 12, 31)

    def test_explicit_dates(self):
        start, end = resolve_date_range("2024-03-01", "2024-03-31")

        assert start == date(2024, 3, 1)
        assert end == date(2024, 3, 31)

    def test_only_start_given(self):
        start, end = resolve_date_range("2025-07-01", None, today=date(2025, 6, 15))

        assert start == date(2025, 7, 1)
        assert end == date(2025, 12, 31)

    def test_single_day_range(self):
        start, end = resolve_date_range("2024-01-01", "2024-01-01")

        assert start == end

    def test_malformed_date(self):
        with pytest.raises(ConfigurationError, match="YYYY-MM-DD"):
            resolve_date_range("01/02/2024", "2024-12-31")

    def test_start_after_end(self):
        with pytest.raises(ConfigurationError, match="after end date"):
            resolve_date_range("2024-12-31", "2024-01-01")


class TestOutputPaths:
    """Tests for URL and output file helpers."""

    def test_normalize_base_url(self):
        assert normalize_base_url("https://git.example.com/") == "https://git.example.com"
        assert normalize_base_url("https://git.example.com") == "https://git.example.com"

    def test_html_path_replaces_svg_suffix(self):
        assert html_output_path("contribution-heatmap.svg") == Path("contribution-heatmap.html")

    def test_html_path_keeps_directory(self):
        assert html_output_path(Path("out/map.svg")) == Path("out/map.html")

    def test_html_path_without_svg_suffix(self):
        assert html_output_path("heatmap") == Path("heatmap.html")
