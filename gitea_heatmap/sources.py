"""
Contribution data sources.

Gitea exposes contribution data in several ways depending on version and
instance settings. Each source below turns one of them into a mapping of
ISO date -> contribution count; fetch_contributions tries them in order
and returns the first that succeeds.
"""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Callable

from gitea_heatmap.date_range import utc_date_from_iso, utc_date_from_timestamp
from gitea_heatmap.gitea_client import GiteaClient, GiteaClientError

logger = logging.getLogger(__name__)


class DataSourceExhaustedError(GiteaClientError):
    """Raised when every contribution data source failed."""

    def __init__(self, failures: dict[str, str]):
        self.failures = failures
        details = "; ".join(f"{name}: {reason}" for name, reason in failures.items())
        super().__init__(f"All contribution data sources failed ({details})")


@dataclass(frozen=True)
class FetchContext:
    """Inputs shared by every data source."""

    client: GiteaClient
    user_id: int
    start: date
    end: date


@dataclass(frozen=True)
class DataSource:
    """A named strategy for obtaining per-day contribution counts."""

    name: str
    description: str
    fetch: Callable[[FetchContext], dict[str, int]]


@dataclass(frozen=True)
class ContributionData:
    """Contribution counts plus the name of the source that produced them."""

    source: str
    counts: dict[str, int]


def _count_in_range(
    counts: dict[str, int], day: date, ctx: FetchContext, amount: int = 1
) -> bool:
    """Add amount to the day's count if it falls in range. Returns whether it did."""
    if not ctx.start <= day <= ctx.end:
        return False
    key = day.isoformat()
    counts[key] = counts.get(key, 0) + amount
    return True


def _records(payload, what: str) -> list[dict]:
    """Return the dict records of a list payload, or raise if it is not a list."""
    if not isinstance(payload, list):
        raise GiteaClientError(f"Unexpected {what} response: expected a list")
    return [record for record in payload if isinstance(record, dict)]


def fetch_from_heatmap(ctx: FetchContext) -> dict[str, int]:
    """Read the dedicated heatmap endpoint (fastest and most accurate)."""
    counts: dict[str, int] = {}

    for item in _records(ctx.client.get_heatmap(), "heatmap"):
        timestamp = item.get("timestamp")
        contributions = item.get("contributions") or 0
        if not isinstance(timestamp, (int, float)) or isinstance(timestamp, bool):
            continue
        if not isinstance(contributions, int) or isinstance(contributions, bool):
            continue
        _count_in_range(counts, utc_date_from_timestamp(timestamp), ctx, contributions)

    return counts


def fetch_from_activities(ctx: FetchContext) -> dict[str, int]:
    """Count activity feed entries, one contribution per activity."""
    counts: dict[str, int] = {}

    activities = ctx.client.get_activity_feed(ctx.user_id)
    for activity in _records(activities, "activity feed"):
        created = activity.get("created")
        if not isinstance(created, str):
            continue
        try:
            day = utc_date_from_iso(created)
        except ValueError:
            continue
        _count_in_range(counts, day, ctx)

    return counts


def _count_repo_commits(commits, counts: dict[str, int], ctx: FetchContext) -> int:
    """
    Add one repository's commits to counts.

    Returns:
        Number of commits that fell in range

    Raises:
        GiteaClientError: If the commit list has an unexpected shape
    """
    repo_count = 0
    for commit in _records(commits, "commit list"):
        details = commit.get("commit") or {}
        author = details.get("author") if isinstance(details, dict) else None
        commit_date = author.get("date") if isinstance(author, dict) else None
        if commit_date is None:
            continue
        if not isinstance(commit_date, str):
            raise GiteaClientError(f"Unexpected commit date: {commit_date!r}")
        try:
            day = utc_date_from_iso(commit_date)
        except ValueError:
            continue
        if _count_in_range(counts, day, ctx):
            repo_count += 1
    return repo_count


def fetch_from_repo_commits(ctx: FetchContext) -> dict[str, int]:
    """
    Count commits across the user's repositories (slowest, most compatible).

    Only the first 100 repositories and the latest 100 commits of each are
    read, so prolific accounts are under-counted. A repository that times
    out, errors or returns a malformed commit list is skipped.
    """
    counts: dict[str, int] = {}
    repos = _records(ctx.client.get_user_repos(limit=100), "repository list")
    logger.info("Found %d repositories, counting commits...", len(repos))

    for index, repo in enumerate(repos, start=1):
        full_name = repo.get("full_name")
        if not isinstance(full_name, str) or not full_name:
            continue
        logger.info("[%d/%d] Processing %s", index, len(repos), full_name)

        # Counted separately so a skipped repository leaves no partial counts
        repo_counts: dict[str, int] = {}
        try:
            commits = ctx.client.get_repo_commits(full_name, limit=100)
            repo_count = _count_repo_commits(commits, repo_counts, ctx)
        except GiteaClientError as e:
            logger.warning("Skipping repository %s: %s", full_name, e)
            continue

        for key, count in repo_counts.items():
            counts[key] = counts.get(key, 0) + count
        if repo_count:
            logger.info("  found %d commits", repo_count)

    return counts


DATA_SOURCES: tuple[DataSource, ...] = (
    DataSource("heatmap", "Heatmap API", fetch_from_heatmap),
    DataSource("activities", "activity feed API", fetch_from_activities),
    DataSource("repo-commits", "repository commit scan", fetch_from_repo_commits),
)


def fetch_contributions(
    client: GiteaClient,
    start: date,
    end: date,
    sources: tuple[DataSource, ...] = DATA_SOURCES,
) -> ContributionData:
    """
    Fetch per-day contribution counts, falling back through data sources.

    The user id is resolved first; an unknown user or a rejected token
    raises immediately instead of being retried by every source.

    Args:
        client: Configured Gitea client
        start: First day of the range
        end: Last day of the range (inclusive)
        sources: Data sources in priority order

    Returns:
        ContributionData from the first source that succeeded

    Raises:
        NotFoundError: If the user does not exist
        AuthenticationError: If the token is rejected
        DataSourceExhaustedError: If every source failed
    """
    user_id = client.get_user_id()
    ctx = FetchContext(client=client, user_id=user_id, start=start, end=end)
    failures: dict[str, str] = {}

    for source in sources:
        try:
            counts = source.fetch(ctx)
        except GiteaClientError as e:
            logger.warning("%s unavailable, trying next source: %s", source.description, e)
            failures[source.name] = str(e)
            continue

        logger.info("Fetched %d days of data from the %s", len(counts), source.description)
        return ContributionData(source=source.name, counts=counts)

    raise DataSourceExhaustedError(failures)
