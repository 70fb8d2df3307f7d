"""
Gitea API client for fetching user contribution data.
"""

import requests


class GiteaClientError(Exception):
    """Base exception for Gitea client errors."""

    pass


class AuthenticationError(GiteaClientError):
    """Raised when Gitea rejects the access token."""

    pass


class NotFoundError(GiteaClientError):
    """Raised when a user or endpoint does not exist on the instance."""

    pass


class TransientNetworkError(GiteaClientError):
    """Raised on timeouts and connection failures."""

    pass


class GiteaClient:
    """Client for interacting with the Gitea REST API."""

    API_PREFIX = "/api/v1"
    DEFAULT_TIMEOUT = 30.0
    COMMIT_TIMEOUT = 10.0
    MAX_LIMIT = 100

    def __init__(self, base_url: str, token: str, username: str):
        """
        Initialize the Gitea client.

        Args:
            base_url: Root URL of the Gitea instance (e.g. https://git.example.com)
            token: Gitea personal access token
            username: Gitea username to fetch contributions for
        """
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.username = username
        self.session = requests.Session()
        self.session.headers.update(
            {
                "Authorization": f"token {token}",
                "Accept": "application/json",
            }
        )

    def _get(self, path: str, params: dict | None = None, timeout: float | None = None):
        """
        Perform a GET request against the API and decode the JSON body.

        Raises:
            AuthenticationError: On 401/403 responses
            NotFoundError: On 404 responses
            TransientNetworkError: On timeouts and connection failures
            GiteaClientError: On any other failure
        """
        url = f"{self.base_url}{self.API_PREFIX}{path}"

        try:
            response = self.session.get(
                url, params=params, timeout=timeout or self.DEFAULT_TIMEOUT
            )
        except requests.Timeout as e:
            raise TransientNetworkError(f"Request to {url} timed out") from e
        except requests.ConnectionError as e:
            raise TransientNetworkError(
                f"Could not connect to Gitea instance: {self.base_url}"
            ) from e

        if response.status_code in (401, 403):
            raise AuthenticationError(
                "Authentication failed. Check your GITEA_TOKEN is valid."
            )
        elif response.status_code == 404:
            raise NotFoundError(f"Not found: {path}")
        elif not response.ok:
            raise GiteaClientError(
                f"Gitea API error: {response.status_code} - {response.text}"
            )

        try:
            return response.json()
        except ValueError as e:
            raise GiteaClientError(f"Invalid JSON response from {url}") from e

    def _get_list(
        self, path: str, params: dict | None = None, timeout: float | None = None
    ) -> list:
        """Like _get, for endpoints that return a JSON array."""
        payload = self._get(path, params=params, timeout=timeout)
        if not isinstance(payload, list):
            raise GiteaClientError(f"Unexpected response from {path}: expected a list")
        return payload

    def get_user_id(self) -> int:
        """
        Look up the numeric id of the configured user.

        Raises:
            NotFoundError: If the user does not exist
            AuthenticationError: If the token is rejected
        """
        try:
            user = self._get(f"/users/{self.username}")
        except NotFoundError as e:
            raise NotFoundError(f"User '{self.username}' not found on Gitea.") from e

        user_id = user.get("id") if isinstance(user, dict) else None
        if not isinstance(user_id, int):
            raise GiteaClientError("Gitea user response is missing the user id")
        return user_id

    def get_heatmap(self) -> list[dict]:
        """
        Fetch the per-day heatmap of the configured user.

        Returns:
            List of {timestamp, contributions} records
        """
        return self._get_list(f"/users/{self.username}/heatmap")

    def get_activity_feed(self, user_id: int) -> list[dict]:
        """
        Fetch the activity feed of a user by numeric id.

        Returns:
            List of activity records, each with a 'created' timestamp
        """
        return self._get_list(f"/users/{user_id}/activities/feeds")

    def get_user_repos(self, limit: int = 100) -> list[dict]:
        """
        Fetch repositories owned by the configured user.

        Args:
            limit: Number of repos to fetch (max 100, no further pages)
        """
        return self._get_list(
            f"/users/{self.username}/repos",
            params={"limit": min(limit, self.MAX_LIMIT)},
        )

    def get_repo_commits(self, full_name: str, limit: int = 100) -> list[dict]:
        """
        Fetch the most recent commits of a repository.

        Uses a shorter timeout than other requests so one slow repository
        cannot stall a scan. The requests timeout bounds the connect and
        each gap between reads, not the whole response: a server that keeps
        trickling bytes can hold one repository past COMMIT_TIMEOUT.

        Args:
            full_name: Repository full name (owner/name)
            limit: Number of commits to fetch (max 100, no further pages)
        """
        return self._get_list(
            f"/repos/{full_name}/commits",
            params={"limit": min(limit, self.MAX_LIMIT)},
            timeout=self.COMMIT_TIMEOUT,
        )
