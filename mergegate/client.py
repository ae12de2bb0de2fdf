"""
GitHub client.

Provides the GitHub REST implementation of the remote repository and pull
request store the merge gate consumes.
"""

import os
from collections.abc import Iterator
from typing import Any

from mergegate.clients import IssuesClient, PullsClient, RefsClient, UsersClient
from mergegate.exceptions import ConfigurationError, NotFoundError
from mergegate.types.pulls import CommitDetail, PullRequestSnapshot, Ref
from mergegate.transport import HTTPTransport, RetryConfig


class GitHubClient:
    """
    Main client for interacting with the GitHub API.

    Aggregates all resource clients and handles authentication.

    Example:
        ```python
        from mergegate import GitHubClient, MergeGate

        with GitHubClient.from_env() as client:
            gate = MergeGate(
                remote=client.repository("octo/demo"),
                pull_requests=client.pull_request_store("octo/demo"),
            )
        ```
    """

    DEFAULT_BASE_URL = "https://api.github.com"
    DEFAULT_TIMEOUT = 30.0

    def __init__(
        self,
        token: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        retry_config: RetryConfig | None = None,
    ) -> None:
        """
        Initialize the GitHub client.

        Args:
            token: API token (personal access token or app installation token)
            base_url: Base URL for API requests (default: https://api.github.com)
            timeout: Request timeout in seconds (default: 30.0)
            retry_config: Configuration for retry behavior (optional)
        """
        if not token:
            raise ConfigurationError("A GitHub API token is required")

        self.base_url = base_url
        self.timeout = timeout

        self._transport = HTTPTransport(
            base_url=base_url,
            token=token,
            timeout=timeout,
            retry_config=retry_config,
        )

        self.pulls = PullsClient(self._transport)
        self.issues = IssuesClient(self._transport)
        self.refs = RefsClient(self._transport)
        self.users = UsersClient(self._transport)

    @classmethod
    def from_env(
        cls,
        timeout: float = DEFAULT_TIMEOUT,
        retry_config: RetryConfig | None = None,
    ) -> "GitHubClient":
        """
        Create a client from environment variables.

        Environment variables:
            GITHUB_TOKEN: API token (required)
            GITHUB_API_URL: Base URL for API (optional, default: https://api.github.com)

        Raises:
            ConfigurationError: If required environment variables are missing
        """
        token = os.environ.get("GITHUB_TOKEN")
        base_url = os.environ.get("GITHUB_API_URL", cls.DEFAULT_BASE_URL)

        if not token:
            raise ConfigurationError("GITHUB_TOKEN environment variable not set")

        return cls(
            token=token,
            base_url=base_url,
            timeout=timeout,
            retry_config=retry_config,
        )

    def repository(self, full_name: str) -> "GitHubRepository":
        """Bind the client to one repository."""
        return GitHubRepository(self, full_name)

    def pull_request_store(self, full_name: str) -> "GitHubPullRequestStore":
        """Pull request store that reads snapshots straight from the API."""
        return GitHubPullRequestStore(self, full_name)

    @property
    def transport(self) -> HTTPTransport:
        """Get the underlying HTTP transport (for advanced use cases)."""
        return self._transport

    def close(self) -> None:
        """Close the client and release resources."""
        self._transport.close()

    def __enter__(self) -> "GitHubClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()


class GitHubRepository:
    """
    A GitHub repository as a remote for the merge gate.

    Pull request numbers are always resolved in the bound repository.
    """

    def __init__(self, client: GitHubClient, full_name: str) -> None:
        self.client = client
        self.full_name = full_name

    def post_comment(self, pr_number: int, text: str) -> None:
        self.client.issues.add_comment(self.full_name, pr_number, text)

    def merge(self, pr: PullRequestSnapshot, comment: str) -> None:
        self.client.pulls.merge(self.full_name, pr.number, comment)

    def get_ref(self, repository: str, ref: str) -> Ref:
        return self.client.refs.get(repository, ref)

    def list_commits(self, pr: PullRequestSnapshot) -> Iterator[CommitDetail]:
        return self.client.pulls.list_commits(self.full_name, pr.number)


class GitHubPullRequestStore:
    """Pull request store backed by the GitHub API; missing pull requests read as None."""

    def __init__(self, client: GitHubClient, full_name: str) -> None:
        self.client = client
        self.full_name = full_name

    def get(self, pull_id: int) -> PullRequestSnapshot | None:
        try:
            return self.client.pulls.get(self.full_name, pull_id)
        except NotFoundError:
            return None
