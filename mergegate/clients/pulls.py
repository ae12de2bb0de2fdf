"""Pull requests resource client."""

from collections.abc import Iterator
from typing import TYPE_CHECKING, Any

from mergegate.exceptions import ConflictError
from mergegate.types.pulls import (
    CommitDetail,
    GitUser,
    MergeResult,
    PullRequestSnapshot,
    User,
)

if TYPE_CHECKING:
    from mergegate.transport import HTTPTransport


class PullsClient:
    """Client for pull request operations."""

    def __init__(self, transport: "HTTPTransport") -> None:
        """
        Initialize the pulls client.

        Args:
            transport: HTTP transport for making requests
        """
        self.transport = transport

    def get(self, repo: str, number: int) -> PullRequestSnapshot:
        """
        Get pull request information.

        Args:
            repo: Repository full name ("owner/name")
            number: The pull request number

        Returns:
            PullRequestSnapshot with author, head branch and mergeable state

        Raises:
            NotFoundError: If pull request not found
        """
        data = self.transport.request("GET", f"/repos/{repo}/pulls/{number}")
        return self._parse_pull_request(data)

    def list_commits(self, repo: str, number: int) -> Iterator[CommitDetail]:
        """
        List the commits of a pull request.

        Pages are fetched lazily while the iterator is consumed.

        Args:
            repo: Repository full name ("owner/name")
            number: The pull request number

        Yields:
            CommitDetail for each commit, oldest first
        """
        for item in self.transport.paginate(f"/repos/{repo}/pulls/{number}/commits"):
            yield self._parse_commit(item)

    def merge(
        self,
        repo: str,
        number: int,
        commit_message: str | None = None,
        merge_method: str = "merge",
    ) -> MergeResult:
        """
        Merge a pull request.

        The request is sent once; it is never retried.

        Args:
            repo: Repository full name ("owner/name")
            number: The pull request number
            commit_message: Extra detail appended to the merge commit message
            merge_method: "merge", "squash", or "rebase" (default: "merge")

        Returns:
            MergeResult with the merge commit sha

        Raises:
            ConflictError: If the pull request is not mergeable or the head moved
            NotFoundError: If pull request not found
        """
        body: dict[str, Any] = {"merge_method": merge_method}
        if commit_message:
            body["commit_message"] = commit_message

        data = self.transport.request(
            "PUT",
            f"/repos/{repo}/pulls/{number}/merge",
            body=body,
            retry=False,
        )

        result = MergeResult(
            sha=data.get("sha", ""),
            merged=data.get("merged", False),
            message=data.get("message", ""),
        )
        if not result.merged:
            raise ConflictError("NOT_MERGED", result.message or "Pull request was not merged")
        return result

    def _parse_pull_request(self, data: dict) -> PullRequestSnapshot:
        """Parse pull request data from API response."""
        user = data.get("user") or {}
        head = data.get("head") or {}
        base = data.get("base") or {}
        return PullRequestSnapshot(
            number=data["number"],
            repository=(base.get("repo") or {}).get("full_name", ""),
            author=User(login=user.get("login", "")),
            head_ref=head.get("ref", ""),
            base_ref=base.get("ref", ""),
            title=data.get("title", ""),
            head_sha=head.get("sha"),
            mergeable=data.get("mergeable"),
        )

    def _parse_commit(self, data: dict) -> CommitDetail:
        """Parse a pull request commit from API response."""
        commit = data.get("commit") or {}
        committer = commit.get("committer") or {}
        author = commit.get("author") or {}
        return CommitDetail(
            sha=data["sha"],
            committer=GitUser(name=committer.get("name"), email=committer.get("email")),
            author=GitUser(name=author.get("name"), email=author.get("email")),
            message=commit.get("message", ""),
        )
