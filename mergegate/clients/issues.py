"""Issue comments resource client."""

from typing import TYPE_CHECKING

from mergegate.types.pulls import Comment

if TYPE_CHECKING:
    from mergegate.transport import HTTPTransport


class IssuesClient:
    """Client for comments on issues and pull requests."""

    def __init__(self, transport: "HTTPTransport") -> None:
        self.transport = transport

    def add_comment(self, repo: str, number: int, body: str) -> Comment:
        """
        Post a comment on a pull request conversation.

        Args:
            repo: Repository full name ("owner/name")
            number: The pull request number
            body: Comment text

        Returns:
            The created Comment
        """
        data = self.transport.request(
            "POST",
            f"/repos/{repo}/issues/{number}/comments",
            body={"body": body},
        )
        return Comment(
            comment_id=data["id"],
            body=data.get("body", body),
            author_login=(data.get("user") or {}).get("login"),
        )
