"""Posting explanatory comments on the pull request."""

from mergegate.logging import BuildLog
from mergegate.remote import RemoteRepository
from mergegate.types.pulls import PullRequestSnapshot


class CommentReporter:
    """Posts comments; a failed post is logged and never fails the build step."""

    def __init__(self, remote: RemoteRepository, log: BuildLog) -> None:
        self.remote = remote
        self.log = log
        self.posted: list[str] = []

    def comment(self, pr: PullRequestSnapshot, text: str) -> bool:
        try:
            self.remote.post_comment(pr.number, text)
        except Exception as e:
            self.log.print_exception("Failed to add comment", e)
            return False
        self.posted.append(text)
        return True
