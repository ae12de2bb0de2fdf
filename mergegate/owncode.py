"""Detect whether a commentor has contributed code to a pull request."""

from mergegate.logging import BuildLog
from mergegate.remote import RemoteRepository
from mergegate.types.pulls import PullRequestSnapshot, User


def is_own_code(
    remote: RemoteRepository,
    pr: PullRequestSnapshot,
    commentor: User,
    log: BuildLog,
) -> bool:
    """
    Return True if ``commentor`` authored the pull request or committed to it.

    Only the first commit of the pull request is compared against the
    commentor's name and email; later commits are not examined. Failing to
    list commits counts as "not own code".
    """
    if pr.author.login == commentor.login:
        return True

    try:
        for detail in remote.list_commits(pr):
            committer = detail.committer
            same_name = commentor.name is not None and commentor.name == committer.name
            same_email = commentor.email is not None and commentor.email == committer.email
            return same_name or same_email
    except Exception as e:
        log.print_exception("Unable to get committer name", e)

    return False
