"""The remote repository operations the merge gate needs."""

from collections.abc import Iterable
from typing import Protocol, runtime_checkable

import httpx

from mergegate.exceptions import MergeGateError
from mergegate.types.pulls import CommitDetail, PullRequestSnapshot, Ref

# Errors a remote call is expected to raise; a failed merge is logged for these before re-raising.
REMOTE_ERRORS: tuple[type[BaseException], ...] = (MergeGateError, httpx.HTTPError, OSError)


@runtime_checkable
class RemoteRepository(Protocol):
    """A repository on a hosting platform, seen from one pull request's side."""

    def post_comment(self, pr_number: int, text: str) -> None: ...

    def merge(self, pr: PullRequestSnapshot, comment: str) -> None: ...

    def get_ref(self, repository: str, ref: str) -> Ref: ...

    def list_commits(self, pr: PullRequestSnapshot) -> Iterable[CommitDetail]: ...
