"""Pull request-related data models."""

from collections.abc import Callable
from dataclasses import dataclass, field

from mergegate.exceptions import ConfigurationError


@dataclass
class User:
    """Account on the hosting platform."""

    login: str
    name: str | None = None
    email: str | None = None

    @property
    def display_name(self) -> str:
        return self.name or self.login


@dataclass
class GitUser:
    """Git identity recorded on a commit."""

    name: str | None
    email: str | None


@dataclass
class CommitDetail:
    """A commit belonging to a pull request."""

    sha: str
    committer: GitUser
    author: GitUser
    message: str = ""


@dataclass
class PullRequestSnapshot:
    """Cached pull request state."""

    number: int
    repository: str  # "owner/name"
    author: User
    head_ref: str
    base_ref: str = "main"
    title: str = ""
    head_sha: str | None = None
    mergeable: bool | None = None


@dataclass
class Ref:
    """A git reference in a remote repository."""

    ref: str  # "refs/heads/feature"
    sha: str
    repository: str
    _deleter: Callable[[], None] | None = field(default=None, repr=False, compare=False)

    def delete(self) -> None:
        """Delete this reference on the remote."""
        if self._deleter is None:
            raise ConfigurationError(f"Ref {self.ref} is not bound to a client")
        self._deleter()


@dataclass
class MergeResult:
    """Result of merging a pull request."""

    sha: str
    merged: bool
    message: str


@dataclass
class Comment:
    """Comment posted on a pull request."""

    comment_id: int
    body: str
    author_login: str | None
