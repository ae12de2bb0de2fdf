"""
Pytest fixtures and factories for testing code that uses mergegate.
"""

import io
from collections.abc import Generator

import pytest

from mergegate.build import BuildContext, BuildResult
from mergegate.logging import BuildLog
from mergegate.testing.mock import MockRemoteRepository
from mergegate.trigger import (
    InMemoryPullRequestStore,
    StaticTriggerPolicy,
    TriggerCause,
)
from mergegate.types.pulls import CommitDetail, GitUser, PullRequestSnapshot, User

DEFAULT_TRIGGER_PHRASE = "merge it"
DEFAULT_ADMINS = ("alice",)
DEFAULT_BOT_LOGIN = "merge-bot"


# ============================================================================
# Factories
# ============================================================================


def create_mock_user(
    login: str = "alice",
    name: str | None = "Alice Example",
    email: str | None = "alice@example.com",
) -> User:
    """Create a User with defaults for testing."""
    return User(login=login, name=name, email=email)


def create_mock_pull_request(
    number: int = 42,
    repository: str = "octo/demo",
    author: User | None = None,
    head_ref: str = "feature/widgets",
    base_ref: str = "main",
    title: str = "Add widgets",
    mergeable: bool | None = True,
) -> PullRequestSnapshot:
    """Create a PullRequestSnapshot with defaults for testing."""
    return PullRequestSnapshot(
        number=number,
        repository=repository,
        author=author or User(login="dave", name="Dave Author", email="dave@example.com"),
        head_ref=head_ref,
        base_ref=base_ref,
        title=title,
        head_sha="a" * 40,
        mergeable=mergeable,
    )


def create_mock_commit(
    sha: str = "c0ffee",
    committer_name: str | None = "Dave Author",
    committer_email: str | None = "dave@example.com",
    message: str = "Add widgets",
) -> CommitDetail:
    """Create a CommitDetail whose author and committer are the same person."""
    identity = GitUser(name=committer_name, email=committer_email)
    return CommitDetail(sha=sha, committer=identity, author=identity, message=message)


def create_mock_cause(
    pull_id: int = 42,
    trigger_sender: User | None = None,
    comment_body: str | None = "please merge it",
    mergeable: bool | None = True,
) -> TriggerCause:
    """Create a TriggerCause; the sender defaults to an admin."""
    return TriggerCause(
        pull_id=pull_id,
        trigger_sender=trigger_sender if trigger_sender is not None else create_mock_user(),
        comment_body=comment_body,
        mergeable=mergeable,
    )


def create_trigger_policy(
    trigger_phrase: str = DEFAULT_TRIGGER_PHRASE,
    admins: tuple[str, ...] = DEFAULT_ADMINS,
    bot_login: str | None = DEFAULT_BOT_LOGIN,
) -> StaticTriggerPolicy:
    """Create a StaticTriggerPolicy with defaults for testing."""
    return StaticTriggerPolicy(trigger_phrase=trigger_phrase, admins=admins, bot_login=bot_login)


def create_build_context(
    cause: TriggerCause | None = None,
    result: BuildResult = BuildResult.SUCCESS,
    trigger: StaticTriggerPolicy | None = None,
    project: str = "octo/demo-pr-builder",
) -> BuildContext:
    """Create a successful BuildContext logging into an in-memory stream."""
    return BuildContext(
        project=project,
        result=result,
        trigger=trigger if trigger is not None else create_trigger_policy(),
        cause=cause if cause is not None else create_mock_cause(),
        log=BuildLog(stream=io.StringIO()),
    )


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def mock_remote() -> Generator[MockRemoteRepository, None, None]:
    """
    Provide a MockRemoteRepository for testing.

    Example:
        ```python
        def test_merges(mock_remote, pull_request_store):
            gate = MergeGate(mock_remote, pull_request_store)
            gate.run(create_build_context(), MergePolicy())
            assert mock_remote.was_called("merge")
        ```
    """
    remote = MockRemoteRepository()
    yield remote
    remote.reset()


@pytest.fixture
def sample_pull_request() -> PullRequestSnapshot:
    """Provide the pull request the default cause points at."""
    return create_mock_pull_request()


@pytest.fixture
def pull_request_store(sample_pull_request: PullRequestSnapshot) -> InMemoryPullRequestStore:
    """Provide a store tracking sample_pull_request."""
    return InMemoryPullRequestStore({sample_pull_request.number: sample_pull_request})


@pytest.fixture
def trigger_policy() -> StaticTriggerPolicy:
    """Provide a trigger policy with "alice" as the only admin."""
    return create_trigger_policy()


@pytest.fixture
def admin_user() -> User:
    """Provide an admin user."""
    return create_mock_user()


@pytest.fixture
def outsider_user() -> User:
    """Provide a user who is neither admin nor contributor."""
    return create_mock_user(login="carol", name="Carol Outsider", email="carol@example.com")


@pytest.fixture
def build_log() -> BuildLog:
    """Provide a BuildLog writing into an in-memory stream."""
    return BuildLog(stream=io.StringIO())
