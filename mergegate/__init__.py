"""mergegate - automatic pull request merging after a successful build."""

from mergegate.actuator import MergeActuator
from mergegate.build import BuildContext, BuildResult
from mergegate.client import GitHubClient, GitHubPullRequestStore, GitHubRepository
from mergegate.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConfigurationError,
    ConflictError,
    MergeGateError,
    NotFoundError,
    PullRequestNotFoundError,
    RateLimitedError,
    ServerError,
    ValidationError,
)
from mergegate.gate import MergeGate
from mergegate.logging import BuildLog, configure_logging, get_logger
from mergegate.owncode import is_own_code
from mergegate.remote import RemoteRepository
from mergegate.reporter import CommentReporter
from mergegate.transport import HTTPTransport, RetryConfig
from mergegate.trigger import (
    InMemoryPullRequestStore,
    PullRequestStore,
    StaticTriggerPolicy,
    TriggerCause,
    TriggerPolicy,
)
from mergegate.types import (
    BranchDeletion,
    BranchDeletionStatus,
    CommitDetail,
    Decision,
    Gate,
    GateResult,
    GitUser,
    MergePolicy,
    PullRequestSnapshot,
    Ref,
    User,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Merge gate
    "MergeGate",
    "MergeActuator",
    "CommentReporter",
    "is_own_code",
    # Build host
    "BuildContext",
    "BuildResult",
    "BuildLog",
    # Collaborators
    "RemoteRepository",
    "PullRequestStore",
    "TriggerPolicy",
    "TriggerCause",
    "StaticTriggerPolicy",
    "InMemoryPullRequestStore",
    # GitHub
    "GitHubClient",
    "GitHubRepository",
    "GitHubPullRequestStore",
    "HTTPTransport",
    "RetryConfig",
    # Types
    "MergePolicy",
    "User",
    "GitUser",
    "CommitDetail",
    "PullRequestSnapshot",
    "Ref",
    "Gate",
    "GateResult",
    "BranchDeletion",
    "BranchDeletionStatus",
    "Decision",
    # Exceptions
    "MergeGateError",
    "ConfigurationError",
    "PullRequestNotFoundError",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "ConflictError",
    "RateLimitedError",
    "ValidationError",
    "ServerError",
    # Logging
    "configure_logging",
    "get_logger",
]
