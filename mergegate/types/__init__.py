"""mergegate type definitions.

This module exports all data model types used by the package.
"""

from mergegate.types.decision import (
    BranchDeletion,
    BranchDeletionStatus,
    Decision,
    Gate,
    GateResult,
)
from mergegate.types.policy import MergePolicy
from mergegate.types.pulls import (
    Comment,
    CommitDetail,
    GitUser,
    MergeResult,
    PullRequestSnapshot,
    Ref,
    User,
)

__all__ = [
    # Pull request types
    "User",
    "GitUser",
    "CommitDetail",
    "PullRequestSnapshot",
    "Ref",
    "MergeResult",
    "Comment",
    # Policy
    "MergePolicy",
    # Decision types
    "Gate",
    "GateResult",
    "BranchDeletion",
    "BranchDeletionStatus",
    "Decision",
]
