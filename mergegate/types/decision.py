"""Gate outcomes and merge decisions."""

from dataclasses import dataclass, field
from enum import Enum

from mergegate.build import BuildResult


class Gate(str, Enum):
    ADMIN = "admin"
    TRIGGER_PHRASE = "trigger_phrase"
    OWN_CODE = "own_code"
    MERGEABLE = "mergeable"


@dataclass
class GateResult:
    """Outcome of one evaluated gate."""

    gate: Gate
    passed: bool
    message: str | None = None  # comment posted when the gate fails


class BranchDeletionStatus(str, Enum):
    SKIPPED = "skipped"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass
class BranchDeletion:
    """What happened to the head branch after the merge."""

    status: BranchDeletionStatus
    branch: str | None = None
    reason: str | None = None

    @classmethod
    def skipped(cls, branch: str | None = None) -> "BranchDeletion":
        return cls(BranchDeletionStatus.SKIPPED, branch)

    @classmethod
    def succeeded(cls, branch: str) -> "BranchDeletion":
        return cls(BranchDeletionStatus.SUCCEEDED, branch)

    @classmethod
    def failed(cls, branch: str, reason: str) -> "BranchDeletion":
        return cls(BranchDeletionStatus.FAILED, branch, reason)


@dataclass
class Decision:
    """
    Result of one merge gate invocation.

    ``outcome`` is None when the gate left the build result untouched
    (early exits before any gate ran).
    """

    should_merge: bool
    merged: bool = False
    skipped: bool = False
    outcome: BuildResult | None = None
    gates: list[GateResult] = field(default_factory=list)
    comments: list[str] = field(default_factory=list)
    branch_deletion: BranchDeletion = field(default_factory=BranchDeletion.skipped)

    @property
    def failed_gates(self) -> list[GateResult]:
        return [gate for gate in self.gates if not gate.passed]
