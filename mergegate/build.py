"""Build state handed to the merge gate by the build host."""

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from mergegate.logging import BuildLog

if TYPE_CHECKING:
    from mergegate.trigger import TriggerCause, TriggerPolicy


class BuildResult(Enum):
    """Build results, ordered from best to worst."""

    SUCCESS = 0
    UNSTABLE = 1
    FAILURE = 2
    NOT_BUILT = 3
    ABORTED = 4

    def is_worse_than(self, other: "BuildResult") -> bool:
        return self.value > other.value


@dataclass
class BuildContext:
    """
    A completed build associated with a pull request.

    Args:
        project: Full name of the project the build belongs to
        result: Result the build finished with
        trigger: Trigger policy configured on the project, if any
        cause: What caused the build, if it was a pull request trigger
        log: Build log the gate reports to
    """

    project: str
    result: BuildResult
    trigger: "TriggerPolicy | None" = None
    cause: "TriggerCause | None" = None
    log: BuildLog = field(default_factory=BuildLog)
    outcome: BuildResult | None = None

    def finish(self, result: BuildResult) -> None:
        """Record the terminal outcome of the post-build step."""
        self.outcome = result
