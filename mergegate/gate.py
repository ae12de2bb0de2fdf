"""
Merge gate.

Runs after a pull request build has completed: checks the merge policy's
gates, comments on the pull request for every gate that fails, merges when
all of them pass and the pull request is mergeable, and optionally deletes
the head branch.
"""

from mergegate.actuator import MergeActuator
from mergegate.build import BuildContext, BuildResult
from mergegate.exceptions import PullRequestNotFoundError
from mergegate.owncode import is_own_code
from mergegate.remote import RemoteRepository
from mergegate.reporter import CommentReporter
from mergegate.trigger import PullRequestStore, TriggerCause, TriggerPolicy
from mergegate.types.decision import Decision, Gate, GateResult
from mergegate.types.policy import MergePolicy
from mergegate.types.pulls import PullRequestSnapshot, User

NOT_MERGEABLE_COMMENT = "Pull request is not mergeable."


def _sender_name(sender: User | None) -> str:
    return sender.display_name if sender is not None else "unknown user"


class MergeGate:
    """
    Decides whether a built pull request is merged.

    Args:
        remote: Repository the pull request lives in
        pull_requests: Store of tracked pull requests

    Example:
        ```python
        gate = MergeGate(remote=repo, pull_requests=store)
        merged = gate.run(build, MergePolicy(only_admins_merge=True))
        ```
    """

    def __init__(self, remote: RemoteRepository, pull_requests: PullRequestStore) -> None:
        self.remote = remote
        self.pull_requests = pull_requests

    def run(self, build: BuildContext, policy: MergePolicy) -> bool:
        """
        Run the gate for a completed build.

        Returns:
            Whether the pull request was merged. A build that did not
            succeed, or one not caused by a pull request, returns True:
            there is nothing to merge and the step itself did not fail.

        Raises:
            PullRequestNotFoundError: If the pull request is not tracked
            MergeGateError: If the merge call itself fails
        """
        decision = self.evaluate(build, policy)
        return decision.merged or decision.skipped

    def evaluate(self, build: BuildContext, policy: MergePolicy) -> Decision:
        """Run the gate and return the full decision."""
        log = build.log

        if build.result.is_worse_than(BuildResult.SUCCESS):
            log.println("Build did not succeed, merge will not be run")
            return Decision(should_merge=False, skipped=True)

        trigger = build.trigger
        if trigger is None:
            log.println(f"No pull request trigger configured for {build.project}")
            return Decision(should_merge=False)

        cause = build.cause
        if cause is None:
            return Decision(should_merge=False, skipped=True)

        pr = self.pull_requests.get(cause.pull_id)
        if pr is None:
            log.println(f"Pull request is null for ID: {cause.pull_id}")
            build.finish(BuildResult.FAILURE)
            raise PullRequestNotFoundError(cause.pull_id)

        sender = cause.trigger_sender
        if trigger.is_bot_user(sender):
            log.println(f"Comment from bot user {sender.login} ignored.")
            return Decision(should_merge=False)

        reporter = CommentReporter(self.remote, log)
        gates = self._check_gates(build, policy, trigger, cause, pr, reporter)

        if cause.mergeable is not True:
            log.println("Pull request cannot be automerged.")
            reporter.comment(pr, NOT_MERGEABLE_COMMENT)
            gates.append(GateResult(Gate.MERGEABLE, False, NOT_MERGEABLE_COMMENT))
            build.finish(BuildResult.FAILURE)
            return Decision(
                should_merge=False,
                outcome=BuildResult.FAILURE,
                gates=gates,
                comments=reporter.posted,
            )
        gates.append(GateResult(Gate.MERGEABLE, True))

        should_merge = all(gate.passed for gate in gates)
        decision = Decision(should_merge=should_merge, gates=gates, comments=reporter.posted)

        if should_merge:
            try:
                decision.branch_deletion = MergeActuator(self.remote, log).merge(pr, policy)
            except Exception:
                build.finish(BuildResult.FAILURE)
                raise
            decision.merged = True

        if not should_merge and policy.fail_on_non_merge:
            decision.outcome = BuildResult.FAILURE
        else:
            decision.outcome = BuildResult.SUCCESS
        build.finish(decision.outcome)
        return decision

    def _check_gates(
        self,
        build: BuildContext,
        policy: MergePolicy,
        trigger: TriggerPolicy,
        cause: TriggerCause,
        pr: PullRequestSnapshot,
        reporter: CommentReporter,
    ) -> list[GateResult]:
        """
        Evaluate every enabled policy gate in order.

        A failing gate is commented on immediately and does not stop the
        gates after it.
        """
        log = build.log
        sender = cause.trigger_sender
        gates: list[GateResult] = []

        def record(gate: Gate, passed: bool, message: str) -> None:
            if passed:
                gates.append(GateResult(gate, True))
                return
            gates.append(GateResult(gate, False, message))
            reporter.comment(pr, message)

        if policy.only_admins_merge:
            passed = sender is not None and trigger.is_admin(sender)
            if not passed:
                log.println(
                    "Only admins can merge this pull request, "
                    f"{_sender_name(sender)} is not an admin."
                )
            record(
                Gate.ADMIN,
                passed,
                f"Code not merged because {_sender_name(sender)} is not in the Admin list.",
            )

        if policy.only_trigger_phrase:
            body = cause.comment_body
            passed = body is not None and trigger.is_trigger_phrase(body)
            if not passed:
                log.println("The comment does not contain the required trigger phrase.")
            record(
                Gate.TRIGGER_PHRASE,
                passed,
                f"Please comment with '{trigger.trigger_phrase}' to automerge this request.",
            )

        if policy.disallow_own_code:
            passed = sender is not None and not is_own_code(self.remote, pr, sender, log)
            if not passed:
                log.println("The commentor is also one of the contributors.")
            record(
                Gate.OWN_CODE,
                passed,
                f"Code not merged because {_sender_name(sender)} has committed code in the request.",
            )

        return gates
