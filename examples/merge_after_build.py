#!/usr/bin/env python3
"""
mergegate - post-build merge step against GitHub

Run this after a pull request build finishes:

1. Load the merge policy and trigger policy from the environment
2. Look up the pull request and the commenting user on GitHub
3. Run the merge gate and exit non-zero if it failed the build

Environment:
    GITHUB_TOKEN, GITHUB_REPOSITORY ("owner/name"), PR_NUMBER,
    TRIGGER_SENDER (login), TRIGGER_COMMENT, BUILD_RESULT (default: SUCCESS),
    plus the MERGEGATE_* settings read by MergePolicy.from_env() and
    StaticTriggerPolicy.from_env().
"""

import logging
import os
import sys

from mergegate import (
    BuildContext,
    BuildLog,
    BuildResult,
    GitHubClient,
    InMemoryPullRequestStore,
    MergeGate,
    MergeGateError,
    MergePolicy,
    StaticTriggerPolicy,
    TriggerCause,
    configure_logging,
)


def main() -> None:
    """Run the merge gate for one finished build."""
    configure_logging(level=logging.WARNING)

    repository = os.environ["GITHUB_REPOSITORY"]
    pull_id = int(os.environ["PR_NUMBER"])
    sender_login = os.environ.get("TRIGGER_SENDER")
    result = BuildResult[os.environ.get("BUILD_RESULT", "SUCCESS").upper()]

    try:
        policy = MergePolicy.from_env()
        trigger = StaticTriggerPolicy.from_env()
    except MergeGateError as e:
        print(f"Error: [{e.code}] {e.message}")
        sys.exit(2)

    with GitHubClient.from_env() as client:
        try:
            snapshot = client.pull_request_store(repository).get(pull_id)
            sender = client.users.get(sender_login) if sender_login else None
        except MergeGateError as e:
            print(f"Error: [{e.code}] {e.message}")
            if e.request_id:
                print(f"Request ID: {e.request_id}")
            sys.exit(1)

        build = BuildContext(
            project=repository,
            result=result,
            trigger=trigger,
            cause=TriggerCause(
                pull_id=pull_id,
                trigger_sender=sender,
                comment_body=os.environ.get("TRIGGER_COMMENT"),
                mergeable=snapshot.mergeable if snapshot else None,
            ),
            log=BuildLog(stream=sys.stdout),
        )

        # The gate reads the snapshot fetched above instead of asking GitHub again
        store = InMemoryPullRequestStore({pull_id: snapshot} if snapshot else None)
        gate = MergeGate(remote=client.repository(repository), pull_requests=store)
        try:
            merged = gate.run(build, policy)
        except MergeGateError as e:
            print(f"Error: [{e.code}] {e.message}")
            sys.exit(1)

    print(f"Merged: {merged}")
    if build.outcome == BuildResult.FAILURE:
        sys.exit(1)


if __name__ == "__main__":
    main()
