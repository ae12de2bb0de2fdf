#!/usr/bin/env python3
"""
Basic mergegate usage example.

Runs the merge gate offline against a mock remote repository.
Run with: python examples/basic_usage.py
"""

import io

from mergegate import (
    BuildContext,
    BuildLog,
    BuildResult,
    InMemoryPullRequestStore,
    MergeGate,
    MergePolicy,
    StaticTriggerPolicy,
    TriggerCause,
    User,
)
from mergegate.testing import MockRemoteRepository, create_mock_pull_request

print("=== mergegate Basic Usage Example ===\n")

pr = create_mock_pull_request(number=7, head_ref="feature/docs")
remote = MockRemoteRepository()
gate = MergeGate(remote=remote, pull_requests=InMemoryPullRequestStore({7: pr}))
trigger = StaticTriggerPolicy(trigger_phrase=r"merge\s+it", admins=["alice"], bot_login="merge-bot")

# 1. An outsider asks for a merge while only admins may merge
print("1. Non-admin trigger...")
build = BuildContext(
    project="octo/demo",
    result=BuildResult.SUCCESS,
    trigger=trigger,
    cause=TriggerCause(
        pull_id=7,
        trigger_sender=User(login="carol", name="Carol"),
        comment_body="please merge it",
        mergeable=True,
    ),
    log=BuildLog(stream=io.StringIO()),
)
decision = gate.evaluate(build, MergePolicy(only_admins_merge=True))
print(f"   Merged: {decision.merged}, outcome: {decision.outcome.name}")
for comment in decision.comments:
    print(f"   Comment: {comment}")
assert not decision.merged

# 2. An admin asks, and the branch is deleted afterwards
print("\n2. Admin trigger with branch deletion...")
remote.reset()
build = BuildContext(
    project="octo/demo",
    result=BuildResult.SUCCESS,
    trigger=trigger,
    cause=TriggerCause(
        pull_id=7,
        trigger_sender=User(login="alice", name="Alice"),
        comment_body="merge it",
        mergeable=True,
    ),
    log=BuildLog(stream=io.StringIO()),
)
decision = gate.evaluate(
    build,
    MergePolicy(only_admins_merge=True, only_trigger_phrase=True, delete_on_merge=True),
)
print(f"   Merged: {decision.merged}, outcome: {decision.outcome.name}")
print(f"   Branch {decision.branch_deletion.branch}: {decision.branch_deletion.status.value}")
assert decision.merged

print("\n   Build log:")
for line in build.log.lines:
    print(f"   | {line}")

print("\n=== Example Complete ===")
