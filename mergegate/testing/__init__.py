"""mergegate testing utilities.

Provides a mock remote repository, factories and fixtures for testing code
that uses the merge gate.
"""

from mergegate.testing.fixtures import (
    create_build_context,
    create_mock_cause,
    create_mock_commit,
    create_mock_pull_request,
    create_mock_user,
    create_trigger_policy,
)
from mergegate.testing.mock import MockCall, MockRemoteRepository, MockResponse

__all__ = [
    # Mock remote
    "MockRemoteRepository",
    "MockCall",
    "MockResponse",
    # Helper functions
    "create_mock_user",
    "create_mock_pull_request",
    "create_mock_commit",
    "create_mock_cause",
    "create_trigger_policy",
    "create_build_context",
]
