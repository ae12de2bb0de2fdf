"""
Pytest plugin for mergegate testing fixtures.

This module re-exports all fixtures from fixtures.py so they can be
discovered by pytest. To use these fixtures in your tests, add this to your
conftest.py:

    pytest_plugins = ["mergegate.testing.conftest"]

Or import the fixtures directly:

    from mergegate.testing.fixtures import mock_remote, sample_pull_request
"""

from mergegate.testing.fixtures import (
    admin_user,
    build_log,
    mock_remote,
    outsider_user,
    pull_request_store,
    sample_pull_request,
    trigger_policy,
)

__all__ = [
    "mock_remote",
    "sample_pull_request",
    "pull_request_store",
    "trigger_policy",
    "admin_user",
    "outsider_user",
    "build_log",
]
