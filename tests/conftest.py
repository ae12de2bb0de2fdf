"""Shared fixtures for the mergegate test suite."""

from mergegate.testing.conftest import *  # noqa: F401,F403
