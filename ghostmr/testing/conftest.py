"""
Pytest plugin for ghost MR checker testing fixtures.

To use these fixtures in your tests, add this to your conftest.py:

    pytest_plugins = ["ghostmr.testing.conftest"]
"""

# Re-export all fixtures for pytest auto-discovery
from ghostmr.testing.fixtures import (
    mock_client,
    mock_client_with_release,
    mock_project_id,
    release_snapshot,
    sample_commit,
    sample_merge_request,
    sample_squash_commit,
    since,
)

__all__ = [
    "mock_client",
    "mock_client_with_release",
    "mock_project_id",
    "since",
    "sample_commit",
    "sample_squash_commit",
    "sample_merge_request",
    "release_snapshot",
]
