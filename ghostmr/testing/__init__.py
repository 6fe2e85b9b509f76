"""Ghost MR checker testing utilities.

Provides a mock client and fixtures for testing code that uses the checker.
"""

from ghostmr.testing.fixtures import (
    create_mock_commit,
    create_mock_merge_request,
)
from ghostmr.testing.mock import MockCall, MockGitLabClient, MockPages, paginate

__all__ = [
    # Mock client
    "MockGitLabClient",
    "MockCall",
    "MockPages",
    "paginate",
    # Helper functions
    "create_mock_commit",
    "create_mock_merge_request",
]
