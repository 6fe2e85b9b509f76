#!/usr/bin/env python3
"""
Basic ghost MR checker usage example.

Runs the checker against an in-memory mock so it works offline.
Run with: python examples/basic_usage.py
"""

import logging
from datetime import datetime, timezone

from ghostmr import Checker, ConfigurationError, GhostMRError, configure_logging
from ghostmr.cli import format_result
from ghostmr.testing import MockGitLabClient, create_mock_commit, create_mock_merge_request

configure_logging(level=logging.INFO)

print("=== Ghost MR Checker Basic Usage Example ===\n")

since = datetime(2025, 11, 9, tzinfo=timezone.utc)
mock = MockGitLabClient()

# release keeps a regular merge (sha1) and a squash commit for Feature B
mock.commits.configure(
    "release",
    [
        create_mock_commit("sha1", "Feature A"),
        create_mock_commit("commit2", "Squashed", "Feature B\n\nSquashed from feature/b"),
    ],
)
# master was force-reset and lost everything
mock.commits.configure("master", [])

merged = [
    create_mock_merge_request(1, "Feature A", head_sha="sha1", source_branch="feature/a"),
    create_mock_merge_request(2, "Feature B", head_sha="sha2", source_branch="feature/b"),
    create_mock_merge_request(3, "Feature C", head_sha="sha3", source_branch="feature/c"),
]
mock.merge_requests.configure("release", merged)
mock.merge_requests.configure("master", merged[:1])

# 1. Multi-branch check
print("1. Checking release and master...")
checker = Checker(mock.commits, mock.merge_requests, "group/app")
for result in checker.check(since):
    print("   " + format_result(result, show_branch=True))

# 2. Invalid input fails fast
print("\n2. Checking with an empty project id...")
try:
    Checker(mock.commits, mock.merge_requests, "").check(since)
except ConfigurationError as e:
    print(f"   Caught {type(e).__name__}: {e}")
except GhostMRError as e:
    print(f"   Unexpected error: {e}")

print("\n=== Done ===")
