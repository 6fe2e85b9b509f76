"""
Pytest fixtures for ghost MR checker testing.

Provides common fixtures and record factories for testing code built on the
checker.
"""

from datetime import datetime, timezone
from typing import Any, Generator

import pytest

from ghostmr.testing.mock import MockGitLabClient
from ghostmr.types.commits import CommitRecord, CommitSnapshot
from ghostmr.types.merge_requests import MergeRequestRecord

SINCE = datetime(2025, 11, 9, tzinfo=timezone.utc)
MERGED_AT = datetime(2025, 11, 10, tzinfo=timezone.utc)


# ============================================================================
# Mock Client Fixtures
# ============================================================================


@pytest.fixture
def mock_client() -> Generator[MockGitLabClient, None, None]:
    """
    Provide a MockGitLabClient for testing.

    Example:
        ```python
        def test_my_feature(mock_client):
            mock_client.commits.configure("release", [create_mock_commit()])
            run_my_check(mock_client)
            assert mock_client.was_called("commits.list_commits")
        ```
    """
    client = MockGitLabClient()
    yield client
    client.reset()


@pytest.fixture
def mock_project_id() -> str:
    """Provide a test project ID."""
    return "123"


@pytest.fixture
def since() -> datetime:
    """Provide the start of the check window."""
    return SINCE


# ============================================================================
# Record Fixtures
# ============================================================================


@pytest.fixture
def sample_commit() -> CommitRecord:
    """Provide a regular merge commit."""
    return create_mock_commit("sha1", "Feature A")


@pytest.fixture
def sample_squash_commit() -> CommitRecord:
    """Provide a squash commit whose message carries the merge request title."""
    return create_mock_commit(
        "commit2",
        "Some squashed commit",
        "Feature B\n\nSquashed from feature/b",
    )


@pytest.fixture
def sample_merge_request() -> MergeRequestRecord:
    """Provide a merge request merged inside the window."""
    return create_mock_merge_request(1, "Feature A", head_sha="sha1")


@pytest.fixture
def release_snapshot(
    sample_commit: CommitRecord, sample_squash_commit: CommitRecord
) -> CommitSnapshot:
    """Provide a release branch snapshot holding both sample commits."""
    return CommitSnapshot(
        branch="release",
        since=SINCE,
        commits=(sample_commit, sample_squash_commit),
    )


@pytest.fixture
def mock_client_with_release(
    mock_client: MockGitLabClient,
    sample_commit: CommitRecord,
    sample_squash_commit: CommitRecord,
) -> MockGitLabClient:
    """Provide a mock client whose release branch has one real and one squashed merge."""
    mock_client.commits.configure("release", [sample_commit, sample_squash_commit])
    mock_client.merge_requests.configure(
        "release",
        [
            create_mock_merge_request(1, "Feature A", head_sha="sha1", source_branch="feature/a"),
            create_mock_merge_request(2, "Feature B", head_sha="sha2", source_branch="feature/b"),
        ],
    )
    return mock_client


# ============================================================================
# Helper Functions
# ============================================================================


def create_mock_commit(
    id: str = "sha1",
    title: str = "Test commit",
    message: str | None = None,
) -> CommitRecord:
    """
    Create a CommitRecord; the message defaults to the title.

    Args:
        id: Commit sha
        title: First line of the message
        message: Full commit message

    Returns:
        CommitRecord object
    """
    return CommitRecord(id=id, title=title, message=title if message is None else message)


def create_mock_merge_request(
    id: int = 1,
    title: str = "Test MR",
    **kwargs: Any,
) -> MergeRequestRecord:
    """
    Create a MergeRequestRecord with customizable fields.

    Args:
        id: Merge request iid
        title: Merge request title
        **kwargs: Additional fields to override

    Returns:
        MergeRequestRecord object
    """
    defaults: dict[str, Any] = {
        "source_branch": "feature",
        "merged_at": MERGED_AT,
        "head_sha": f"head-{id}",
        "web_url": None,
    }
    defaults.update(kwargs)
    return MergeRequestRecord(id=id, title=title, **defaults)
