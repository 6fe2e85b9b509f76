"""
Mock GitLab client for testing.

Provides a MockGitLabClient that serves configured commit and merge request
pages per branch without making API calls.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Generic, TypeVar

from ghostmr.services import PER_PAGE
from ghostmr.types.commits import CommitRecord
from ghostmr.types.merge_requests import MergeRequestRecord

T = TypeVar("T")


@dataclass
class MockPages(Generic[T]):
    """Pages served for one branch, plus an optional failure."""

    pages: list[list[T]] = field(default_factory=list)
    error: Exception | None = None
    error_on_page: int = 1


@dataclass
class MockCall:
    """Record of a method call."""

    method: str
    args: tuple[Any, ...]
    kwargs: dict[str, Any]
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


def paginate(records: list[T], page_size: int = PER_PAGE) -> list[list[T]]:
    """Split records into API-sized pages; no records yields one empty page."""
    if not records:
        return [[]]
    return [records[i:i + page_size] for i in range(0, len(records), page_size)]


class _MockPagedResource(Generic[T]):
    """Serves MockPages keyed by branch."""

    name = ""

    def __init__(self, mock_client: "MockGitLabClient") -> None:
        self._mock = mock_client
        self._branches: dict[str, MockPages[T]] = {}

    def configure(
        self,
        branch: str,
        records: list[T] | None = None,
        pages: list[list[T]] | None = None,
        error: Exception | None = None,
        error_on_page: int = 1,
        page_size: int = PER_PAGE,
    ) -> None:
        """
        Configure what a branch listing returns.

        Args:
            branch: Branch the listing is for
            records: Records to split into pages of ``page_size``
            pages: Explicit pages, used as given (overrides ``records``)
            error: Exception to raise instead of returning a page
            error_on_page: Page number that raises ``error``
            page_size: Page size used when splitting ``records``
        """
        if pages is None:
            pages = paginate(list(records or []), page_size)
        self._branches[branch] = MockPages(
            pages=[list(page) for page in pages],
            error=error,
            error_on_page=error_on_page,
        )

    def _serve(self, branch: str, page: int) -> tuple[list[T], int | None]:
        configured = self._branches.get(branch)
        if configured is None:
            return [], None

        if configured.error is not None and page == configured.error_on_page:
            raise configured.error

        if page < 1 or page > len(configured.pages):
            return [], None
        next_page = page + 1 if page < len(configured.pages) else None
        return list(configured.pages[page - 1]), next_page

    def reset(self) -> None:
        self._branches.clear()


class MockCommitsClient(_MockPagedResource[CommitRecord]):
    """Mock commits client for testing."""

    def list_commits(
        self,
        project_id: str,
        branch: str,
        since: datetime,
        page: int,
    ) -> tuple[list[CommitRecord], int | None]:
        """Mock list_commits method."""
        self._mock._record_call(
            "commits.list_commits", (project_id, branch, since, page), {}
        )
        return self._serve(branch, page)


class MockMergeRequestsClient(_MockPagedResource[MergeRequestRecord]):
    """Mock merge requests client for testing."""

    def list_merged_requests(
        self,
        project_id: str,
        target_branch: str,
        since: datetime,
        page: int,
    ) -> tuple[list[MergeRequestRecord], int | None]:
        """Mock list_merged_requests method."""
        self._mock._record_call(
            "merge_requests.list_merged_requests",
            (project_id, target_branch, since, page),
            {},
        )
        return self._serve(target_branch, page)


class MockGitLabClient:
    """
    Mock GitLab client for testing.

    Mimics GitLabClient's ``commits`` and ``merge_requests`` collaborators,
    serving configured pages per branch and recording every call. Branches
    that were not configured list as empty.

    Example:
        ```python
        from ghostmr import Checker
        from ghostmr.testing import MockGitLabClient, create_mock_commit

        mock = MockGitLabClient()
        mock.commits.configure("release", [create_mock_commit("sha1", "Feature A")])
        checker = Checker(mock.commits, mock.merge_requests, "123")
        assert checker.check(since) == []
        assert mock.call_count("commits.list_commits") == 2  # release, master
        ```
    """

    def __init__(self) -> None:
        self._calls: list[MockCall] = []
        self.commits = MockCommitsClient(self)
        self.merge_requests = MockMergeRequestsClient(self)

    def _record_call(
        self,
        method: str,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> None:
        """Record a method call for verification."""
        self._calls.append(MockCall(method=method, args=args, kwargs=kwargs))

    def was_called(self, method: str) -> bool:
        """True if ``method`` (e.g. "commits.list_commits") was called at least once."""
        return any(call.method == method for call in self._calls)

    def call_count(self, method: str) -> int:
        """Number of times ``method`` was called."""
        return sum(1 for call in self._calls if call.method == method)

    def get_calls(self, method: str | None = None) -> list[MockCall]:
        """
        Get recorded calls, optionally filtered by method.

        Args:
            method: Optional method name to filter by

        Returns:
            List of MockCall objects
        """
        if method is None:
            return list(self._calls)
        return [call for call in self._calls if call.method == method]

    def reset(self) -> None:
        """Reset all recorded calls and configured pages."""
        self._calls.clear()
        self.commits.reset()
        self.merge_requests.reset()

    def close(self) -> None:
        """No-op for compatibility with real client."""
        pass

    def __enter__(self) -> "MockGitLabClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()
