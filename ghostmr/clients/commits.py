"""Commits resource client."""

from datetime import datetime
from typing import TYPE_CHECKING, Any

from ghostmr.clients.base import format_timestamp, project_path, require
from ghostmr.services import PER_PAGE
from ghostmr.types.commits import CommitRecord

if TYPE_CHECKING:
    from ghostmr.transport import HTTPTransport


class CommitsClient:
    """Client for repository commit listings."""

    def __init__(self, transport: "HTTPTransport") -> None:
        """
        Initialize the commits client.

        Args:
            transport: HTTP transport for making requests
        """
        self.transport = transport

    def list_commits(
        self,
        project_id: str,
        branch: str,
        since: datetime,
        page: int,
    ) -> tuple[list[CommitRecord], int | None]:
        """
        List one page of commits on a branch.

        Args:
            project_id: Numeric id or ``group/project`` path
            branch: Branch (ref) name
            since: Only commits at or after this timestamp
            page: 1-based page number

        Returns:
            The page's commits and the next page number, or None on the last page

        Raises:
            RetrievalError: On API errors or malformed responses
        """
        result = self.transport.get_page(
            f"{project_path(project_id)}/repository/commits",
            params={
                "ref_name": branch,
                "since": format_timestamp(since),
                "per_page": PER_PAGE,
                "page": page,
            },
        )
        return [self._parse_commit(item) for item in result.items], result.next_page

    def _parse_commit(self, data: dict[str, Any]) -> CommitRecord:
        """Parse commit data from API response."""
        title = data.get("title") or ""
        return CommitRecord(
            id=require(data, "id", "Commit"),
            title=title,
            message=data.get("message") or title,
        )
