"""Merge requests resource client."""

from datetime import datetime
from typing import TYPE_CHECKING, Any

from ghostmr.clients.base import (
    format_timestamp,
    parse_timestamp,
    project_path,
    require,
)
from ghostmr.services import PER_PAGE
from ghostmr.types.merge_requests import MergeRequestRecord

if TYPE_CHECKING:
    from ghostmr.transport import HTTPTransport


class MergeRequestsClient:
    """Client for merge request listings."""

    def __init__(self, transport: "HTTPTransport") -> None:
        """
        Initialize the merge requests client.

        Args:
            transport: HTTP transport for making requests
        """
        self.transport = transport

    def list_merged_requests(
        self,
        project_id: str,
        target_branch: str,
        since: datetime,
        page: int,
    ) -> tuple[list[MergeRequestRecord], int | None]:
        """
        List one page of merged merge requests targeting a branch.

        The server filters on update time, which also moves on comments and
        label changes; callers must re-check ``merged_at`` themselves.

        Args:
            project_id: Numeric id or ``group/project`` path
            target_branch: Branch the merge requests were merged into
            since: Only merge requests updated at or after this timestamp
            page: 1-based page number

        Returns:
            The page's merge requests and the next page number, or None on the last page

        Raises:
            RetrievalError: On API errors or malformed responses
        """
        result = self.transport.get_page(
            f"{project_path(project_id)}/merge_requests",
            params={
                "target_branch": target_branch,
                "state": "merged",
                "scope": "all",
                "updated_after": format_timestamp(since),
                "per_page": PER_PAGE,
                "page": page,
            },
        )
        return [self._parse_merge_request(item) for item in result.items], result.next_page

    def _parse_merge_request(self, data: dict[str, Any]) -> MergeRequestRecord:
        """Parse merge request data from API response."""
        return MergeRequestRecord(
            id=int(require(data, "iid", "Merge request")),
            title=require(data, "title", "Merge request"),
            source_branch=data.get("source_branch") or "",
            merged_at=parse_timestamp(data.get("merged_at")),
            head_sha=data.get("sha") or "",
            web_url=data.get("web_url"),
        )
