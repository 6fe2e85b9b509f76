"""Interfaces the checker consumes from the hosting service.

Both listings are paginated with a fixed page size and signal the end of
results with ``next_page is None`` rather than an empty page.
"""

from datetime import datetime
from typing import Protocol

from ghostmr.types.commits import CommitRecord
from ghostmr.types.merge_requests import MergeRequestRecord

PER_PAGE = 100


class CommitsService(Protocol):
    """Lists the commits reachable from a branch."""

    def list_commits(
        self,
        project_id: str,
        branch: str,
        since: datetime,
        page: int,
    ) -> tuple[list[CommitRecord], int | None]:
        ...


class MergeRequestsService(Protocol):
    """Lists merge requests reported as merged into a target branch."""

    def list_merged_requests(
        self,
        project_id: str,
        target_branch: str,
        since: datetime,
        page: int,
    ) -> tuple[list[MergeRequestRecord], int | None]:
        ...
