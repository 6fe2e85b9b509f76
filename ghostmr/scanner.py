"""
Merge request scanner.

Lists merge requests the API reports as merged into a branch within the
check window.
"""

from datetime import datetime, timezone

from ghostmr.logging import get_logger
from ghostmr.services import MergeRequestsService
from ghostmr.types.merge_requests import MergeRequestRecord

logger = get_logger("checker")


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def merged_within(mr: MergeRequestRecord, since: datetime) -> bool:
    """True when the merge request has a merge time at or after ``since``."""
    if mr.merged_at is None:
        return False
    return _as_utc(mr.merged_at) >= _as_utc(since)


class MergeRequestScanner:
    """Scans merged merge requests for one project."""

    def __init__(self, merge_requests: MergeRequestsService, project_id: str) -> None:
        self.merge_requests = merge_requests
        self.project_id = project_id

    def scan_merged(self, branch: str, since: datetime) -> tuple[MergeRequestRecord, ...]:
        """
        Fetch merge requests merged into ``branch`` at or after ``since``.

        The API only filters on update time, so each record's ``merged_at``
        is re-checked here. Records without a merge time are dropped too.

        Raises:
            RetrievalError: If any page fetch fails
        """
        kept: list[MergeRequestRecord] = []
        dropped = 0
        page: int | None = 1

        while page is not None:
            records, page = self.merge_requests.list_merged_requests(
                self.project_id, branch, since, page
            )

            for mr in records:
                if merged_within(mr, since):
                    kept.append(mr)
                else:
                    dropped += 1

        logger.debug(
            "Scanned %d merged requests into %s (%d outside window)",
            len(kept), branch, dropped,
        )
        return tuple(kept)
