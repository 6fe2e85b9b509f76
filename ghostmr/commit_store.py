"""
Commit store.

Fetches the full commit history of a branch since a cutoff, following the
API's page markers, and caches one snapshot per branch.
"""

from datetime import datetime

from ghostmr.logging import get_logger
from ghostmr.services import CommitsService
from ghostmr.types.commits import CommitRecord, CommitSnapshot

logger = get_logger("checker")


class CommitStore:
    """Loads and caches commit snapshots for the branches of one project."""

    def __init__(self, commits: CommitsService, project_id: str) -> None:
        self.commits = commits
        self.project_id = project_id
        self._snapshots: dict[tuple[str, datetime], CommitSnapshot] = {}

    def load_commits(self, branch: str, since: datetime) -> tuple[CommitRecord, ...]:
        """
        Fetch every commit on ``branch`` at or after ``since``.

        Pages are requested until the service reports no next page. An empty
        page that still carries a next-page marker does not end the walk.

        Returns:
            All commits in API order

        Raises:
            RetrievalError: If any page fetch fails
        """
        collected: list[CommitRecord] = []
        page: int | None = 1

        while page is not None:
            records, page = self.commits.list_commits(
                self.project_id, branch, since, page
            )
            collected.extend(records)

        logger.debug("Loaded %d commits from %s since %s", len(collected), branch, since)
        return tuple(collected)

    def snapshot(self, branch: str, since: datetime) -> CommitSnapshot:
        """Return the branch's snapshot, fetching it on first use only."""
        key = (branch, since)
        cached = self._snapshots.get(key)
        if cached is None:
            cached = CommitSnapshot(
                branch=branch,
                since=since,
                commits=self.load_commits(branch, since),
            )
            self._snapshots[key] = cached
        return cached
