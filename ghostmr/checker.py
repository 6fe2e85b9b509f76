"""
Ghost merge request checker.

For each monitored branch: load one commit snapshot, scan the merge requests
the API reports as merged into that branch, and report every merge request
whose changes cannot be found in the snapshot.
"""

from collections.abc import Sequence
from datetime import datetime, timezone

from ghostmr.commit_store import CommitStore
from ghostmr.detector import detect
from ghostmr.exceptions import ConfigurationError
from ghostmr.logging import get_logger
from ghostmr.scanner import MergeRequestScanner
from ghostmr.services import CommitsService, MergeRequestsService
from ghostmr.types.results import MRResult

logger = get_logger("checker")

DEFAULT_BRANCHES = ("release", "master")


class Checker:
    """
    Finds ghost merge requests in one project.

    Example:
        ```python
        from datetime import datetime, timezone

        from ghostmr import Checker, GitLabClient

        with GitLabClient(token="glpat-...") as client:
            checker = Checker(client.commits, client.merge_requests, "group/app")
            for result in checker.check(datetime(2025, 11, 9, tzinfo=timezone.utc)):
                print(result.status, result.merge_request.title)
        ```
    """

    def __init__(
        self,
        commits: CommitsService,
        merge_requests: MergeRequestsService,
        project_id: str,
        branches: Sequence[str] = DEFAULT_BRANCHES,
    ) -> None:
        """
        Initialize the checker.

        Args:
            commits: Source of branch commit listings
            merge_requests: Source of merged merge request listings
            project_id: Numeric id or ``group/project`` path
            branches: Branches to check, in reporting order
        """
        self.commits = commits
        self.merge_requests = merge_requests
        self.project_id = project_id
        if isinstance(branches, str):
            branches = (branches,)
        self.branches = tuple(branches)

    def check(self, since: datetime) -> list[MRResult]:
        """
        Report ghost merge requests merged at or after ``since``.

        Each branch's commits are fetched once and reused for every merge
        request evaluated against it. Results are concatenated in branch
        order with no deduplication across branches.

        Args:
            since: Start of the check window; naive values are taken as UTC

        Returns:
            One MRResult per ghost (merge request, branch) pair

        Raises:
            ConfigurationError: If the project, branches or window are invalid
            RetrievalError: If any page fetch fails; no partial results
        """
        since = self._validate(since)

        # Fresh per call so no snapshot outlives the run that fetched it
        store = CommitStore(self.commits, self.project_id)
        scanner = MergeRequestScanner(self.merge_requests, self.project_id)

        results: list[MRResult] = []
        for branch in self.branches:
            snapshot = store.snapshot(branch, since)
            merged = scanner.scan_merged(branch, since)

            ghosts = 0
            for mr in merged:
                result = detect(mr, snapshot)
                if result is None:
                    continue
                ghosts += 1
                logger.warning(
                    "Ghost merge request !%d %r on %s (source %s)",
                    mr.id, mr.title, branch, mr.source_branch,
                )
                results.append(result)

            logger.info(
                "%s: %d commits, %d merged requests, %d ghosts",
                branch, len(snapshot), len(merged), ghosts,
            )

        return results

    def _validate(self, since: datetime) -> datetime:
        if not str(self.project_id or "").strip():
            raise ConfigurationError("Project ID is required")
        if not self.branches:
            raise ConfigurationError("At least one branch must be checked")
        if any(not branch or not branch.strip() for branch in self.branches):
            raise ConfigurationError("Branch names must not be empty")
        if not isinstance(since, datetime):
            raise ConfigurationError(
                f"'since' must be a datetime, got {type(since).__name__}"
            )
        if since.tzinfo is None:
            since = since.replace(tzinfo=timezone.utc)
        return since
