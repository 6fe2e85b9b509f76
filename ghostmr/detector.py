"""
Ghost detector.

Decides whether a merge request's changes are present in a branch's commit
snapshot. Two checks run in order and the first hit wins:

1. SHA: a commit id equals the merge request's head sha (regular merges).
2. TITLE: the merge request title is a case-sensitive substring of a
   commit's title or full message (default squash commit messages).

This is a heuristic. Unrelated commits that happen to contain the title
produce a false "present", and a squash message that rewords the title
produces a false ghost. An empty title is a substring of every commit, so
such a merge request is always found.
"""

from collections.abc import Iterable, Sequence
from enum import Enum

from ghostmr.logging import get_logger
from ghostmr.types.commits import CommitRecord, CommitSnapshot
from ghostmr.types.merge_requests import MergeRequestRecord
from ghostmr.types.results import MRResult, MRStatus

logger = get_logger("checker")


class MatchKind(str, Enum):
    """How a merge request was found in a branch."""

    SHA = "sha"
    TITLE = "title"


def matches_sha(mr: MergeRequestRecord, commits: Iterable[CommitRecord]) -> bool:
    return any(commit.id == mr.head_sha for commit in commits)


def matches_title(mr: MergeRequestRecord, commits: Iterable[CommitRecord]) -> bool:
    return any(
        mr.title in commit.title or mr.title in commit.message
        for commit in commits
    )


def find_match(
    mr: MergeRequestRecord, commits: Sequence[CommitRecord]
) -> MatchKind | None:
    """Return how the merge request was found, or None if it was not."""
    if matches_sha(mr, commits):
        return MatchKind.SHA
    if matches_title(mr, commits):
        return MatchKind.TITLE
    return None


def evaluate(
    mr: MergeRequestRecord, commits: Sequence[CommitRecord]
) -> MRStatus | None:
    """Return MRStatus.GHOST when the merge request is absent, None when present."""
    match = find_match(mr, commits)
    if match is None:
        return MRStatus.GHOST
    logger.debug("!%d found by %s", mr.id, match.value)
    return None


def detect(mr: MergeRequestRecord, snapshot: CommitSnapshot) -> MRResult | None:
    """Evaluate a merge request against a branch snapshot.

    Returns:
        An MRResult tagged with the snapshot's branch for a ghost, else None
    """
    status = evaluate(mr, snapshot.commits)
    if status is None:
        return None
    return MRResult(merge_request=mr, branch=snapshot.branch, status=status)
