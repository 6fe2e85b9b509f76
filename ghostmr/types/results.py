"""Check result data models."""

from dataclasses import dataclass
from enum import Enum

from ghostmr.types.merge_requests import MergeRequestRecord


class MRStatus(str, Enum):
    """Outcome of evaluating a merge request against a branch.

    Only GHOST is produced today. The remaining members are reserved for
    richer classification and are never assigned.
    """

    MISSING = "MISSING"
    OPEN = "OPEN"
    MERGED = "MERGED"
    CLOSED = "CLOSED"
    GHOST = "GHOST"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class MRResult:
    """Verdict for one (merge request, branch) pair."""

    merge_request: MergeRequestRecord
    branch: str  # "release", "master", ...
    status: MRStatus
