"""Ghost MR checker type definitions.

This module exports all data model types used by the checker.
"""

from ghostmr.types.commits import CommitRecord, CommitSnapshot
from ghostmr.types.merge_requests import MergeRequestRecord
from ghostmr.types.results import MRResult, MRStatus

__all__ = [
    # Commit types
    "CommitRecord",
    "CommitSnapshot",
    # Merge request types
    "MergeRequestRecord",
    # Result types
    "MRStatus",
    "MRResult",
]
