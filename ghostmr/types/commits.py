"""Commit-related data models."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class CommitRecord:
    """One commit on a branch at the time it was fetched."""

    id: str
    title: str
    message: str


@dataclass(frozen=True)
class CommitSnapshot:
    """The commits of one branch, fetched once and reused for a whole run."""

    branch: str
    since: datetime
    commits: tuple[CommitRecord, ...]

    def __len__(self) -> int:
        return len(self.commits)
