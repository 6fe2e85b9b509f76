"""Merge request-related data models."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class MergeRequestRecord:
    """Merge request as reported by the hosting API."""

    id: int  # project-scoped iid
    title: str
    source_branch: str
    merged_at: datetime | None
    head_sha: str
    web_url: str | None = None
