"""Ghost MR checker resource clients."""

from ghostmr.clients.commits import CommitsClient
from ghostmr.clients.merge_requests import MergeRequestsClient

__all__ = [
    "CommitsClient",
    "MergeRequestsClient",
]
