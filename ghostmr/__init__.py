"""ghost-mr-checker - find merge requests reported as merged that never reached their branch."""

from ghostmr.checker import DEFAULT_BRANCHES, Checker
from ghostmr.client import GitLabClient
from ghostmr.commit_store import CommitStore
from ghostmr.detector import MatchKind, detect, evaluate, find_match
from ghostmr.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConfigurationError,
    GhostMRError,
    MalformedResponseError,
    NotFoundError,
    RateLimitedError,
    RequestRejectedError,
    RetrievalError,
    ServerError,
)
from ghostmr.logging import configure_logging, get_logger
from ghostmr.scanner import MergeRequestScanner
from ghostmr.services import PER_PAGE, CommitsService, MergeRequestsService
from ghostmr.transport import HTTPTransport
from ghostmr.types import (
    CommitRecord,
    CommitSnapshot,
    MergeRequestRecord,
    MRResult,
    MRStatus,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Checker
    "Checker",
    "DEFAULT_BRANCHES",
    "CommitStore",
    "MergeRequestScanner",
    "MatchKind",
    "find_match",
    "evaluate",
    "detect",
    # Collaborators
    "CommitsService",
    "MergeRequestsService",
    "PER_PAGE",
    "GitLabClient",
    # Types
    "CommitRecord",
    "CommitSnapshot",
    "MergeRequestRecord",
    "MRStatus",
    "MRResult",
    # Exceptions
    "GhostMRError",
    "ConfigurationError",
    "RetrievalError",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "RateLimitedError",
    "RequestRejectedError",
    "MalformedResponseError",
    "ServerError",
    # Transport
    "HTTPTransport",
    # Logging
    "configure_logging",
    "get_logger",
]
