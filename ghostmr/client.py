"""
Ghost MR checker API client.

Provides the GitLab collaborators the checker consumes.
"""

import os
from typing import Any

from ghostmr.clients import CommitsClient, MergeRequestsClient
from ghostmr.exceptions import ConfigurationError
from ghostmr.transport import HTTPTransport


class GitLabClient:
    """
    Client for the parts of the GitLab REST API the checker needs.

    Example:
        ```python
        from ghostmr import GitLabClient

        client = GitLabClient(token="glpat-...", base_url="https://gitlab.example.com/api/v4")

        # Or create from environment variables
        client = GitLabClient.from_env()

        commits, next_page = client.commits.list_commits("group/app", "release", since, 1)
        ```
    """

    DEFAULT_BASE_URL = "https://gitlab.com/api/v4"
    DEFAULT_TIMEOUT = 30.0

    def __init__(
        self,
        token: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        transport: HTTPTransport | None = None,
    ) -> None:
        """
        Initialize the GitLab client.

        Args:
            token: Personal or project access token with read_api scope
            base_url: API base URL (default: https://gitlab.com/api/v4)
            timeout: Request timeout in seconds (default: 30.0)
            transport: Pre-built transport, mainly for tests (optional)

        Raises:
            ConfigurationError: If the token is empty
        """
        if not token:
            raise ConfigurationError("GitLab token is required")

        self.base_url = base_url
        self.timeout = timeout

        self._transport = transport or HTTPTransport(
            base_url=base_url,
            token=token,
            timeout=timeout,
        )

        self.commits = CommitsClient(self._transport)
        self.merge_requests = MergeRequestsClient(self._transport)

    @classmethod
    def from_env(
        cls,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> "GitLabClient":
        """
        Create a client from environment variables.

        Environment variables:
            GITLAB_TOKEN: Access token (required)
            GITLAB_URL: API base URL (optional, default: https://gitlab.com/api/v4)

        Raises:
            ConfigurationError: If GITLAB_TOKEN is missing
        """
        token = os.environ.get("GITLAB_TOKEN")
        base_url = os.environ.get("GITLAB_URL") or cls.DEFAULT_BASE_URL

        if not token:
            raise ConfigurationError("GITLAB_TOKEN environment variable not set")

        return cls(
            token=token,
            base_url=base_url,
            timeout=timeout,
        )

    @property
    def transport(self) -> HTTPTransport:
        """Get the underlying HTTP transport (for advanced use cases)."""
        return self._transport

    def close(self) -> None:
        """Close the client and release resources."""
        self._transport.close()

    def __enter__(self) -> "GitLabClient":
        """Context manager entry."""
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit - closes the client."""
        self.close()
