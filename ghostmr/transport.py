"""
HTTP Transport for the ghost MR checker.

Handles HTTP communication with the GitLab REST API, page-header parsing,
and mapping of error responses into typed exceptions. Each page is fetched
exactly once; a failed request surfaces as a RetrievalError.
"""

from dataclasses import dataclass
from typing import Any

import httpx

from ghostmr.exceptions import (
    AuthenticationError,
    AuthorizationError,
    MalformedResponseError,
    NotFoundError,
    RateLimitedError,
    RequestRejectedError,
    RetrievalError,
    ServerError,
)
from ghostmr.logging import log_http_request, log_http_response


@dataclass
class Page:
    """One page of a paginated listing."""

    items: list[dict[str, Any]]
    next_page: int | None


class HTTPTransport:
    """
    HTTP transport layer for the GitLab REST API.

    Handles:
    - PRIVATE-TOKEN authentication
    - X-Next-Page pagination headers
    - Error response parsing into typed exceptions
    """

    def __init__(
        self,
        base_url: str,
        token: str,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """
        Initialize HTTP transport.

        Args:
            base_url: Base URL of the API (e.g., "https://gitlab.com/api/v4")
            token: Personal or project access token
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used by tests to stub the network)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

        self._client = httpx.Client(
            base_url=self.base_url,
            timeout=timeout,
            headers={"PRIVATE-TOKEN": token, "Accept": "application/json"},
            transport=transport,
        )

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    def __enter__(self) -> "HTTPTransport":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def get_page(self, path: str, params: dict[str, Any] | None = None) -> Page:
        """
        Fetch one page of a list endpoint.

        Args:
            path: API path (e.g., "/projects/42/repository/commits")
            params: Query parameters, including ``page`` and ``per_page``

        Returns:
            Page with the decoded records and the next page number, or None
            when the server reports no further pages

        Raises:
            RetrievalError: On any API or network failure
        """
        log_http_request("GET", path, params)
        try:
            response = self._client.get(path, params=params)
        except httpx.RequestError as e:
            raise ServerError("CONNECTION_ERROR", str(e)) from e

        if response.status_code >= 400:
            raise self._parse_error_response(response)

        try:
            items = response.json()
        except ValueError as e:
            raise MalformedResponseError(
                "MALFORMED_RESPONSE", f"Response from {path} is not valid JSON"
            ) from e

        if not isinstance(items, list):
            raise MalformedResponseError(
                "MALFORMED_RESPONSE",
                f"Expected a list from {path}, got {type(items).__name__}",
            )

        next_page = self._parse_next_page(response)
        log_http_response(
            response.status_code,
            path,
            item_count=len(items),
            next_page=next_page,
            elapsed_ms=response.elapsed.total_seconds() * 1000,
        )
        return Page(items=items, next_page=next_page)

    @staticmethod
    def _parse_next_page(response: httpx.Response) -> int | None:
        """Read the X-Next-Page header; blank or missing means the last page."""
        raw = response.headers.get("X-Next-Page", "").strip()
        if not raw:
            return None
        try:
            return int(raw)
        except ValueError as e:
            raise MalformedResponseError(
                "MALFORMED_RESPONSE", f"Invalid X-Next-Page header: {raw!r}"
            ) from e

    def _parse_error_response(self, response: httpx.Response) -> RetrievalError:
        """
        Parse an error response into a typed exception.

        GitLab reports errors as ``{"message": ...}`` or ``{"error": ...}``,
        where the value may be a string or a dict of field errors.

        Args:
            response: HTTP response with error status

        Returns:
            Appropriate RetrievalError subclass
        """
        try:
            data = response.json()
        except ValueError:
            data = {}
        if not isinstance(data, dict):
            data = {}

        status_code = response.status_code
        detail = data.get("message") or data.get("error_description") or data.get("error")
        message = str(detail) if detail else f"HTTP {status_code}"
        code = f"HTTP_{status_code}"
        request_id = response.headers.get("X-Request-Id")

        if status_code == 401:
            return AuthenticationError(code, message, request_id)
        elif status_code == 403:
            return AuthorizationError(code, message, request_id)
        elif status_code == 404:
            return NotFoundError(code, message, request_id)
        elif status_code == 429:
            retry_after_str = response.headers.get("Retry-After", "60")
            try:
                retry_after = int(retry_after_str)
            except ValueError:
                retry_after = 60
            return RateLimitedError(code, message, retry_after, request_id)
        elif status_code >= 500:
            return ServerError(code, message, request_id)
        else:
            return RequestRejectedError(code, message, request_id)
