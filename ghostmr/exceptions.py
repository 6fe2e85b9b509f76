"""Ghost MR checker exception classes."""


class GhostMRError(Exception):
    """Base exception for all ghost MR checker errors."""

    def __init__(
        self, code: str, message: str, request_id: str | None = None
    ) -> None:
        self.code = code
        self.message = message
        self.request_id = request_id
        super().__init__(f"[{code}] {message}")


class ConfigurationError(GhostMRError):
    """Raised when configuration or check inputs are invalid or missing."""

    def __init__(self, message: str) -> None:
        super().__init__("CONFIGURATION_ERROR", message)


class RetrievalError(GhostMRError):
    """Raised when talking to the hosting API fails for any reason."""

    pass


class AuthenticationError(RetrievalError):
    """Raised when the access token is rejected."""

    pass


class AuthorizationError(RetrievalError):
    """Raised when access to the project is denied."""

    pass


class NotFoundError(RetrievalError):
    """Raised when the project or branch is not found."""

    pass


class RateLimitedError(RetrievalError):
    """Raised when rate limited."""

    def __init__(
        self,
        code: str,
        message: str,
        retry_after: int,
        request_id: str | None = None,
    ) -> None:
        super().__init__(code, message, request_id)
        self.retry_after = retry_after


class RequestRejectedError(RetrievalError):
    """Raised when the API rejects the request parameters (other 4xx)."""

    pass


class MalformedResponseError(RetrievalError):
    """Raised when a response body cannot be interpreted."""

    pass


class ServerError(RetrievalError):
    """Raised on server errors (5xx) and connection failures."""

    pass
