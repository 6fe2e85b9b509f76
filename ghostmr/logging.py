"""
Ghost MR checker logging utilities.

Provides configurable logging for HTTP requests/responses and the checker run.
Ensures no access token is ever logged.
"""

import logging
import re
from typing import Any

# Create package-specific loggers
_root_logger = logging.getLogger("ghostmr")
_http_logger = logging.getLogger("ghostmr.http")
_checker_logger = logging.getLogger("ghostmr.checker")

# Handler installed by the last configure_logging call
_installed_handler: logging.Handler | None = None

# Patterns for sensitive data that should be masked
_SENSITIVE_PATTERNS = [
    # GitLab personal/project/group access tokens
    (re.compile(r"\bgl(pat|ptt|dt|oas|rt|cbt|imt|ft|soat)-[A-Za-z0-9_\-]{20,}"), "[TOKEN_REDACTED]"),
    # Header forms
    (re.compile(r"(private-token|authorization)['\"]?\s*[:=]\s*['\"]?[^'\",}\s]+", re.IGNORECASE), r"\1: [REDACTED]"),
    # Secret/token patterns
    (re.compile(r"(secret|token|password|api_key)['\"]?\s*[:=]\s*['\"][^'\"]+['\"]", re.IGNORECASE), r"\1: [REDACTED]"),
]

_DEFAULT_SENSITIVE_KEYS = {"private-token", "authorization", "secret", "token", "password", "api_key"}


def configure_logging(
    level: int = logging.INFO,
    http_level: int | None = None,
    checker_level: int | None = None,
    handler: logging.Handler | None = None,
    format_string: str | None = None,
) -> None:
    """
    Configure ghost MR checker logging.

    Args:
        level: Default log level for all package loggers (default: INFO)
        http_level: Log level for HTTP request/response logging (default: same as level)
        checker_level: Log level for the checker run (default: same as level)
        handler: Custom handler to use (default: StreamHandler to stderr)
        format_string: Custom format string (default: includes timestamp, level, logger name)

    Calling it again replaces the handler installed by the previous call.

    Example:
        ```python
        import logging
        from ghostmr.logging import configure_logging

        # Show every page request
        configure_logging(level=logging.INFO, http_level=logging.DEBUG)
        ```
    """
    if format_string is None:
        format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    formatter = logging.Formatter(format_string)

    if handler is None:
        handler = logging.StreamHandler()

    handler.setFormatter(formatter)

    global _installed_handler
    if _installed_handler is not None:
        _root_logger.removeHandler(_installed_handler)
    _installed_handler = handler

    _root_logger.setLevel(level)
    _root_logger.addHandler(handler)

    _http_logger.setLevel(http_level if http_level is not None else level)
    _checker_logger.setLevel(checker_level if checker_level is not None else level)


def get_logger(name: str | None = None) -> logging.Logger:
    """
    Get a ghost MR checker logger.

    Args:
        name: Logger name suffix (e.g., "http", "checker"). If None, returns the package logger.

    Returns:
        Logger instance
    """
    if name is None:
        return _root_logger
    return logging.getLogger(f"ghostmr.{name}")


def mask_sensitive_data(text: str) -> str:
    """
    Mask sensitive data in a string.

    Replaces access tokens and other secret-looking values with redacted
    placeholders.

    Args:
        text: Text that may contain sensitive data

    Returns:
        Text with sensitive data masked
    """
    result = text
    for pattern, replacement in _SENSITIVE_PATTERNS:
        result = pattern.sub(replacement, result)
    return result


def safe_log_dict(data: dict[str, Any], sensitive_keys: set[str] | None = None) -> dict[str, Any]:
    """
    Create a copy of a dictionary with sensitive values masked.

    Args:
        data: Dictionary that may contain sensitive values
        sensitive_keys: Set of keys to mask (default: private-token, authorization, token, ...)

    Returns:
        Dictionary with sensitive values replaced with "[REDACTED]"
    """
    if sensitive_keys is None:
        sensitive_keys = _DEFAULT_SENSITIVE_KEYS

    result: dict[str, Any] = {}
    for key, value in data.items():
        key_lower = str(key).lower()
        if key_lower in sensitive_keys or any(sk in key_lower for sk in sensitive_keys):
            result[key] = "[REDACTED]"
        elif isinstance(value, dict):
            result[key] = safe_log_dict(value, sensitive_keys)
        elif isinstance(value, list):
            result[key] = [
                safe_log_dict(item, sensitive_keys) if isinstance(item, dict) else item
                for item in value
            ]
        else:
            result[key] = value

    return result


def log_http_request(
    method: str,
    url: str,
    params: dict[str, Any] | None = None,
    headers: dict[str, str] | None = None,
) -> None:
    """
    Log an HTTP request at DEBUG level with sensitive data masked.

    Args:
        method: HTTP method (GET, POST, etc.)
        url: Request URL or path
        params: Query parameters (optional)
        headers: Request headers (optional)
    """
    if not _http_logger.isEnabledFor(logging.DEBUG):
        return

    log_parts = [f"{method} {mask_sensitive_data(url)}"]

    if params:
        log_parts.append(f"params={safe_log_dict(params)}")

    if headers:
        log_parts.append(f"headers={safe_log_dict(dict(headers))}")

    _http_logger.debug(" | ".join(log_parts))


def log_http_response(
    status_code: int,
    url: str,
    item_count: int | None = None,
    next_page: int | None = None,
    elapsed_ms: float | None = None,
) -> None:
    """
    Log an HTTP response at DEBUG level.

    Args:
        status_code: HTTP status code
        url: Request URL
        item_count: Number of records in the page (optional)
        next_page: Next page number announced by the server (optional)
        elapsed_ms: Request duration in milliseconds (optional)
    """
    if not _http_logger.isEnabledFor(logging.DEBUG):
        return

    log_parts = [f"Response {status_code} from {mask_sensitive_data(url)}"]

    if elapsed_ms is not None:
        log_parts.append(f"elapsed={elapsed_ms:.2f}ms")

    if item_count is not None:
        log_parts.append(f"items={item_count}")

    if next_page is not None:
        log_parts.append(f"next_page={next_page}")

    _http_logger.debug(" | ".join(log_parts))


__all__ = [
    "configure_logging",
    "get_logger",
    "mask_sensitive_data",
    "safe_log_dict",
    "log_http_request",
    "log_http_response",
]
