"""Helpers shared by the resource clients."""

from datetime import datetime, timezone
from typing import Any
from urllib.parse import quote

from ghostmr.exceptions import MalformedResponseError


def project_path(project_id: str) -> str:
    """Build the ``/projects/:id`` prefix, encoding ``group/project`` paths."""
    return f"/projects/{quote(str(project_id), safe='')}"


def format_timestamp(value: datetime) -> str:
    """Render a datetime as the ISO 8601 UTC string the API expects."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def parse_timestamp(value: str | None) -> datetime | None:
    """Parse an API timestamp into an aware datetime; None stays None."""
    if not value:
        return None
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError as e:
        raise MalformedResponseError(
            "MALFORMED_RESPONSE", f"Invalid timestamp: {value!r}"
        ) from e
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def require(data: dict[str, Any], key: str, kind: str) -> Any:
    """Fetch a required field from a response record."""
    if not isinstance(data, dict) or data.get(key) is None:
        raise MalformedResponseError(
            "MALFORMED_RESPONSE", f"{kind} record is missing '{key}'"
        )
    return data[key]
