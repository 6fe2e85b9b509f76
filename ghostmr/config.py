"""
Configuration loading for the ghost MR checker.

Settings come from a YAML file shaped like::

    gitlab:
      token: glpat-...
      project_id: group/app
      url: https://gitlab.example.com/api/v4
    check:
      since: "2025-11-09"
      branches: [release, master]

``GITLAB_TOKEN``, ``GITLAB_PROJECT_ID`` and ``GITLAB_URL`` override the file.
"""

import os
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

import yaml

from ghostmr.checker import DEFAULT_BRANCHES
from ghostmr.client import GitLabClient
from ghostmr.exceptions import ConfigurationError

DEFAULT_CONFIG_PATH = "config.yaml"
DEFAULT_SINCE = "2025-11-09"
SINCE_FORMAT = "%Y-%m-%d"


@dataclass
class GitLabSettings:
    """Connection settings."""

    token: str = ""
    project_id: str = ""
    url: str = GitLabClient.DEFAULT_BASE_URL


@dataclass
class CheckSettings:
    """What to check."""

    since: str = DEFAULT_SINCE
    branches: list[str] = field(default_factory=lambda: list(DEFAULT_BRANCHES))


@dataclass
class Settings:
    gitlab: GitLabSettings = field(default_factory=GitLabSettings)
    check: CheckSettings = field(default_factory=CheckSettings)

    @property
    def since(self) -> datetime:
        return parse_since(self.check.since)

    def validate(self) -> "Settings":
        """Fail fast on missing identifiers or an unparsable window."""
        if not self.gitlab.token or not self.gitlab.project_id:
            raise ConfigurationError("GitLab token and project ID are required in config")
        if not self.check.branches:
            raise ConfigurationError("At least one branch must be listed under check.branches")
        parse_since(self.check.since)
        return self


def parse_since(text: str) -> datetime:
    """Parse a ``YYYY-MM-DD`` cutoff into midnight UTC."""
    try:
        parsed = datetime.strptime(str(text).strip(), SINCE_FORMAT)
    except ValueError as e:
        raise ConfigurationError(
            f"Invalid date format {text!r}, expected YYYY-MM-DD"
        ) from e
    return parsed.replace(tzinfo=timezone.utc)


def _get_env_value(name: str) -> str | None:
    """Get environment variable value, treating empty as unset."""
    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return value.strip()


def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
    section = data.get(name) or {}
    if not isinstance(section, dict):
        raise ConfigurationError(f"'{name}' must be a mapping")
    return section


def _from_mapping(data: dict[str, Any]) -> Settings:
    gitlab = _section(data, "gitlab")
    check = _section(data, "check")

    branches = check.get("branches", list(DEFAULT_BRANCHES))
    if isinstance(branches, str):
        branches = [branches]
    if not isinstance(branches, list):
        raise ConfigurationError("'check.branches' must be a list of branch names")

    return Settings(
        gitlab=GitLabSettings(
            token=str(gitlab.get("token") or ""),
            project_id=str(gitlab.get("project_id") or ""),
            url=str(gitlab.get("url") or GitLabClient.DEFAULT_BASE_URL),
        ),
        check=CheckSettings(
            since=str(check.get("since") or DEFAULT_SINCE),
            branches=[str(branch) for branch in branches],
        ),
    )


def _apply_env_overrides(settings: Settings) -> Settings:
    token = _get_env_value("GITLAB_TOKEN")
    if token is not None:
        settings.gitlab.token = token

    project_id = _get_env_value("GITLAB_PROJECT_ID")
    if project_id is not None:
        settings.gitlab.project_id = project_id

    url = _get_env_value("GITLAB_URL")
    if url is not None:
        settings.gitlab.url = url

    return settings


def load_config(config_path: str | Path | None = None) -> Settings:
    """
    Load settings from a YAML file and apply environment overrides.

    A missing file at the default location is allowed so that environment
    variables alone can configure a run; an explicitly named file must exist.

    Raises:
        ConfigurationError: If the file is unreadable or malformed
    """
    path = Path(config_path or DEFAULT_CONFIG_PATH)
    data: Any = {}

    if path.exists():
        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        except OSError as e:
            raise ConfigurationError(f"Failed to read config file {path}: {e}") from e
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Failed to parse config file {path}: {e}") from e
    elif config_path is not None:
        raise ConfigurationError(f"Config file not found: {path}")

    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file {path} must contain a mapping")

    return _apply_env_overrides(_from_mapping(data))
