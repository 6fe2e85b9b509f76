"""
Command line entry point.

Usage:
    ghost-mr-checker --config config.yaml
    ghost-mr-checker --since 2025-11-09 --branch release -v
"""

import argparse
import logging
import sys
from collections.abc import Sequence

from ghostmr.checker import Checker
from ghostmr.client import GitLabClient
from ghostmr.config import DEFAULT_CONFIG_PATH, load_config
from ghostmr.exceptions import GhostMRError
from ghostmr.logging import configure_logging, get_logger
from ghostmr.types.results import MRResult

logger = get_logger()


def format_result(result: MRResult, show_branch: bool = False) -> str:
    """Render one result as ``[STATUS] title (Source: branch)``."""
    mr = result.merge_request
    branch = f" [{result.branch}]" if show_branch else ""
    return f"[{result.status}]{branch} {mr.title} (Source: {mr.source_branch})"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ghost-mr-checker",
        description="Find merge requests reported as merged whose changes are missing from the branch",
    )
    parser.add_argument(
        "--config",
        default=None,
        help=f"Path to configuration file (default: {DEFAULT_CONFIG_PATH})",
    )
    parser.add_argument(
        "--since",
        default=None,
        help="Start of the check window as YYYY-MM-DD (overrides check.since)",
    )
    parser.add_argument(
        "--branch",
        dest="branches",
        action="append",
        default=None,
        help="Branch to check; repeat for several (overrides check.branches)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="Log progress (-v) or every API request (-vv)",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    level = logging.INFO if args.verbose else logging.WARNING
    http_level = logging.DEBUG if args.verbose > 1 else level
    configure_logging(level=level, http_level=http_level)

    try:
        settings = load_config(args.config)
        if args.since:
            settings.check.since = args.since
        if args.branches:
            settings.check.branches = args.branches
        settings.validate()

        since = settings.since
        with GitLabClient(token=settings.gitlab.token, base_url=settings.gitlab.url) as client:
            checker = Checker(
                client.commits,
                client.merge_requests,
                settings.gitlab.project_id,
                branches=settings.check.branches,
            )
            results = checker.check(since)
    except GhostMRError as e:
        logger.error("Check failed: %s", e)
        return 1

    show_branch = len(settings.check.branches) > 1
    for result in results:
        print(format_result(result, show_branch=show_branch))
    return 0


if __name__ == "__main__":
    sys.exit(main())
