"""
Command-line entry points for CI runners.

Usage:
    prpolicy label        # Sync checklist comment and labels
    prpolicy remediate    # Validate PR metadata and post remediations

Environment variables (set by GitHub Actions or in .env file):
    GITHUB_TOKEN       - Token used for GitHub API calls
    GITHUB_EVENT_PATH  - Path to the event payload JSON
    GITHUB_EVENT_NAME  - Event name (pull_request, issue_comment, ...)
    GITHUB_ACTOR       - Login that triggered the workflow

Exit status is 1 when the event has no PR or remediations are needed.
"""

import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from prpolicy.config import configure_logging, get_settings
from prpolicy.integrations.github.events import load_event_file
from prpolicy.policy.errors import MissingPullRequestError
from prpolicy.services.policy_runner import PolicyRunner

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(
        prog="prpolicy", description="Enforce PR label and description policy"
    )
    parser.add_argument(
        "command",
        choices=["label", "remediate"],
        help="label: sync checklist and labels; remediate: validate and report",
    )
    parser.add_argument("--event-path", default=settings.github_event_path)
    parser.add_argument("--event-name", default=settings.github_event_name)
    parser.add_argument("--actor", default=settings.github_actor or None)
    parser.add_argument("--debug", action="store_true", default=settings.debug)
    return parser


async def run_command(args: argparse.Namespace, runner: Optional[PolicyRunner] = None) -> int:
    event = load_event_file(args.event_path, args.event_name, args.actor)
    runner = runner or PolicyRunner()

    if args.command == "label":
        result = await runner.run_labeler(event)
    else:
        result = await runner.run_remediations(event)

    logger.info(f"{args.command} finished with status {result.status.value}")
    return result.exit_code


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    configure_logging(args.debug)

    if not args.event_path:
        logger.error("No event payload path given (GITHUB_EVENT_PATH), cannot proceed.")
        return 1

    try:
        return asyncio.run(run_command(args))
    except MissingPullRequestError as e:
        logger.error(f"This script was not run on a PR, cannot proceed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
