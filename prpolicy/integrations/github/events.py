"""
GitHub Event Loader

Turns a GitHub event document (an Actions ``GITHUB_EVENT_PATH`` file or a
webhook body) into a TriggerEvent.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from prpolicy.config import get_settings
from prpolicy.models.event import PRRef, TriggerEvent
from prpolicy.policy.errors import MissingPullRequestError

logger = logging.getLogger(__name__)


def _find_pull_request(payload: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    """
    Locate the PR object in an event payload.

    ``pull_request`` events carry it directly. ``issue_comment`` events carry
    an issue, which is a PR when it has a ``pull_request`` key.
    """
    pr = payload.get("pull_request")
    if isinstance(pr, dict):
        return pr

    issue = payload.get("issue")
    if isinstance(issue, dict) and issue.get("pull_request"):
        return issue

    return None


def _split_repository(payload: Dict[str, Any]) -> tuple:
    full_name = (payload.get("repository") or {}).get("full_name")
    if full_name and "/" in full_name:
        owner, repo = full_name.split("/", 1)
        return owner, repo

    settings = get_settings()
    return settings.github_repo_owner, settings.github_repo_name


def load_event(
    payload: Dict[str, Any],
    event_name: str,
    actor: Optional[str] = None,
) -> TriggerEvent:
    """
    Build a TriggerEvent from a GitHub event payload.

    Args:
        payload: Parsed event JSON
        event_name: GitHub event name (e.g. "pull_request", "issue_comment")
        actor: Login that triggered the event; defaults to the payload sender

    Returns:
        TriggerEvent snapshot

    Raises:
        MissingPullRequestError: If the payload does not refer to a PR
    """
    pr = _find_pull_request(payload)
    if pr is None:
        raise MissingPullRequestError(
            f"Event '{event_name}' was not triggered on a PR, cannot proceed."
        )

    if actor is None:
        actor = (payload.get("sender") or {}).get("login", "")

    owner, repo = _split_repository(payload)
    labels = frozenset(
        label["name"] for label in pr.get("labels") or [] if label.get("name")
    )

    event = TriggerEvent(
        event_name=event_name,
        event_action=payload.get("action"),
        actor=actor,
        pr=PRRef(owner=owner, repo=repo, number=pr["number"]),
        labels=labels,
        body=pr.get("body") or "",
    )
    logger.debug(f"Loaded {event_name}/{event.event_action} event for {event.pr}")
    return event


def load_event_file(
    event_path: str,
    event_name: str,
    actor: Optional[str] = None,
) -> TriggerEvent:
    """Load a TriggerEvent from an event JSON file on disk."""
    payload = json.loads(Path(event_path).read_text(encoding="utf-8"))
    return load_event(payload, event_name, actor)
