"""
GitHub Integration Module

Provides GitHub API access for PR comments, labels and event payloads.
"""

from prpolicy.integrations.github.store import IssueStore
from prpolicy.integrations.github.client import GitHubIssueStore
from prpolicy.integrations.github.events import load_event, load_event_file

__all__ = [
    "IssueStore",
    "GitHubIssueStore",
    "load_event",
    "load_event_file",
]
