"""
Tests for loading trigger events from GitHub payloads.
"""

import json

import pytest

from prpolicy.integrations.github.events import load_event, load_event_file
from prpolicy.policy.errors import MissingPullRequestError

PULL_REQUEST_PAYLOAD = {
    "action": "labeled",
    "sender": {"login": "octocat"},
    "repository": {"full_name": "acme/web"},
    "pull_request": {
        "number": 42,
        "body": "This is a fix for an issue found on: admin, via: observability",
        "labels": [{"name": "cherry-pick"}, {"name": "no-migration"}],
    },
}

ISSUE_COMMENT_PAYLOAD = {
    "action": "edited",
    "sender": {"login": "octocat"},
    "repository": {"full_name": "acme/web"},
    "issue": {
        "number": 7,
        "body": None,
        "labels": [{"name": "regression-fix"}],
        "pull_request": {"url": "https://api.github.com/repos/acme/web/pulls/7"},
    },
    "comment": {"id": 99, "body": "## PR Checklist"},
}


class TestLoadEvent:
    """Test suite for building TriggerEvent from payloads."""

    def test_pull_request_event(self):
        event = load_event(PULL_REQUEST_PAYLOAD, "pull_request")

        assert event.event_name == "pull_request"
        assert event.event_action == "labeled"
        assert event.actor == "octocat"
        assert str(event.pr) == "acme/web#42"
        assert event.labels == frozenset({"cherry-pick", "no-migration"})
        assert event.body.startswith("This is a fix")
        assert not event.is_comment_edit

    def test_issue_comment_on_pr(self):
        event = load_event(ISSUE_COMMENT_PAYLOAD, "issue_comment")

        assert event.is_comment_edit
        assert event.pr.number == 7
        assert event.labels == frozenset({"regression-fix"})
        assert event.body == ""

    def test_explicit_actor_overrides_sender(self):
        event = load_event(PULL_REQUEST_PAYLOAD, "pull_request", actor="github-actions[bot]")
        assert event.actor == "github-actions[bot]"

    def test_issue_comment_on_plain_issue_is_missing_pr(self):
        payload = {**ISSUE_COMMENT_PAYLOAD, "issue": {"number": 3, "labels": []}}

        with pytest.raises(MissingPullRequestError):
            load_event(payload, "issue_comment")

    def test_push_event_is_missing_pr(self):
        with pytest.raises(MissingPullRequestError):
            load_event({"ref": "refs/heads/main"}, "push")

    def test_repository_falls_back_to_settings(self, settings, monkeypatch):
        monkeypatch.setattr(
            "prpolicy.integrations.github.events.get_settings", lambda: settings
        )
        payload = {k: v for k, v in PULL_REQUEST_PAYLOAD.items() if k != "repository"}

        event = load_event(payload, "pull_request")

        assert event.pr.full_name == "acme/web"


def test_load_event_file(tmp_path):
    path = tmp_path / "event.json"
    path.write_text(json.dumps(PULL_REQUEST_PAYLOAD), encoding="utf-8")

    event = load_event_file(str(path), "pull_request", actor="octocat")

    assert event.pr.number == 42
