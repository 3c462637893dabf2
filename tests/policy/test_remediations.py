"""
Tests for the remediation publisher.
"""

import asyncio
from unittest.mock import patch

from conftest import BOT, HUMAN, make_event
from prpolicy.models.results import PassStatus
from prpolicy.policy.remediations import (
    REMEDIATIONS_MARKER,
    RemediationPublisher,
    format_remediations,
)


def test_format_remediations():
    """Test the comment body layout."""
    body = format_remediations(["first thing", "second thing"])
    assert body == "#### Remediations needed\n* first thing\n* second thing"


class TestRemediationPublisher:
    """Test suite for publishing remediations."""

    def test_failure_creates_single_comment(self, store):
        publisher = RemediationPublisher(store, bot_login=BOT)

        result = asyncio.run(publisher.publish(make_event(), ["fix labels"]))

        assert result.status == PassStatus.FAILED
        assert result.exit_code == 1
        assert result.remediations == ["fix labels"]
        assert store.bodies(REMEDIATIONS_MARKER) == [format_remediations(["fix labels"])]

    def test_success_posts_nothing(self, store):
        publisher = RemediationPublisher(store, bot_login=BOT)

        result = asyncio.run(publisher.publish(make_event(), []))

        assert result.status == PassStatus.PASSED
        assert result.exit_code == 0
        assert store.writes == []

    def test_prior_comments_deleted_when_compliant(self, store):
        """Test that old remediations disappear once the PR is compliant."""
        store.seed_comment(format_remediations(["old"]))
        store.seed_comment(format_remediations(["older"]))
        publisher = RemediationPublisher(store, bot_login=BOT)

        asyncio.run(publisher.publish(make_event(), []))

        assert store.bodies(REMEDIATIONS_MARKER) == []

    def test_prior_comment_replaced_not_edited(self, store):
        """Test delete-then-create even when the message is unchanged."""
        old = store.seed_comment(format_remediations(["same"]))
        publisher = RemediationPublisher(store, bot_login=BOT)

        asyncio.run(publisher.publish(make_event(), ["same"]))

        assert store.writes[0] == ("delete_comment", old.id)
        assert store.writes[1][0] == "create_comment"
        assert len(store.bodies(REMEDIATIONS_MARKER)) == 1

    def test_other_comments_untouched(self, store):
        """Test that human comments and the checklist are never deleted."""
        store.seed_comment(format_remediations(["quoted by a human"]), author=HUMAN)
        store.seed_comment("## PR Checklist\n\n...")
        publisher = RemediationPublisher(store, bot_login=BOT)

        asyncio.run(publisher.publish(make_event(), []))

        assert len(store.comments) == 2
        assert store.writes == []

    def test_run_validates_event(self, store, settings):
        """Test that run() validates labels and body from the event."""
        publisher = RemediationPublisher(store, bot_login=BOT)
        event = make_event(labels={"not-cherry-pick", "not-regression-fix"})

        with patch("prpolicy.policy.validator.get_settings", return_value=settings):
            result = asyncio.run(publisher.run(event))

        assert result.status == PassStatus.PASSED
