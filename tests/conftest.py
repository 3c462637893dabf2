"""
Shared test fixtures.

FakeIssueStore keeps comments and labels in memory and records every write,
so tests can assert on both the final state and the calls made.
"""

import pytest
from typing import List, Optional, Sequence, Set

from prpolicy.config import Settings
from prpolicy.models.event import PRRef, TriggerEvent, IssueComment

BOT = "github-actions[bot]"
HUMAN = "octocat"


class FakeIssueStore:
    """In-memory issue store for a single PR."""

    def __init__(self, labels: Optional[Set[str]] = None):
        self.comments: List[IssueComment] = []
        self.labels: Set[str] = set(labels or ())
        self.writes: List[tuple] = []
        self._next_id = 1

    def seed_comment(self, body: str, author: str = BOT) -> IssueComment:
        comment = IssueComment(id=self._next_id, author=author, body=body)
        self._next_id += 1
        self.comments.append(comment)
        return comment

    def bodies(self, marker: str, author: str = BOT) -> List[str]:
        return [c.body for c in self.comments if c.is_marked(author, marker)]

    async def list_comments(self, pr: PRRef) -> List[IssueComment]:
        return [c.model_copy() for c in self.comments]

    async def create_comment(self, pr: PRRef, body: str) -> IssueComment:
        self.writes.append(("create_comment", body))
        return self.seed_comment(body)

    async def update_comment(self, pr: PRRef, comment_id: int, body: str) -> None:
        self.writes.append(("update_comment", comment_id))
        for comment in self.comments:
            if comment.id == comment_id:
                comment.body = body

    async def delete_comment(self, pr: PRRef, comment_id: int) -> None:
        self.writes.append(("delete_comment", comment_id))
        self.comments = [c for c in self.comments if c.id != comment_id]

    async def add_labels(self, pr: PRRef, names: Sequence[str]) -> None:
        self.writes.append(("add_labels", tuple(names)))
        self.labels.update(names)

    async def remove_label(self, pr: PRRef, name: str) -> None:
        self.writes.append(("remove_label", name))
        self.labels.discard(name)


def make_event(
    labels=(),
    body: str = "",
    event_name: str = "pull_request",
    action: Optional[str] = "labeled",
    actor: str = HUMAN,
) -> TriggerEvent:
    return TriggerEvent(
        event_name=event_name,
        event_action=action,
        actor=actor,
        pr=PRRef(owner="acme", repo="web", number=42),
        labels=frozenset(labels),
        body=body,
    )


@pytest.fixture
def store():
    return FakeIssueStore()


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        github_repo_owner="acme",
        github_repo_name="web",
        bot_login=BOT,
    )
