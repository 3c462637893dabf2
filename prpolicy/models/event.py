"""
Trigger Event Models

Platform-agnostic snapshot of a single trigger: which PR, who acted, what
happened, and the PR's labels and body at that moment.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import FrozenSet, Optional


class PRRef(BaseModel):
    """Reference to a pull request (an issue number within a repository)."""

    model_config = ConfigDict(frozen=True)

    owner: str
    repo: str
    number: int

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"

    def __str__(self) -> str:
        return f"{self.full_name}#{self.number}"


class TriggerEvent(BaseModel):
    """Read-only input for one reconciliation or validation pass."""

    model_config = ConfigDict(frozen=True)

    event_name: str
    event_action: Optional[str] = None
    actor: str
    pr: PRRef
    labels: FrozenSet[str] = Field(default_factory=frozenset)
    body: str = ""

    @property
    def is_comment_edit(self) -> bool:
        return self.event_name == "issue_comment" and self.event_action == "edited"


class IssueComment(BaseModel):
    """A comment on a PR conversation."""

    id: int
    author: Optional[str] = None
    body: str = ""

    def is_marked(self, author: str, marker: str) -> bool:
        """True when written by ``author`` and starting with ``marker``."""
        return self.author == author and self.body.startswith(marker)
