"""
Pass Result Models

Pydantic models describing what a labeler or remediation pass did.
"""

from pydantic import BaseModel, Field
from typing import List
from enum import Enum


class PassStatus(str, Enum):
    """Outcome of one pass."""

    SKIPPED = "skipped"  # Self-actor guard
    LABELS_SYNCED = "labels_synced"
    CHECKLIST_CREATED = "checklist_created"
    CHECKLIST_UPDATED = "checklist_updated"
    UNCHANGED = "unchanged"
    PASSED = "passed"
    FAILED = "failed"


class LabelDelta(BaseModel):
    """Labels to add to and remove from a PR."""

    to_add: List[str] = Field(default_factory=list)
    to_remove: List[str] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.to_add and not self.to_remove


class PassResult(BaseModel):
    """Result of a labeler or remediation pass."""

    status: PassStatus
    delta: LabelDelta = Field(default_factory=LabelDelta)
    remediations: List[str] = Field(
        default_factory=list, description="Outstanding policy violations"
    )

    @property
    def exit_code(self) -> int:
        return 1 if self.status == PassStatus.FAILED else 0
