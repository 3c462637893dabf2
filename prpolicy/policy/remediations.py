"""
Remediation Publisher

Replaces the bot's remediations comment on a PR and reports pass/fail.

Old remediation comments are always deleted rather than edited, so a
compliant PR ends up with no remediations comment at all.
"""

import asyncio
import logging
from typing import List, Optional, Sequence

from prpolicy.config import get_settings
from prpolicy.integrations.github.store import IssueStore
from prpolicy.models.event import TriggerEvent
from prpolicy.models.results import PassResult, PassStatus
from prpolicy.policy.validator import validate

logger = logging.getLogger(__name__)

REMEDIATIONS_MARKER = "#### Remediations needed"


def format_remediations(remediations: Sequence[str]) -> str:
    """Build the remediations comment body, one bullet per message."""
    bullets = "\n".join(f"* {item}" for item in remediations)
    return f"{REMEDIATIONS_MARKER}\n{bullets}"


class RemediationPublisher:
    """Publishes validation results as a single PR comment."""

    def __init__(self, store: IssueStore, bot_login: Optional[str] = None):
        self.store = store
        self.bot_login = bot_login or get_settings().bot_login

    async def publish(self, event: TriggerEvent, remediations: List[str]) -> PassResult:
        """
        Delete prior remediation comments and post the current ones.

        Args:
            event: Trigger snapshot identifying the PR
            remediations: Messages from the validator

        Returns:
            FAILED result when any remediation is outstanding, PASSED otherwise
        """
        comments = await self.store.list_comments(event.pr)
        stale = [c for c in comments if c.is_marked(self.bot_login, REMEDIATIONS_MARKER)]
        if stale:
            logger.info(f"Deleting {len(stale)} previous remediations comment(s)")
            await asyncio.gather(
                *(self.store.delete_comment(event.pr, c.id) for c in stale)
            )

        if not remediations:
            logger.info(f"No remediations needed for {event.pr}")
            return PassResult(status=PassStatus.PASSED)

        await self.store.create_comment(event.pr, format_remediations(remediations))
        logger.warning(f"{len(remediations)} remediation(s) needed for {event.pr}")
        return PassResult(status=PassStatus.FAILED, remediations=list(remediations))

    async def run(self, event: TriggerEvent) -> PassResult:
        """Validate the PR in ``event`` and publish the outcome."""
        return await self.publish(event, validate(event.labels, event.body))
