"""
Checklist Labeler

Keeps the PR checklist comment and the PR policy labels in sync.

Direction per trigger:
- Checklist comment edited by a human: labels follow the comment
- Anything else (label change, PR opened, ...): the comment follows labels

The bot's own writes re-trigger the workflow, so events whose actor is the
bot are ignored.
"""

import asyncio
import logging
from typing import Dict, FrozenSet, List, Optional

from prpolicy.config import get_settings
from prpolicy.integrations.github.store import IssueStore
from prpolicy.models.event import TriggerEvent, IssueComment
from prpolicy.models.results import LabelDelta, PassResult, PassStatus
from prpolicy.policy.checklist import (
    CHECKLIST_MARKER,
    render_checklist,
    parse_checklist,
    desired_labels,
)

logger = logging.getLogger(__name__)


def compute_label_delta(current: FrozenSet[str], desired: Dict[str, bool]) -> LabelDelta:
    """
    Diff the current labels against the desired ones.

    Only labels that change are returned, so applying the delta twice is a
    no-op the second time.
    """
    to_add = sorted(name for name, wanted in desired.items() if wanted and name not in current)
    to_remove = sorted(name for name, wanted in desired.items() if not wanted and name in current)
    return LabelDelta(to_add=to_add, to_remove=to_remove)


class ChecklistLabeler:
    """Reconciles the checklist comment with PR labels."""

    def __init__(self, store: IssueStore, bot_login: Optional[str] = None):
        self.store = store
        self.bot_login = bot_login or get_settings().bot_login

    def find_checklists(self, comments: List[IssueComment]) -> List[IssueComment]:
        return [c for c in comments if c.is_marked(self.bot_login, CHECKLIST_MARKER)]

    async def run(self, event: TriggerEvent) -> PassResult:
        """
        Run one reconciliation pass.

        Args:
            event: Trigger snapshot

        Returns:
            PassResult describing what was written
        """
        logger.info(f"Actor is {event.actor}")
        if event.actor == self.bot_login:
            logger.info("Skipping labeler flow")
            return PassResult(status=PassStatus.SKIPPED)

        comments = await self.store.list_comments(event.pr)
        checklists = self.find_checklists(comments)

        if len(checklists) == 1:
            if event.is_comment_edit:
                return await self._sync_labels(event, checklists[0])
            return await self._sync_comment(event, checklists[0])

        return await self._recreate_comment(event, checklists)

    async def _sync_labels(self, event: TriggerEvent, checklist: IssueComment) -> PassResult:
        logger.info("Going to auto-set labels")
        flags = parse_checklist(checklist.body)
        delta = compute_label_delta(event.labels, desired_labels(flags))

        if delta.is_empty:
            logger.info("Labels already match the checklist")
            return PassResult(status=PassStatus.UNCHANGED, delta=delta)

        writes = [self.store.remove_label(event.pr, name) for name in delta.to_remove]
        if delta.to_add:
            logger.info(f"Adding {','.join(delta.to_add)}")
            writes.append(self.store.add_labels(event.pr, delta.to_add))
        for name in delta.to_remove:
            logger.info(f"Removing {name}")

        await asyncio.gather(*writes)
        logger.info("Finished setting labels")
        return PassResult(status=PassStatus.LABELS_SYNCED, delta=delta)

    async def _sync_comment(self, event: TriggerEvent, checklist: IssueComment) -> PassResult:
        body = render_checklist(event.labels)
        if checklist.body == body:
            logger.info("Checklist already up to date")
            return PassResult(status=PassStatus.UNCHANGED)

        await self.store.update_comment(event.pr, checklist.id, body)
        logger.info("Finished updating checklist")
        return PassResult(status=PassStatus.CHECKLIST_UPDATED)

    async def _recreate_comment(
        self, event: TriggerEvent, checklists: List[IssueComment]
    ) -> PassResult:
        if checklists:
            logger.warning(
                f"Found {len(checklists)} checklist comments on {event.pr}, collapsing"
            )
            await asyncio.gather(
                *(self.store.delete_comment(event.pr, c.id) for c in checklists)
            )

        await self.store.create_comment(event.pr, render_checklist(event.labels))
        logger.info("Created checklist comment")
        return PassResult(status=PassStatus.CHECKLIST_CREATED)
