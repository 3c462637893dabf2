"""
Policy Runner

Wires the issue store to the labeler and remediation passes and decides
which passes a GitHub event should run.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

from prpolicy.integrations.github.client import GitHubIssueStore
from prpolicy.integrations.github.store import IssueStore
from prpolicy.models.event import TriggerEvent
from prpolicy.models.results import PassResult
from prpolicy.policy.labeler import ChecklistLabeler
from prpolicy.policy.remediations import RemediationPublisher

logger = logging.getLogger(__name__)

LABELER = "labeler"
REMEDIATIONS = "remediations"

PULL_REQUEST_ACTIONS = {
    "opened",
    "edited",
    "synchronize",
    "reopened",
    "labeled",
    "unlabeled",
}


def passes_for(event_name: str, action: Optional[str]) -> Tuple[str, ...]:
    """Names of the passes an event runs, empty when the event is ignored."""
    if event_name == "pull_request" and action in PULL_REQUEST_ACTIONS:
        return (LABELER, REMEDIATIONS)
    if event_name == "issue_comment" and action == "edited":
        return (LABELER,)
    return ()


@dataclass
class DispatchResult:
    """Results of the passes run for one event."""

    results: Dict[str, PassResult] = field(default_factory=dict)

    @property
    def exit_code(self) -> int:
        return max((r.exit_code for r in self.results.values()), default=0)


class PolicyRunner:
    """Runs policy passes against a store."""

    def __init__(self, store: Optional[IssueStore] = None, bot_login: Optional[str] = None):
        self.store = store or GitHubIssueStore()
        self.labeler = ChecklistLabeler(self.store, bot_login)
        self.publisher = RemediationPublisher(self.store, bot_login)

    async def run_labeler(self, event: TriggerEvent) -> PassResult:
        return await self.labeler.run(event)

    async def run_remediations(self, event: TriggerEvent) -> PassResult:
        return await self.publisher.run(event)

    async def dispatch(self, event: TriggerEvent) -> DispatchResult:
        """
        Run the passes relevant to ``event``.

        - pull_request (opened, edited, synchronize, reopened, labeled, unlabeled):
          labeler, then remediations
        - issue_comment edited: labeler
        - anything else: nothing
        """
        outcome = DispatchResult()
        passes = passes_for(event.event_name, event.event_action)

        if LABELER in passes:
            outcome.results[LABELER] = await self.run_labeler(event)
        if REMEDIATIONS in passes:
            outcome.results[REMEDIATIONS] = await self.run_remediations(event)
        if not passes:
            logger.info(
                f"Ignoring {event.event_name}/{event.event_action} event for {event.pr}"
            )

        return outcome
