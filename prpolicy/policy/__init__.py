"""
PR Policy Module

Checklist sync, metadata validation and remediation publishing.
"""

from prpolicy.policy.errors import PolicyError, MissingPullRequestError
from prpolicy.policy.checklist import (
    CHECKLIST_MARKER,
    render_checklist,
    parse_checklist,
    desired_labels,
)
from prpolicy.policy.labeler import ChecklistLabeler, compute_label_delta
from prpolicy.policy.validator import validate
from prpolicy.policy.remediations import (
    REMEDIATIONS_MARKER,
    RemediationPublisher,
    format_remediations,
)

__all__ = [
    "PolicyError",
    "MissingPullRequestError",
    "CHECKLIST_MARKER",
    "render_checklist",
    "parse_checklist",
    "desired_labels",
    "ChecklistLabeler",
    "compute_label_delta",
    "validate",
    "REMEDIATIONS_MARKER",
    "RemediationPublisher",
    "format_remediations",
]
