# Shared data models
from prpolicy.models.labels import (
    Label,
    LabelCategory,
    LABEL_CATEGORIES,
    POLICY_LABELS,
    REGRESSION_FIX,
    CHERRY_PICK,
    MIGRATION,
)
from prpolicy.models.event import PRRef, TriggerEvent, IssueComment
from prpolicy.models.results import LabelDelta, PassResult, PassStatus

__all__ = [
    "Label",
    "LabelCategory",
    "LABEL_CATEGORIES",
    "POLICY_LABELS",
    "REGRESSION_FIX",
    "CHERRY_PICK",
    "MIGRATION",
    "PRRef",
    "TriggerEvent",
    "IssueComment",
    "LabelDelta",
    "PassResult",
    "PassStatus",
]
