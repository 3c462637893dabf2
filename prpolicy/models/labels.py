"""
PR Label Categories

Label names the policy bot reads and writes, grouped into categories.
Exactly one label of each category is expected on a compliant PR.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple, FrozenSet, Iterable


class Label(str, Enum):
    """Policy labels known to the bot."""

    REGRESSION_FIX = "regression-fix"
    NOT_REGRESSION_FIX = "not-regression-fix"

    CHERRY_PICK = "cherry-pick"
    NOT_CHERRY_PICK = "not-cherry-pick"

    MIGRATION_ONPREM_LONG_RUNNING = "migration-onprem-long-running"
    MIGRATION_CLOUD_LONG_RUNNING = "migration-cloud-long-running"
    FAST_MIGRATION = "fast-migration"
    NO_MIGRATION = "no-migration"


@dataclass(frozen=True)
class LabelCategory:
    """
    A group of mutually exclusive labels.

    Labels are listed in priority order: when several checklist flags of the
    category are set, the first one wins. When none is set, ``default`` wins.
    """

    name: str
    labels: Tuple[Label, ...]
    default: Label

    @property
    def names(self) -> Tuple[str, ...]:
        return tuple(label.value for label in self.labels)

    def present(self, labels: Iterable[str]) -> Tuple[str, ...]:
        """Return the category labels found in ``labels``, in priority order."""
        label_set = set(labels)
        return tuple(name for name in self.names if name in label_set)

    def exclusivity_message(self) -> str:
        return f"Add only ONE of these labels to your PR: {','.join(self.names)}"


REGRESSION_FIX = LabelCategory(
    name="RegressionFix",
    labels=(Label.REGRESSION_FIX, Label.NOT_REGRESSION_FIX),
    default=Label.NOT_REGRESSION_FIX,
)

CHERRY_PICK = LabelCategory(
    name="CherryPick",
    labels=(Label.CHERRY_PICK, Label.NOT_CHERRY_PICK),
    default=Label.NOT_CHERRY_PICK,
)

MIGRATION = LabelCategory(
    name="Migration",
    labels=(
        Label.MIGRATION_ONPREM_LONG_RUNNING,
        Label.MIGRATION_CLOUD_LONG_RUNNING,
        Label.FAST_MIGRATION,
        Label.NO_MIGRATION,
    ),
    default=Label.NO_MIGRATION,
)

LABEL_CATEGORIES: Tuple[LabelCategory, ...] = (REGRESSION_FIX, CHERRY_PICK, MIGRATION)

POLICY_LABELS: FrozenSet[str] = frozenset(
    name for category in LABEL_CATEGORIES for name in category.names
)
