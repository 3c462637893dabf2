"""
PR Checklist Renderer/Parser

Maps a PR label set to the checklist comment body and back.

Both directions are driven by the same section table, so a checkbox that
is rendered is always one that can be parsed.
"""

import re
from dataclasses import dataclass
from typing import Dict, Iterable, List, Tuple

from prpolicy.models.labels import Label, LABEL_CATEGORIES

CHECKLIST_MARKER = "## PR Checklist"


@dataclass(frozen=True)
class ChecklistItem:
    """One checkbox line bound to a label."""

    label: Label
    text: str

    def render(self, labels: Iterable[str]) -> str:
        mark = "x" if self.label.value in labels else " "
        return f"- [{mark}] {self.text}"

    @property
    def pattern(self) -> re.Pattern:
        return re.compile(rf"^- \[[xX]\] {re.escape(self.text)}\s*$", re.MULTILINE)


@dataclass(frozen=True)
class ChecklistSection:
    heading: str
    items: Tuple[ChecklistItem, ...]


CHECKLIST_SECTIONS: Tuple[ChecklistSection, ...] = (
    ChecklistSection(
        heading="### Regression Fix (required)",
        items=(
            ChecklistItem(Label.REGRESSION_FIX, "This fixes a regression"),
            ChecklistItem(Label.NOT_REGRESSION_FIX, "This is not a regression fix"),
        ),
    ),
    ChecklistSection(
        heading="### Cherry-pick (only required for cp PRs)",
        items=(ChecklistItem(Label.CHERRY_PICK, "This is a cherry pick"),),
    ),
    ChecklistSection(
        heading="### Migrations (required)",
        items=(
            ChecklistItem(
                Label.MIGRATION_ONPREM_LONG_RUNNING,
                "Long running migration expected for On-prem",
            ),
            ChecklistItem(
                Label.MIGRATION_CLOUD_LONG_RUNNING,
                "Long running migration expected for Cloud",
            ),
            ChecklistItem(Label.FAST_MIGRATION, "Migration will complete quickly"),
            ChecklistItem(Label.NO_MIGRATION, "No Migration Involved"),
        ),
    ),
)

CHECKLIST_ITEMS: Tuple[ChecklistItem, ...] = tuple(
    item for section in CHECKLIST_SECTIONS for item in section.items
)


def render_checklist(labels: Iterable[str]) -> str:
    """
    Render the checklist comment body for a label set.

    Args:
        labels: Label names currently on the PR

    Returns:
        Comment body starting with the checklist marker
    """
    label_set = frozenset(labels)
    sections: List[str] = []
    for section in CHECKLIST_SECTIONS:
        lines = [section.heading] + [item.render(label_set) for item in section.items]
        sections.append("\n".join(lines))

    return f"{CHECKLIST_MARKER}\n\n" + "\n\n".join(sections)


def parse_checklist(body: str) -> Dict[str, bool]:
    """
    Read which checklist boxes are ticked.

    Unknown or malformed text is not an error; a box whose line is missing
    counts as unticked.

    Args:
        body: Checklist comment body (may be empty)

    Returns:
        Mapping of checklist label name to ticked flag
    """
    body = body or ""
    return {item.label.value: bool(item.pattern.search(body)) for item in CHECKLIST_ITEMS}


def desired_labels(flags: Dict[str, bool]) -> Dict[str, bool]:
    """
    Pick exactly one label per category from checklist flags.

    The first ticked label in category order wins. When nothing in a category
    is ticked, the category default is chosen.

    Returns:
        Every category label mapped to whether it should be on the PR
    """
    result: Dict[str, bool] = {}
    for category in LABEL_CATEGORIES:
        winner = next(
            (name for name in category.names if flags.get(name)),
            category.default.value,
        )
        for name in category.names:
            result[name] = name == winner
    return result
