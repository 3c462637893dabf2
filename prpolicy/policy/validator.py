"""
PR Metadata Validator

Checks PR labels and the PR description against the metadata policy and
returns the remediations a human needs to apply. The checklist comment is
never consulted; only labels and the raw PR body.
"""

import logging
import re
from dataclasses import dataclass
from typing import Dict, FrozenSet, Iterable, List, Optional

from prpolicy.config import Settings, get_settings
from prpolicy.models.labels import Label, CHERRY_PICK, REGRESSION_FIX

logger = logging.getLogger(__name__)

CHERRY_PICK_ENVIRONMENTS = ("admin", "staging", "production")
CHERRY_PICK_SOURCES = ("user report", "automated test", "observability")

CHERRY_PICK_BODY_MESSAGE = (
    "Since your PR is a cherry-pick, please add the following line to your PR and "
    "choose the appropriate environment and source: <pre>This is a fix for an issue "
    f"found on: [{'/'.join(CHERRY_PICK_ENVIRONMENTS)}], "
    f"via: [{'/'.join(CHERRY_PICK_SOURCES)}]</pre>"
)
REGRESSION_FIX_BODY_MESSAGE = (
    "Since your PR is a regression-fix, please add the following line to your PR: "
    "<pre>This fixes a regression introduced by [insert link to PR here]</pre>"
)


@dataclass(frozen=True)
class LineMatcher:
    """
    A named-field pattern matched against whole lines of free text.

    ``match`` returns the named groups of the first matching line, or None.
    """

    name: str
    pattern: re.Pattern

    @classmethod
    def compile(cls, name: str, pattern: str) -> "LineMatcher":
        return cls(name=name, pattern=re.compile(pattern, re.MULTILINE))

    def match(self, text: Optional[str]) -> Optional[Dict[str, str]]:
        found = self.pattern.search(text or "")
        return found.groupdict() if found else None


CHERRY_PICK_LINE = LineMatcher.compile(
    "cherry_pick",
    r"^This is a fix for an issue found on: (?P<env>.*), via: (?P<source>.*)",
)


def regression_fix_line(pr_url_pattern: str) -> LineMatcher:
    return LineMatcher.compile(
        "regression_fix",
        rf"^This fixes a regression introduced by (?P<pr_link>{pr_url_pattern})$",
    )


def check_cherry_pick_body(body: str) -> bool:
    captured = CHERRY_PICK_LINE.match(body)
    if captured is None:
        return False
    return (
        captured["env"] in CHERRY_PICK_ENVIRONMENTS
        and captured["source"] in CHERRY_PICK_SOURCES
    )


def check_regression_fix_body(body: str, pr_url_pattern: str) -> bool:
    captured = regression_fix_line(pr_url_pattern).match(body)
    return bool(captured and captured.get("pr_link"))


def validate(
    labels: Iterable[str],
    body: Optional[str],
    settings: Optional[Settings] = None,
) -> List[str]:
    """
    Validate PR labels and description.

    Checks are independent and cumulative. Body contracts are only checked
    when their category has exactly one label and it is the positive one.

    Args:
        labels: Label names on the PR
        body: PR description (None is treated as empty)
        settings: Settings providing the pull-request URL pattern

    Returns:
        Remediation messages, empty when the PR is compliant
    """
    settings = settings or get_settings()
    label_set: FrozenSet[str] = frozenset(labels)
    # GitHub stores descriptions edited in the web UI with CRLF line endings
    body = (body or "").replace("\r\n", "\n")
    remediations: List[str] = []

    if len(CHERRY_PICK.present(label_set)) != 1:
        remediations.append(CHERRY_PICK.exclusivity_message())
    elif Label.CHERRY_PICK.value in label_set and not check_cherry_pick_body(body):
        remediations.append(CHERRY_PICK_BODY_MESSAGE)

    if len(REGRESSION_FIX.present(label_set)) != 1:
        remediations.append(REGRESSION_FIX.exclusivity_message())
    elif Label.REGRESSION_FIX.value in label_set and not check_regression_fix_body(
        body, settings.pull_request_url_pattern
    ):
        remediations.append(REGRESSION_FIX_BODY_MESSAGE)

    logger.info(f"Validation found {len(remediations)} remediation(s)")
    return remediations
