"""
Issue Store Protocol

The comment and label operations the policy passes need from the hosting
platform. Writes are expected to be idempotent.
"""

from typing import List, Protocol, Sequence

from prpolicy.models.event import PRRef, IssueComment


class IssueStore(Protocol):
    """Remote store of PR comments and labels."""

    async def list_comments(self, pr: PRRef) -> List[IssueComment]:
        ...

    async def create_comment(self, pr: PRRef, body: str) -> IssueComment:
        ...

    async def update_comment(self, pr: PRRef, comment_id: int, body: str) -> None:
        ...

    async def delete_comment(self, pr: PRRef, comment_id: int) -> None:
        ...

    async def add_labels(self, pr: PRRef, names: Sequence[str]) -> None:
        ...

    async def remove_label(self, pr: PRRef, name: str) -> None:
        ...
