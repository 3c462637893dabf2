"""
GitHub API Client

Responsibilities:
- Listing PR conversation comments
- Creating, editing and deleting comments
- Adding and removing PR labels

PyGithub is synchronous, so every call runs in a worker thread to let a
pass dispatch independent writes concurrently.
"""

import asyncio
import logging
from typing import Dict, List, Optional, Sequence

from github import Github
from github.Issue import Issue
from github.GithubException import GithubException, UnknownObjectException

from prpolicy.config import get_settings
from prpolicy.models.event import PRRef, IssueComment

logger = logging.getLogger(__name__)


class GitHubIssueStore:
    """Issue store backed by the GitHub REST API."""

    def __init__(self, client: Optional[Github] = None):
        settings = get_settings()
        self.client = client or Github(settings.github_token)
        self._issues: Dict[PRRef, Issue] = {}

    def _get_issue(self, pr: PRRef) -> Issue:
        issue = self._issues.get(pr)
        if issue is None:
            repo = self.client.get_repo(pr.full_name)
            issue = repo.get_issue(pr.number)
            self._issues[pr] = issue
        return issue

    @staticmethod
    def _to_comment(comment) -> IssueComment:
        return IssueComment(
            id=comment.id,
            author=comment.user.login if comment.user else None,
            body=comment.body or "",
        )

    async def list_comments(self, pr: PRRef) -> List[IssueComment]:
        """List all comments on the PR conversation, oldest first."""
        try:

            def _list() -> List[IssueComment]:
                issue = self._get_issue(pr)
                return [self._to_comment(c) for c in issue.get_comments()]

            comments = await asyncio.to_thread(_list)
            logger.debug(f"Fetched {len(comments)} comments for {pr}")
            return comments

        except GithubException as e:
            logger.error(f"GitHub API error listing comments for {pr}: {e}")
            raise

    async def create_comment(self, pr: PRRef, body: str) -> IssueComment:
        try:
            comment = await asyncio.to_thread(
                lambda: self._get_issue(pr).create_comment(body)
            )
            logger.info(f"Created comment {comment.id} on {pr}")
            return self._to_comment(comment)

        except GithubException as e:
            logger.error(f"Failed to create comment on {pr}: {e}")
            raise

    async def update_comment(self, pr: PRRef, comment_id: int, body: str) -> None:
        try:

            def _edit() -> None:
                self._get_issue(pr).get_comment(comment_id).edit(body)

            await asyncio.to_thread(_edit)
            logger.info(f"Updated comment {comment_id} on {pr}")

        except GithubException as e:
            logger.error(f"Failed to update comment {comment_id} on {pr}: {e}")
            raise

    async def delete_comment(self, pr: PRRef, comment_id: int) -> None:
        try:

            def _delete() -> None:
                self._get_issue(pr).get_comment(comment_id).delete()

            await asyncio.to_thread(_delete)
            logger.info(f"Deleted comment {comment_id} on {pr}")

        except UnknownObjectException:
            logger.info(f"Comment {comment_id} on {pr} already deleted")
        except GithubException as e:
            logger.error(f"Failed to delete comment {comment_id} on {pr}: {e}")
            raise

    async def add_labels(self, pr: PRRef, names: Sequence[str]) -> None:
        if not names:
            return
        try:
            await asyncio.to_thread(
                lambda: self._get_issue(pr).add_to_labels(*names)
            )
            logger.info(f"Added labels {', '.join(names)} to {pr}")

        except GithubException as e:
            logger.error(f"Failed to add labels {names} to {pr}: {e}")
            raise

    async def remove_label(self, pr: PRRef, name: str) -> None:
        try:
            await asyncio.to_thread(
                lambda: self._get_issue(pr).remove_from_labels(name)
            )
            logger.info(f"Removed label {name} from {pr}")

        except UnknownObjectException:
            # Label was not on the PR
            logger.info(f"Label {name} not present on {pr}, nothing to remove")
        except GithubException as e:
            logger.error(f"Failed to remove label {name} from {pr}: {e}")
            raise
