"""Create, update or de-duplicate the bundle stats comment on a pull request."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal

from bundlepack.github.client import GitHubClient
from bundlepack.github.context import PullRequestContext

DEFAULT_BOT_LOGIN = "github-actions[bot]"

CommentSyncAction = Literal["created", "updated"]


@dataclass(frozen=True, slots=True)
class CommentSyncResult:
    action: CommentSyncAction
    comment_id: int
    deleted_comment_ids: tuple[int, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        return {
            "action": self.action,
            "comment_id": self.comment_id,
            "deleted_comment_ids": list(self.deleted_comment_ids),
        }


def sync_pull_request_comment(
    client: GitHubClient,
    context: PullRequestContext,
    *,
    body: str,
    identifier: str,
    bot_login: str = DEFAULT_BOT_LOGIN,
) -> CommentSyncResult:
    """Update the first previously posted comment, delete duplicates, or create one."""
    matching = [
        comment
        for comment in client.list_issue_comments(context)
        if comment.user_login == bot_login and identifier in comment.body
    ]

    if not matching:
        created = client.create_issue_comment(context, body)
        return CommentSyncResult(action="created", comment_id=created.id)

    current, *stale = matching
    for comment in stale:
        client.delete_issue_comment(context, comment.id)
    client.update_issue_comment(context, current.id, body)
    return CommentSyncResult(
        action="updated",
        comment_id=current.id,
        deleted_comment_ids=tuple(comment.id for comment in stale),
    )
