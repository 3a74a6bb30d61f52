"""GitHub pull request comment integration for BundleKit."""

from bundlepack.github.client import DEFAULT_API_URL, GitHubClient, IssueComment
from bundlepack.github.context import (
    SUPPORTED_EVENTS,
    PullRequestContext,
    load_pull_request_context,
    parse_repository,
)
from bundlepack.github.exceptions import GitHubAPIError, GitHubContextError, GitHubError
from bundlepack.github.sync import (
    DEFAULT_BOT_LOGIN,
    CommentSyncResult,
    sync_pull_request_comment,
)

__all__ = [
    "DEFAULT_API_URL",
    "DEFAULT_BOT_LOGIN",
    "SUPPORTED_EVENTS",
    "GitHubClient",
    "IssueComment",
    "PullRequestContext",
    "CommentSyncResult",
    "GitHubError",
    "GitHubAPIError",
    "GitHubContextError",
    "load_pull_request_context",
    "parse_repository",
    "sync_pull_request_comment",
]
