"""GitHub subsystem exceptions."""

from __future__ import annotations


class GitHubError(Exception):
    """Base class for GitHub integration errors."""


class GitHubContextError(GitHubError):
    """Workflow context is missing or not a pull request event."""


class GitHubAPIError(GitHubError):
    """GitHub REST API request failed."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
