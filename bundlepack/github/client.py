"""Minimal GitHub REST client for issue comments."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import requests

from bundlepack.github.context import PullRequestContext
from bundlepack.github.exceptions import GitHubAPIError

DEFAULT_API_URL = "https://api.github.com"


@dataclass(frozen=True, slots=True)
class IssueComment:
    id: int
    body: str
    user_login: str | None

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "IssueComment":
        user = raw.get("user") or {}
        return cls(
            id=int(raw["id"]),
            body=raw.get("body") or "",
            user_login=user.get("login"),
        )


class GitHubClient:
    """Issue comment operations over the GitHub REST API."""

    def __init__(
        self,
        token: str,
        *,
        api_url: str = DEFAULT_API_URL,
        session: Any | None = None,
        timeout_seconds: float = 10.0,
    ) -> None:
        self._token = token
        self._api_url = api_url.rstrip("/")
        self._session = session if session is not None else requests.Session()
        self._timeout_seconds = timeout_seconds

    def list_issue_comments(self, context: PullRequestContext) -> list[IssueComment]:
        url: str | None = self._issue_url(context, "comments")
        params: dict[str, Any] | None = {"per_page": 100}
        comments: list[IssueComment] = []
        while url is not None:
            response = self._request("GET", url, params=params)
            comments.extend(IssueComment.from_dict(raw) for raw in response.json())
            url = (getattr(response, "links", None) or {}).get("next", {}).get("url")
            params = None
        return comments

    def create_issue_comment(self, context: PullRequestContext, body: str) -> IssueComment:
        response = self._request("POST", self._issue_url(context, "comments"), json={"body": body})
        return IssueComment.from_dict(response.json())

    def update_issue_comment(
        self,
        context: PullRequestContext,
        comment_id: int,
        body: str,
    ) -> IssueComment:
        response = self._request(
            "PATCH",
            self._comment_url(context, comment_id),
            json={"body": body},
        )
        return IssueComment.from_dict(response.json())

    def delete_issue_comment(self, context: PullRequestContext, comment_id: int) -> None:
        self._request("DELETE", self._comment_url(context, comment_id))

    def _issue_url(self, context: PullRequestContext, suffix: str) -> str:
        return (
            f"{self._api_url}/repos/{context.owner}/{context.repo}"
            f"/issues/{context.number}/{suffix}"
        )

    def _comment_url(self, context: PullRequestContext, comment_id: int) -> str:
        return f"{self._api_url}/repos/{context.owner}/{context.repo}/issues/comments/{comment_id}"

    def _request(
        self,
        method: str,
        url: str,
        *,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
    ) -> Any:
        headers = {
            "Accept": "application/vnd.github+json",
            "Authorization": f"Bearer {self._token}",
            "X-GitHub-Api-Version": "2022-11-28",
        }
        try:
            response = self._session.request(
                method,
                url,
                headers=headers,
                params=params,
                json=json,
                timeout=self._timeout_seconds,
            )
        except requests.RequestException as error:
            raise GitHubAPIError(f"{method} {url} failed: {error}") from error

        if response.status_code >= 400:
            raise GitHubAPIError(
                f"{method} {url} returned {response.status_code}: {_error_message(response)}",
                status_code=response.status_code,
            )
        return response


def _error_message(response: Any) -> str:
    try:
        payload = response.json()
    except ValueError:
        return (response.text or "").strip() or "<empty body>"
    if isinstance(payload, dict) and payload.get("message"):
        return str(payload["message"])
    return "<no message>"
