from __future__ import annotations

from dataclasses import dataclass, field
import json
from typing import Any

import pytest
import requests


@dataclass
class FakeResponse:
    status_code: int = 200
    payload: Any = None
    links: dict[str, dict[str, str]] = field(default_factory=dict)

    @property
    def text(self) -> str:
        return "" if self.payload is None else json.dumps(self.payload)

    def json(self) -> Any:
        if self.payload is None:
            raise ValueError("no JSON body")
        return self.payload


@dataclass
class FakeGitHubSession:
    """In-memory stand-in for the issue comments REST API."""

    comments: list[dict[str, Any]] = field(default_factory=list)
    page_size: int = 100
    fail_with: int | None = None
    raise_connection_error: bool = False
    calls: list[tuple[str, str, dict[str, Any] | None]] = field(default_factory=list)
    headers_seen: list[dict[str, str]] = field(default_factory=list)
    _next_id: int = 1000

    def request(
        self,
        method: str,
        url: str,
        *,
        headers: dict[str, str],
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
        timeout: float | None = None,
    ) -> FakeResponse:
        self.calls.append((method, url, json))
        self.headers_seen.append(headers)
        if self.raise_connection_error:
            raise requests.ConnectionError("connection refused")
        if self.fail_with is not None:
            return FakeResponse(status_code=self.fail_with, payload={"message": "Bad credentials"})

        if method == "GET":
            return self._list(url)
        if method == "POST":
            self._next_id += 1
            comment = {
                "id": self._next_id,
                "body": json["body"],
                "user": {"login": "github-actions[bot]"},
            }
            self.comments.append(comment)
            return FakeResponse(status_code=201, payload=comment)

        comment_id = int(url.rsplit("/", 1)[1])
        comment = next(item for item in self.comments if item["id"] == comment_id)
        if method == "PATCH":
            comment["body"] = json["body"]
            return FakeResponse(payload=comment)
        if method == "DELETE":
            self.comments.remove(comment)
            return FakeResponse(status_code=204)
        raise AssertionError(f"unexpected method {method}")

    def _list(self, url: str) -> FakeResponse:
        base, _, page_token = url.partition("?page=")
        page = int(page_token) if page_token else 1
        start = (page - 1) * self.page_size
        chunk = self.comments[start : start + self.page_size]
        links: dict[str, dict[str, str]] = {}
        if start + self.page_size < len(self.comments):
            links["next"] = {"url": f"{base}?page={page + 1}"}
        return FakeResponse(payload=[dict(item) for item in chunk], links=links)


@pytest.fixture
def github_session() -> FakeGitHubSession:
    return FakeGitHubSession()
