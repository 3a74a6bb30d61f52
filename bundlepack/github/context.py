"""Pull request context resolved from GitHub Actions workflow metadata."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from bundlepack.github.exceptions import GitHubContextError

SUPPORTED_EVENTS: tuple[str, ...] = ("pull_request", "pull_request_target")


@dataclass(frozen=True, slots=True)
class PullRequestContext:
    owner: str
    repo: str
    number: int

    def to_dict(self) -> dict[str, Any]:
        return {"owner": self.owner, "repo": self.repo, "number": self.number}


def parse_repository(repository: str) -> tuple[str, str]:
    owner, sep, repo = repository.strip().partition("/")
    if not sep or not owner or not repo or "/" in repo:
        raise GitHubContextError(
            f"repository must be in 'owner/name' form (found {repository!r})"
        )
    return owner, repo


def load_pull_request_context(
    *,
    event_name: str | None,
    event_path: str | Path | None,
    repository: str | None,
) -> PullRequestContext:
    """Resolve owner, repo and pull request number for the running workflow."""
    if event_name not in SUPPORTED_EVENTS:
        raise GitHubContextError(
            "This action only supports pull_request and pull_request_target events "
            f"(found {event_name!r})"
        )
    if not repository:
        raise GitHubContextError("repository is required (set GITHUB_REPOSITORY)")
    if not event_path:
        raise GitHubContextError("event payload path is required (set GITHUB_EVENT_PATH)")

    owner, repo = parse_repository(repository)
    payload = _read_event_payload(Path(event_path))
    return PullRequestContext(owner=owner, repo=repo, number=_pull_request_number(payload))


def _read_event_payload(path: Path) -> dict[str, Any]:
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as error:
        raise GitHubContextError(f"event payload not found: {path}") from error
    except (OSError, UnicodeDecodeError) as error:
        raise GitHubContextError(f"event payload is not readable: {path} ({error})") from error
    except json.JSONDecodeError as error:
        raise GitHubContextError(f"event payload is not valid JSON: {path} ({error})") from error
    if not isinstance(payload, dict):
        raise GitHubContextError(f"event payload must be an object: {path}")
    return payload


def _pull_request_number(payload: dict[str, Any]) -> int:
    pull_request = payload.get("pull_request")
    number = pull_request.get("number") if isinstance(pull_request, dict) else None
    if number is None:
        number = payload.get("number")
    if isinstance(number, bool) or not isinstance(number, int):
        raise GitHubContextError("event payload does not carry a pull request number")
    return number
