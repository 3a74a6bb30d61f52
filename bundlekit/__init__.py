"""Stable public API surface for BundleKit.

This module is the supported import path for library users.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from bundlepack.comment import identifier_comment, render_comment_body
from bundlepack.core.models import BundleStats
from bundlepack.diff import BundleComparison, StatsDiff, compare_bundle_stats
from bundlepack.github import (
    DEFAULT_API_URL,
    CommentSyncResult,
    GitHubClient,
    load_pull_request_context,
    sync_pull_request_comment,
)
from bundlepack.stats import read_stats_file

__version__ = "0.1.0"

StatsSource = str | Path | BundleStats


def _resolve_stats(source: StatsSource) -> BundleStats:
    if isinstance(source, BundleStats):
        return source
    return read_stats_file(source)


def load_stats(path: str | Path) -> BundleStats:
    """Read a bundler stats JSON file into asset and module snapshots."""
    return read_stats_file(path)


def compare(base: StatsSource, current: StatsSource) -> BundleComparison:
    """Compare base and current builds given as stats paths or parsed stats."""
    return compare_bundle_stats(_resolve_stats(base), _resolve_stats(current))


def render_comment(comparison: BundleComparison, title: str = "") -> str:
    """Render the markdown pull request comment for a comparison."""
    return render_comment_body(comparison, title)


def publish_comment(
    base: StatsSource,
    current: StatsSource,
    *,
    token: str,
    repository: str,
    event_name: str,
    event_path: str | Path,
    title: str = "",
    api_url: str = DEFAULT_API_URL,
    session: Any | None = None,
) -> CommentSyncResult:
    """Compare two builds and create or update the pull request comment."""
    context = load_pull_request_context(
        event_name=event_name,
        event_path=event_path,
        repository=repository,
    )
    body = render_comment(compare(base, current), title)
    client = GitHubClient(token, api_url=api_url, session=session)
    return sync_pull_request_comment(
        client,
        context,
        body=body,
        identifier=identifier_comment(title),
    )


__all__ = [
    "__version__",
    "BundleStats",
    "BundleComparison",
    "StatsDiff",
    "CommentSyncResult",
    "load_stats",
    "compare",
    "render_comment",
    "publish_comment",
]
