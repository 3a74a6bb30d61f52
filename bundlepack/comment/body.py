"""Pull request comment body for a bundle comparison."""

from __future__ import annotations

from bundlepack.diff.comparison import BundleComparison
from bundlepack.diff.formatting import (
    NO_CHANGED_FILES_NOTICE,
    render_asset_tables_by_group,
    render_changeset_table,
    render_total_table,
)

COMMENT_MARKER = "bundlekit-comment"

_INTRO = (
    "This comment compares the bundle stats of this pull request against its base "
    "branch, so that authors and reviewers can see how the changes affect bundle size.\n"
    "\n"
    "It is kept up to date as the pull request changes."
)


def identifier_comment(title: str = "") -> str:
    """Invisible marker used to find a previously posted comment."""
    key = f" key:{title}" if title else ""
    return f"<!--- {COMMENT_MARKER}{key} --->"


def _heading(title: str) -> str:
    return f"### Bundle Stats — {title}" if title else "### Bundle Stats"


def _changeset_section(comparison: BundleComparison) -> str:
    changeset = render_changeset_table(comparison.modules)
    if changeset == NO_CHANGED_FILES_NOTICE:
        return f"**Changeset**\n\n{changeset}"
    return changeset


def render_comment_body(comparison: BundleComparison, title: str = "") -> str:
    sections = [
        _heading(title),
        _INTRO,
        render_total_table(comparison.assets),
    ]
    changeset = _changeset_section(comparison)
    if changeset:
        sections.append(changeset)
    sections.append(
        "\n".join(
            [
                "<details>",
                "<summary>View detailed bundle breakdown</summary>",
                "",
                "<div>",
                "",
                render_asset_tables_by_group(comparison.assets),
                "",
                "</div>",
                "</details>",
            ]
        )
    )
    sections.append(identifier_comment(title))
    return "\n\n".join(sections) + "\n"
