"""Markdown rendering for snapshot size diffs."""

from __future__ import annotations

import math
from collections.abc import Sequence

from bundlepack.core.sizes import format_size
from bundlepack.core.types import DIFF_CATEGORIES, DiffCategory
from bundlepack.diff.models import EntityDiff, StatsDiff

_LINE_BREAK = "<br />"

NO_CHANGED_FILES_NOTICE = "No files were changed"

EMOJI_NEW = "🆕"
EMOJI_REMOVED = "🔥"
EMOJI_UP = "📈"
EMOJI_DOWN = "📉"
EMOJI_NONE = " "


def make_table_header(columns: Sequence[str]) -> str:
    """Markdown header row plus a separator row with one dash per title character."""
    return "\n".join(
        [
            " | ".join(columns),
            " | ".join("-" * len(column) for column in columns),
        ]
    )


ASSET_TABLE_HEADER = make_table_header(("Asset", "Type", "File Size", "% Changed"))
TOTAL_TABLE_HEADER = make_table_header(
    ("Files count", "Type", "Total bundle size", "% Changed")
)
CHANGESET_TABLE_HEADER = make_table_header(("File", "Δ"))
DETAILED_CHANGESET_TABLE_HEADER = make_table_header(("File", "Old", "New", "Δ"))


def sign_for(number: float) -> str:
    if number == 0:
        return ""
    return "+" if number > 0 else "-"


def format_percent(number: float) -> str:
    """Render a diff percentage.

    Infinite values render as ``"-"``: new and removed entities are already
    labeled elsewhere.
    """
    if math.isinf(number):
        return "-"

    magnitude = abs(number)
    if magnitude in (0, 100):
        return f"{int(number)}%"

    return f"{sign_for(number)}{magnitude:.2f}%"


def _size_transition(old_size: int | None, new_size: int | None) -> str:
    diff = (new_size or 0) - (old_size or 0)
    return (
        f"{format_size(old_size)} -> {format_size(new_size)} "
        f"({sign_for(diff)}{format_size(diff)})"
    )


def format_size_diff_cell(entity: EntityDiff) -> str:
    lines: list[str] = []
    if entity.diff == 0:
        lines.append(format_size(entity.new.size))
        if entity.has_gzip:
            lines.append(format_size(entity.new.gzip_size))
    else:
        lines.append(_size_transition(entity.old.size, entity.new.size))
        if entity.has_gzip:
            lines.append(_size_transition(entity.old.gzip_size, entity.new.gzip_size))
    return _LINE_BREAK.join(lines)


def _asset_table_row(entity: EntityDiff) -> str:
    return " | ".join(
        [
            entity.name,
            "bundled, gzip" if entity.has_gzip else "bundled",
            format_size_diff_cell(entity),
            format_percent(entity.diff_percentage),
        ]
    )


def render_asset_group_table(category: DiffCategory, entities: Sequence[EntityDiff]) -> str:
    if not entities:
        return f"No assets were {category}"

    rows = [_asset_table_row(entity) for entity in entities]
    return "\n".join([ASSET_TABLE_HEADER, *rows])


def render_asset_tables_by_group(stats_diff: StatsDiff) -> str:
    sections = [
        f"**{category.capitalize()}**\n\n"
        f"{render_asset_group_table(category, stats_diff.category(category))}"
        for category in DIFF_CATEGORIES
    ]
    return "\n\n".join(sections)


def render_total_table(stats_diff: StatsDiff) -> str:
    return "\n".join(
        [
            "**Total**",
            "",
            TOTAL_TABLE_HEADER,
            _asset_table_row(stats_diff.total),
        ]
    )


def diff_emoji(entity: EntityDiff) -> str:
    percentage = entity.diff_percentage
    if percentage == math.inf:
        return EMOJI_NEW
    if percentage <= -100:
        return EMOJI_REMOVED
    if percentage > 0:
        return EMOJI_UP
    if percentage < 0:
        return EMOJI_DOWN
    return EMOJI_NONE


def trim_entity_name(name: str) -> str:
    if name.startswith("./"):
        return name[2:]
    if name.startswith("/"):
        return name[1:]
    return name


def _changeset_delta(entity: EntityDiff) -> str:
    sign = "+" if entity.diff >= 0 else "-"
    delta = f"{diff_emoji(entity)} {sign}{format_size(entity.diff)}"
    if math.isfinite(entity.diff_percentage):
        delta += f" ({format_percent(entity.diff_percentage)})"
    return delta


def _changeset_row(entity: EntityDiff) -> str:
    return " | ".join([f"`{trim_entity_name(entity.name)}`", _changeset_delta(entity)])


def _detailed_changeset_row(entity: EntityDiff) -> str:
    return " | ".join(
        [
            f"`{trim_entity_name(entity.name)}`",
            format_size(entity.old.size),
            format_size(entity.new.size),
            _changeset_delta(entity),
        ]
    )


def sort_changeset(stats_diff: StatsDiff) -> list[EntityDiff]:
    """Changed entities, largest percentage first; ties keep category order."""
    return sorted(stats_diff.changed, key=lambda entity: entity.diff_percentage, reverse=True)


def render_changeset_table(stats_diff: StatsDiff | None) -> str:
    """Collapsible changeset for fine-grained entities such as chunk modules.

    Returns an empty string when no module data is available at all.
    """
    if stats_diff is None:
        return ""

    changed = sort_changeset(stats_diff)
    if not changed:
        return NO_CHANGED_FILES_NOTICE

    summary_table = "\n".join(
        [CHANGESET_TABLE_HEADER, *(_changeset_row(entity) for entity in changed)]
    )
    detailed_table = "\n".join(
        [
            DETAILED_CHANGESET_TABLE_HEADER,
            *(_detailed_changeset_row(entity) for entity in changed),
        ]
    )

    return "\n".join(
        [
            "<details>",
            "<summary>**Changeset**</summary>",
            "",
            summary_table,
            "",
            "<details>",
            "<summary>View individual file sizes</summary>",
            "",
            detailed_table,
            "",
            "</details>",
            "",
            "</details>",
        ]
    )
