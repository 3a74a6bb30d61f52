"""Diff subsystem for BundleKit."""

from bundlepack.diff.comparison import BundleComparison, compare_bundle_stats
from bundlepack.diff.engine import compute_diff_percentage, diff_snapshots
from bundlepack.diff.formatting import (
    NO_CHANGED_FILES_NOTICE,
    format_percent,
    format_size_diff_cell,
    render_asset_group_table,
    render_asset_tables_by_group,
    render_changeset_table,
    render_total_table,
)
from bundlepack.diff.models import EntityDiff, StatsDiff

__all__ = [
    "EntityDiff",
    "StatsDiff",
    "BundleComparison",
    "diff_snapshots",
    "compute_diff_percentage",
    "compare_bundle_stats",
    "NO_CHANGED_FILES_NOTICE",
    "format_percent",
    "format_size_diff_cell",
    "render_asset_group_table",
    "render_asset_tables_by_group",
    "render_changeset_table",
    "render_total_table",
]
