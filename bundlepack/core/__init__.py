"""Core models and shared primitives for BundleKit."""

from bundlepack.core.models import EMPTY_SIZE, BundleStats, SizedEntity, SizeEntry, Snapshot
from bundlepack.core.sizes import format_size
from bundlepack.core.types import CHANGESET_CATEGORIES, DIFF_CATEGORIES, DiffCategory

__all__ = [
    "BundleStats",
    "SizedEntity",
    "SizeEntry",
    "Snapshot",
    "EMPTY_SIZE",
    "DiffCategory",
    "DIFF_CATEGORIES",
    "CHANGESET_CATEGORIES",
    "format_size",
]
