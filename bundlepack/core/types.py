"""Type definitions for BundleKit core models."""

from typing import Literal

DiffCategory = Literal[
    "added",
    "removed",
    "bigger",
    "smaller",
    "unchanged",
]

DIFF_CATEGORIES: tuple[str, ...] = (
    "added",
    "removed",
    "bigger",
    "smaller",
    "unchanged",
)

CHANGESET_CATEGORIES: tuple[str, ...] = (
    "added",
    "removed",
    "bigger",
    "smaller",
)
