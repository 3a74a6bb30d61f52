"""Data models for snapshot size diffs."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from bundlepack.core.models import SizeEntry
from bundlepack.core.types import DIFF_CATEGORIES, DiffCategory


def _percentage_to_json(value: float) -> float | str:
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    return value


@dataclass(frozen=True, slots=True)
class EntityDiff:
    """Size comparison of one named entity between base and current."""

    name: str
    status: DiffCategory
    old: SizeEntry
    new: SizeEntry
    diff: int
    diff_percentage: float

    @property
    def has_gzip(self) -> bool:
        return self.old.gzip_size is not None or self.new.gzip_size is not None

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "status": self.status,
            "old": self.old.to_dict(),
            "new": self.new.to_dict(),
            "diff": self.diff,
            "diff_percentage": _percentage_to_json(self.diff_percentage),
        }


@dataclass(frozen=True, slots=True)
class StatsDiff:
    """Entity diffs partitioned by category, plus the aggregate total."""

    total: EntityDiff
    added: tuple[EntityDiff, ...] = ()
    removed: tuple[EntityDiff, ...] = ()
    bigger: tuple[EntityDiff, ...] = ()
    smaller: tuple[EntityDiff, ...] = ()
    unchanged: tuple[EntityDiff, ...] = ()

    def category(self, name: DiffCategory) -> tuple[EntityDiff, ...]:
        if name not in DIFF_CATEGORIES:
            raise ValueError(f"Unsupported diff category: {name}")
        return getattr(self, name)

    @property
    def changed(self) -> tuple[EntityDiff, ...]:
        """Every entity except unchanged ones, in category order."""
        return self.added + self.removed + self.bigger + self.smaller

    def summary(self) -> dict[str, int]:
        return {name: len(self.category(name)) for name in DIFF_CATEGORIES}

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "total": self.total.to_dict(),
            "summary": self.summary(),
        }
        for name in DIFF_CATEGORIES:
            payload[name] = [entity.to_dict() for entity in self.category(name)]
        return payload
