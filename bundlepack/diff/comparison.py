"""Whole-build comparison: asset diff plus optional chunk-module diff."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from bundlepack.core.models import BundleStats
from bundlepack.diff.engine import diff_snapshots
from bundlepack.diff.models import StatsDiff


@dataclass(frozen=True, slots=True)
class BundleComparison:
    """Structured comparison of two builds."""

    assets: StatsDiff
    modules: StatsDiff | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "assets": self.assets.to_dict(),
            "modules": self.modules.to_dict() if self.modules is not None else None,
        }


def compare_bundle_stats(base: BundleStats, current: BundleStats) -> BundleComparison:
    """Diff assets, and chunk modules when both builds carry module data."""
    modules: StatsDiff | None = None
    if base.modules is not None and current.modules is not None:
        modules = diff_snapshots(base.modules, current.modules)

    return BundleComparison(
        assets=diff_snapshots(base.assets, current.assets),
        modules=modules,
    )
