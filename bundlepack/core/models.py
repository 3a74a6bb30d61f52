"""Core data models for bundle statistics snapshots."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class SizeEntry:
    """Footprint of one entity in one snapshot."""

    size: int
    gzip_size: int | None = None

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"size": self.size}
        if self.gzip_size is not None:
            payload["gzip_size"] = self.gzip_size
        return payload


EMPTY_SIZE = SizeEntry(size=0)


@dataclass(frozen=True, slots=True)
class SizedEntity:
    """A named asset or module with its size in one build."""

    name: str
    size: int
    gzip_size: int | None = None

    @property
    def entry(self) -> SizeEntry:
        return SizeEntry(size=self.size, gzip_size=self.gzip_size)

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, **self.entry.to_dict()}


Snapshot = Sequence[SizedEntity]


@dataclass(frozen=True, slots=True)
class BundleStats:
    """Parsed statistics of one build: output assets plus optional chunk modules."""

    assets: tuple[SizedEntity, ...]
    modules: tuple[SizedEntity, ...] | None = None

    @property
    def has_modules(self) -> bool:
        return self.modules is not None

    def to_dict(self) -> dict[str, Any]:
        return {
            "assets": [asset.to_dict() for asset in self.assets],
            "modules": (
                [module.to_dict() for module in self.modules]
                if self.modules is not None
                else None
            ),
        }
