"""Read bundler stats files into snapshots."""

from __future__ import annotations

import json
from collections import deque
from pathlib import Path
from typing import Any

from bundlepack.core.models import BundleStats, SizedEntity
from bundlepack.stats.exceptions import StatsFileError, StatsValidationError
from bundlepack.stats.schema import validate_stats


def read_stats_file(path: str | Path) -> BundleStats:
    """Read and parse a stats JSON file."""
    target = Path(path)
    try:
        raw_text = target.read_text(encoding="utf-8")
    except FileNotFoundError as error:
        raise StatsFileError(f"Stats file not found: {target}") from error
    except UnicodeDecodeError as error:
        raise StatsFileError(f"Stats file is not valid UTF-8 text: {target}") from error
    except OSError as error:
        raise StatsFileError(f"Stats file is not readable: {target} ({error})") from error

    try:
        payload = json.loads(raw_text)
    except json.JSONDecodeError as error:
        raise StatsFileError(f"Stats file is not valid JSON: {target} ({error})") from error

    return parse_stats(payload)


def parse_stats(payload: Any) -> BundleStats:
    """Build snapshots from a webpack-style stats object.

    Assets must have unique names. Modules are collected from every chunk,
    flattening concatenated modules into their children; a module listed by
    several chunks is kept once. Without ``chunks``, a top-level ``modules``
    list is used, and without either the build has no module data.
    """
    validate_stats(payload)

    assets = tuple(_to_entity(raw, with_gzip=True) for raw in payload["assets"])
    _check_unique_names(assets, path="assets")

    modules: tuple[SizedEntity, ...] | None = None
    if "chunks" in payload:
        raw_modules: list[dict[str, Any]] = []
        for chunk in payload["chunks"]:
            raw_modules.extend(chunk.get("modules") or [])
        modules = _collect_modules(raw_modules)
    elif "modules" in payload:
        modules = _collect_modules(payload["modules"])

    return BundleStats(assets=assets, modules=modules)


def _to_entity(raw: dict[str, Any], *, with_gzip: bool = False) -> SizedEntity:
    gzip_size = raw.get("gzipSize") if with_gzip else None
    return SizedEntity(
        name=raw["name"],
        size=int(raw["size"]),
        gzip_size=int(gzip_size) if gzip_size is not None else None,
    )


def _collect_modules(raw_modules: list[dict[str, Any]]) -> tuple[SizedEntity, ...]:
    collected: dict[str, SizedEntity] = {}
    pending = deque(raw_modules)
    while pending:
        raw = pending.popleft()
        children = raw.get("modules")
        if children:
            pending.extendleft(reversed(children))
            continue
        if raw["name"] not in collected:
            collected[raw["name"]] = _to_entity(raw)
    return tuple(collected.values())


def _check_unique_names(entities: tuple[SizedEntity, ...], *, path: str) -> None:
    seen: set[str] = set()
    for index, entity in enumerate(entities):
        if entity.name in seen:
            raise StatsValidationError(
                f"Invalid stats at {path}.{index}: duplicate name '{entity.name}'"
            )
        seen.add(entity.name)
