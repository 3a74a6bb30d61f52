"""Snapshot diff engine: match entities by name and classify size changes."""

from __future__ import annotations

import math

from bundlepack.core.models import EMPTY_SIZE, SizedEntity, SizeEntry, Snapshot
from bundlepack.core.types import DiffCategory
from bundlepack.diff.models import EntityDiff, StatsDiff


def diff_snapshots(base: Snapshot, current: Snapshot) -> StatsDiff:
    """Diff two snapshots in O(n) entity count.

    Entities are matched by name. Within each category, entities keep the
    order of the union traversal: base order first, then names that only
    exist in current, in current order.
    """
    base_by_name = {entity.name: entity for entity in base}
    current_by_name = {entity.name: entity for entity in current}

    names = list(base_by_name)
    names.extend(name for name in current_by_name if name not in base_by_name)

    buckets: dict[DiffCategory, list[EntityDiff]] = {
        "added": [],
        "removed": [],
        "bigger": [],
        "smaller": [],
        "unchanged": [],
    }
    for name in names:
        entity_diff = _diff_entity(
            name,
            base_by_name.get(name),
            current_by_name.get(name),
        )
        buckets[entity_diff.status].append(entity_diff)

    return StatsDiff(
        total=_diff_total(base, current),
        added=tuple(buckets["added"]),
        removed=tuple(buckets["removed"]),
        bigger=tuple(buckets["bigger"]),
        smaller=tuple(buckets["smaller"]),
        unchanged=tuple(buckets["unchanged"]),
    )


def compute_diff_percentage(old_size: int, new_size: int) -> float:
    """Percent change from ``old_size`` to ``new_size``.

    ``0 -> 0`` is ``0`` and growth from ``0`` is ``inf``.
    """
    if old_size == 0:
        return 0.0 if new_size == 0 else math.inf
    return (new_size - old_size) / old_size * 100


def _diff_entity(
    name: str,
    base_entity: SizedEntity | None,
    current_entity: SizedEntity | None,
) -> EntityDiff:
    if base_entity is None and current_entity is not None:
        return EntityDiff(
            name=name,
            status="added",
            old=EMPTY_SIZE,
            new=current_entity.entry,
            diff=current_entity.size,
            diff_percentage=math.inf,
        )

    if current_entity is None and base_entity is not None:
        return EntityDiff(
            name=name,
            status="removed",
            old=base_entity.entry,
            new=EMPTY_SIZE,
            diff=-base_entity.size,
            diff_percentage=-math.inf,
        )

    if base_entity is None or current_entity is None:
        raise ValueError(f"inconsistent diff state for entity '{name}'")

    return _diff_present(name, base_entity.entry, current_entity.entry)


def _diff_present(name: str, old: SizeEntry, new: SizeEntry) -> EntityDiff:
    diff = new.size - old.size
    status: DiffCategory
    if diff > 0:
        status = "bigger"
    elif diff < 0:
        status = "smaller"
    else:
        status = "unchanged"

    return EntityDiff(
        name=name,
        status=status,
        old=old,
        new=new,
        diff=diff,
        diff_percentage=compute_diff_percentage(old.size, new.size),
    )


def _diff_total(base: Snapshot, current: Snapshot) -> EntityDiff:
    if len(base) == len(current):
        files_count = f"{len(current)}"
    else:
        files_count = f"{len(base)} → {len(current)}"
    return _diff_present(files_count, _sum_sizes(base), _sum_sizes(current))


def _sum_sizes(snapshot: Snapshot) -> SizeEntry:
    gzip_sizes = [entity.gzip_size for entity in snapshot if entity.gzip_size is not None]
    return SizeEntry(
        size=sum(entity.size for entity in snapshot),
        gzip_size=sum(gzip_sizes) if gzip_sizes else None,
    )
