"""Slim mode: reduce each model family to its most relevant variants.

This is best-effort curation to keep the distributed data small, not a
complete catalog. Per family at most two models survive: one "latest"
entry and one pinned entry, preferring recent releases and higher tiers.
"""

from __future__ import annotations

from functools import cmp_to_key

from model_catalog.model.types import Model, Tier

MAX_PER_FAMILY = 2


def is_latest_like(model: Model) -> bool:
    """Flagged latest, or "latest" appears in the id or name."""
    return (
        model.is_latest
        or "latest" in model.id.lower()
        or "latest" in model.name.lower()
    )


def _compare(a: Model, b: Model) -> int:
    if a.is_latest != b.is_latest:
        return -1 if a.is_latest else 1
    if a.release_date and b.release_date:
        if a.release_date != b.release_date:
            return -1 if a.release_date > b.release_date else 1
    elif a.release_date:
        return -1
    elif b.release_date:
        return 1
    return a.tier.rank - b.tier.rank


def rank_family(group: list[Model]) -> list[Model]:
    """Order a family: latest-flagged, then newest release, then highest tier."""
    return sorted(group, key=cmp_to_key(_compare))


def pick_family(group: list[Model]) -> list[Model]:
    """Choose at most two representatives of one family."""
    ranked = rank_family(group)
    if not any(is_latest_like(m) for m in ranked):
        return ranked[:MAX_PER_FAMILY]

    kept: list[Model] = []
    latest_kept = False
    pinned_kept = False
    for model in ranked:
        if is_latest_like(model):
            if not latest_kept:
                kept.append(model)
                latest_kept = True
        elif not pinned_kept:
            kept.append(model)
            pinned_kept = True
        if (latest_kept and pinned_kept) or len(kept) >= MAX_PER_FAMILY:
            break
    return kept


def simplify_models(models: list[Model]) -> list[Model]:
    """Return the slim subset of *models*, in their original order.

    Family-less models survive when latest-like or tiered max/pro.
    """
    families: dict[str, list[Model]] = {}
    for model in models:
        if model.family:
            families.setdefault(model.family, []).append(model)

    keep: set[str] = set()
    for group in families.values():
        keep.update(m.id for m in pick_family(group))
    for model in models:
        if not model.family and (is_latest_like(model) or model.tier is not Tier.MINI):
            keep.add(model.id)

    return [m for m in models if m.id in keep]
