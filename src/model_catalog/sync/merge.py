"""Carry curated annotations from a stored document into freshly synced models."""

from __future__ import annotations

import dataclasses
from typing import Any

from model_catalog.model.types import Model


def _text(record: dict[str, Any], key: str) -> str | None:
    value = record.get(key)
    return value if isinstance(value, str) and value else None


def merge_models(
    new_models: list[Model], existing_models: list[dict[str, Any]]
) -> list[Model]:
    """Merge curated fields of the stored records into *new_models*, keyed by id.

    *existing_models* are raw records from the stored document; apart from
    ``id`` no other field is required. ``description`` is carried over only
    when the new model has none; ``description_zh`` is always taken from the
    stored record. Every other field comes from the new model. Stored
    records missing from *new_models* are dropped, so the result mirrors the
    latest fetch.
    """
    existing_by_id = {
        m["id"]: m for m in existing_models if isinstance(m.get("id"), str)
    }
    merged: list[Model] = []
    for model in new_models:
        existing = existing_by_id.get(model.id)
        if existing is None:
            merged.append(model)
            continue
        merged.append(
            dataclasses.replace(
                model,
                description=model.description or _text(existing, "description"),
                description_zh=_text(existing, "description_zh"),
            )
        )
    return merged
