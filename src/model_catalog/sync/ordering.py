"""Presentation order of models inside a provider document."""

from __future__ import annotations

from functools import cmp_to_key

from model_catalog.model.types import Model


def _compare(a: Model, b: Model) -> int:
    if a.release_date and b.release_date:
        # Newest first; equal dates keep their relative order.
        return (a.release_date < b.release_date) - (a.release_date > b.release_date)
    if a.release_date:
        return -1
    if b.release_date:
        return 1
    a_key = (a.name.casefold(), a.name)
    b_key = (b.name.casefold(), b.name)
    return (a_key > b_key) - (a_key < b_key)


def sort_models(models: list[Model]) -> list[Model]:
    """Most recent release first; undated models last, alphabetically by name.

    Names compare case-insensitively, with the exact name breaking ties.
    """
    return sorted(models, key=cmp_to_key(_compare))
