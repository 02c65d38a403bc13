"""Heuristic tier classification from model identifiers and names."""

from __future__ import annotations

from model_catalog.model.types import Tier

# Checked in order; max patterns take priority over mini patterns.
MAX_PATTERNS: tuple[str, ...] = (
    "opus",
    "gpt-4o",
    "gpt-4-turbo",
    "gemini-2.5-pro",
    "gemini-ultra",
    "claude-3-opus",
    "qwen-max",
    "glm-4-plus",
    "deepseek-v3",
    "o1-pro",
    "o1-preview",
    "o3",
)

MINI_PATTERNS: tuple[str, ...] = (
    "mini",
    "nano",
    "lite",
    "flash",
    "haiku",
    "gpt-4o-mini",
    "gemini-flash",
    "qwen-turbo",
    "glm-4-flash",
)


def _matches(patterns: tuple[str, ...], model_id: str, model_name: str) -> bool:
    return any(p in model_id or p in model_name for p in patterns)


def infer_tier(model_id: str, model_name: str) -> Tier:
    """Classify a model as max, mini or pro (the fallback).

    Matching is a case-insensitive substring test against the id and the
    name. Best-effort: models named outside the known conventions land in
    ``pro``.
    """
    model_id = model_id.lower()
    model_name = model_name.lower()
    if _matches(MAX_PATTERNS, model_id, model_name):
        return Tier.MAX
    if _matches(MINI_PATTERNS, model_id, model_name):
        return Tier.MINI
    return Tier.PRO
