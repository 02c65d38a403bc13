"""Conversion of models.dev records into the local model schema."""

from __future__ import annotations

from typing import Any

from model_catalog.model.types import Capabilities, Limits, Model, Pricing
from model_catalog.sync.tiers import infer_tier

_VISION_MODALITIES = frozenset({"image", "video"})


def convert_model(upstream: dict[str, Any], currency: str = "USD") -> Model:
    """Map one upstream model record to a :class:`Model`.

    Missing optional upstream fields leave the matching output field unset.
    Streaming and JSON mode are always reported as supported; upstream does
    not describe them.
    """
    model_id: str = upstream["id"]
    name: str = upstream.get("name") or model_id

    modalities = upstream.get("modalities") or {}
    input_modalities = modalities.get("input") or []
    vision = any(m in _VISION_MODALITIES for m in input_modalities) or bool(
        upstream.get("attachment")
    )
    tool_call = bool(upstream.get("tool_call"))

    cost = upstream.get("cost")
    pricing = None
    if isinstance(cost, dict):
        pricing = Pricing(
            input=cost.get("input"),
            output=cost.get("output"),
            cache_read=cost.get("cache_read"),
            cache_write=cost.get("cache_write"),
            currency=currency,
        )

    limit = upstream.get("limit") or {}
    limits = None
    if limit.get("context") or limit.get("output"):
        limits = Limits(context=limit.get("context"), max_output=limit.get("output"))

    return Model(
        id=model_id,
        name=name,
        family=upstream.get("family") or None,
        tier=infer_tier(model_id, name),
        capabilities=Capabilities(
            vision=vision,
            tools=tool_call,
            streaming=True,
            json_mode=True,
            function_calling=tool_call,
            reasoning=bool(upstream.get("reasoning")),
        ),
        pricing=pricing,
        limits=limits,
        status=upstream.get("status") or "active",
        release_date=upstream.get("release_date") or None,
        is_latest="latest" in model_id,
    )
