"""Data model: provider, model and index documents of the flat-file store."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any


class Tier(StrEnum):
    """Coarse cost/capability classification of a model."""

    MINI = "mini"
    PRO = "pro"
    MAX = "max"

    @property
    def rank(self) -> int:
        """Sort rank, flagship first: max < pro < mini."""
        return _TIER_RANK[self]


_TIER_RANK = {Tier.MAX: 0, Tier.PRO: 1, Tier.MINI: 2}


def _compact(data: dict[str, Any]) -> dict[str, Any]:
    """Drop keys whose value is ``None``."""
    return {k: v for k, v in data.items() if v is not None}


@dataclass(frozen=True)
class Capabilities:
    vision: bool = False
    tools: bool = False
    streaming: bool = True
    json_mode: bool = True
    function_calling: bool = False
    reasoning: bool = False

    def to_dict(self) -> dict[str, bool]:
        return {
            "vision": self.vision,
            "tools": self.tools,
            "streaming": self.streaming,
            "json_mode": self.json_mode,
            "function_calling": self.function_calling,
            "reasoning": self.reasoning,
        }


@dataclass(frozen=True)
class Pricing:
    """Cost per million tokens, in ``currency``."""

    input: float | None = None
    output: float | None = None
    cache_read: float | None = None
    cache_write: float | None = None
    currency: str = "USD"

    def to_dict(self) -> dict[str, Any]:
        return _compact({
            "input": self.input,
            "output": self.output,
            "cache_read": self.cache_read,
            "cache_write": self.cache_write,
            "currency": self.currency,
        })


@dataclass(frozen=True)
class Limits:
    """Token-count ceilings."""

    context: int | None = None
    max_output: int | None = None

    def to_dict(self) -> dict[str, Any]:
        return _compact({"context": self.context, "max_output": self.max_output})


@dataclass(frozen=True)
class Model:
    """One AI model variant as stored in a provider document.

    Attributes:
        id: Identifier, unique within its provider document.
        name: Display name.
        tier: Inferred classification, see :func:`model_catalog.sync.tiers.infer_tier`.
        capabilities: Boolean feature flags.
        family: Lineage shared by successive variants, if known.
        pricing: Cost figures; ``None`` when upstream has no cost data.
        limits: Token limits; ``None`` when upstream has neither figure.
        status: Lifecycle tag.
        release_date: Upstream release date string (``YYYY-MM-DD``), if any.
        is_latest: Whether the id carries a "latest" marker.
        description: Curated English annotation, kept across syncs.
        description_zh: Curated Chinese annotation, kept across syncs.
    """

    id: str
    name: str
    tier: Tier
    capabilities: Capabilities = field(default_factory=Capabilities)
    family: str | None = None
    pricing: Pricing | None = None
    limits: Limits | None = None
    status: str = "active"
    release_date: str | None = None
    is_latest: bool = False
    description: str | None = None
    description_zh: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return _compact({
            "id": self.id,
            "name": self.name,
            "family": self.family,
            "tier": self.tier.value,
            "capabilities": self.capabilities.to_dict(),
            "pricing": self.pricing.to_dict() if self.pricing else None,
            "limits": self.limits.to_dict() if self.limits else None,
            "status": self.status,
            "release_date": self.release_date,
            "is_latest": self.is_latest,
            "description": self.description,
            "description_zh": self.description_zh,
        })


@dataclass(frozen=True)
class ProviderInfo:
    id: str
    name: str
    website: str | None = None
    api_docs: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return _compact({
            "id": self.id,
            "name": self.name,
            "website": self.website,
            "api_docs": self.api_docs,
        })


@dataclass
class ProviderDocument:
    """Contents of ``providers/<provider-id>.json``."""

    provider: ProviderInfo
    models: list[Model]
    updated_at: str
    source: str
    schema: str = "../schema/model.schema.json"

    def to_dict(self) -> dict[str, Any]:
        return {
            "$schema": self.schema,
            "provider": self.provider.to_dict(),
            "models": [m.to_dict() for m in self.models],
            "updated_at": self.updated_at,
            "source": self.source,
        }


@dataclass
class IndexSources:
    models_dev: str
    manual: list[str] = field(default_factory=list)


@dataclass
class IndexDocument:
    """Contents of ``index.json``: a summary of the whole store."""

    version: str
    updated_at: str
    providers: list[str]
    total_models: int
    sources: IndexSources

    def to_dict(self) -> dict[str, Any]:
        return {
            "version": self.version,
            "updated_at": self.updated_at,
            "providers": list(self.providers),
            "total_models": self.total_models,
            "sources": {
                "models_dev": self.sources.models_dev,
                "manual": list(self.sources.manual),
            },
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> IndexDocument:
        sources = data.get("sources") or {}
        return cls(
            version=data.get("version", ""),
            updated_at=data.get("updated_at", ""),
            providers=list(data.get("providers", [])),
            total_models=int(data.get("total_models", 0)),
            sources=IndexSources(
                models_dev=sources.get("models_dev", ""),
                manual=list(sources.get("manual") or []),
            ),
        )
