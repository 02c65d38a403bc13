"""Sync pipeline: fetch the upstream catalog and rewrite the store.

Each provider document is written as soon as it is built, so a failure
part-way through leaves earlier providers updated and later ones untouched.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Callable

from model_catalog._http import HttpClient
from model_catalog.config import CatalogConfig
from model_catalog.errors import FetchError
from model_catalog.model.types import (
    IndexDocument,
    IndexSources,
    Model,
    ProviderDocument,
    ProviderInfo,
)
from model_catalog.store import DataStore
from model_catalog.sync.convert import convert_model
from model_catalog.sync.merge import merge_models
from model_catalog.sync.ordering import sort_models
from model_catalog.sync.simplify import simplify_models

log = logging.getLogger(__name__)


@dataclass
class SyncReport:
    """What a sync run wrote."""

    providers: dict[str, int] = field(default_factory=dict)
    """Provider id -> number of models written, in write order."""

    skipped: list[str] = field(default_factory=list)
    """Providers with no models upstream."""

    index_path: Path | None = None

    @property
    def total_models(self) -> int:
        return sum(self.providers.values())


def utc_timestamp() -> str:
    """Current UTC time as ISO 8601 with millisecond precision and a Z suffix."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def fetch_catalog(client: HttpClient, url: str) -> dict[str, dict[str, Any]]:
    """Fetch the upstream snapshot: a mapping of provider id to provider."""
    log.info("Fetching models from %s", url)
    data = client.get_json(url)
    if not isinstance(data, dict):
        raise FetchError(f"Unexpected payload from {url}: expected an object")
    return data


def build_models(
    upstream_provider: dict[str, Any],
    existing: list[dict[str, Any]] | None,
    *,
    slim: bool = False,
    currency: str = "USD",
) -> list[Model]:
    """Convert, merge, optionally slim, and order one provider's models."""
    raw_models = upstream_provider.get("models") or {}
    models = [
        convert_model({**raw, "id": raw.get("id") or model_id}, currency=currency)
        for model_id, raw in raw_models.items()
    ]
    if existing is not None:
        models = merge_models(models, existing)
    if slim:
        models = simplify_models(models)
    return sort_models(models)


def sync_catalog(
    store: DataStore,
    client: HttpClient,
    config: CatalogConfig | None = None,
    *,
    slim: bool = False,
    on_provider: Callable[[str, int], None] | None = None,
) -> SyncReport:
    """Run one full sync of *store* against the upstream catalog.

    Raises :class:`~model_catalog.errors.FetchError` if the catalog cannot
    be fetched; nothing is written in that case. *on_provider* is called
    with the provider id and model count after each provider file is written.
    """
    config = config or CatalogConfig()
    catalog = fetch_catalog(client, config.api_url)
    log.info("Found %d providers", len(catalog))

    store.providers_dir.mkdir(parents=True, exist_ok=True)
    report = SyncReport()

    for provider_id, upstream_provider in catalog.items():
        if not upstream_provider.get("models"):
            log.info("Skipping %s (no models)", provider_id)
            report.skipped.append(provider_id)
            continue

        models = build_models(
            upstream_provider,
            store.load_stored_models(provider_id),
            slim=slim,
            currency=config.currency,
        )
        document = ProviderDocument(
            provider=ProviderInfo(
                id=provider_id,
                name=upstream_provider.get("name") or provider_id,
            ),
            models=models,
            updated_at=utc_timestamp(),
            source=config.source,
            schema=config.schema_ref,
        )
        store.write_provider(document)
        report.providers[provider_id] = len(models)
        log.debug("Wrote %s with %d models", provider_id, len(models))
        if on_provider is not None:
            on_provider(provider_id, len(models))

    previous = store.load_index()
    index = IndexDocument(
        version=config.index_version,
        updated_at=utc_timestamp(),
        providers=sorted(report.providers),
        total_models=report.total_models,
        sources=IndexSources(
            models_dev=config.api_url,
            manual=list(previous.sources.manual) if previous else [],
        ),
    )
    report.index_path = store.write_index(index)
    log.info(
        "Sync complete: %d providers, %d models", len(report.providers), report.total_models
    )
    return report
