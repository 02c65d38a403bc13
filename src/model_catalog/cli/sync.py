"""CLI command: model-catalog sync -- refresh provider files from models.dev."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from model_catalog._http import HttpClient
from model_catalog.config import CatalogConfig
from model_catalog.errors import CatalogError
from model_catalog.store import DataStore
from model_catalog.sync import sync_catalog

log = logging.getLogger(__name__)


@click.command()
@click.option("--slim", is_flag=True, help="Keep at most two models per family")
@click.option(
    "--root",
    type=click.Path(file_okay=False),
    default=".",
    help="Data store directory",
)
def sync(slim: bool, root: str) -> None:
    """Fetch the models.dev catalog and rewrite providers/*.json and index.json.

    Curated descriptions already in the provider files are preserved.
    """
    config = CatalogConfig(root=Path(root))
    store = DataStore(config.root)

    click.echo(f"Fetching models from {config.api_url}...")
    try:
        with HttpClient(timeout=config.timeout) as client:
            report = sync_catalog(
                store,
                client,
                config,
                slim=slim,
                on_provider=lambda pid, n: click.echo(f"  {pid}: {n} models"),
            )
    except CatalogError as exc:
        log.exception("Sync aborted")
        click.echo(f"Sync failed: {exc}", err=True)
        sys.exit(1)

    for provider_id in report.skipped:
        click.echo(f"  skipped {provider_id} (no models)")

    click.echo()
    click.echo("Summary:")
    click.echo(f"  Providers: {len(report.providers)}")
    click.echo(f"  Total models: {report.total_models}")
    click.echo(f"  Index updated: {report.index_path}")
