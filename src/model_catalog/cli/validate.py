"""CLI command: model-catalog validate -- check every JSON document in the store."""

from __future__ import annotations

import sys

import click

from model_catalog.store import DataStore
from model_catalog.validation import validate_store


@click.command()
@click.option(
    "--root",
    type=click.Path(file_okay=False),
    default=".",
    help="Data store directory",
)
def validate(root: str) -> None:
    """Validate provider, alias and index files.

    Prints a result line per file and exits with code 1 if any file is
    invalid, 0 otherwise.
    """
    report = validate_store(DataStore(root))

    for warning in report.warnings:
        click.echo(f"warning: {warning}")

    for result in report.results:
        click.echo(f"{'OK  ' if result.valid else 'FAIL'} {result.file}")
        for diag in result.diagnostics:
            if diag.is_error:
                click.echo(f"     - {diag}")
            else:
                click.echo(f"     warning: {diag}")

    click.echo()
    click.echo("Summary:")
    click.echo(f"  Total files: {len(report.results)}")
    click.echo(f"  Valid: {len(report.valid)}")
    click.echo(f"  Invalid: {len(report.invalid)}")

    if not report.ok:
        sys.exit(1)
