"""model-catalog CLI entry point: Click group with subcommands."""

import logging

import click

from model_catalog import __version__


@click.group()
@click.version_option(version=__version__, prog_name="model-catalog")
@click.option("-v", "--verbose", is_flag=True, help="Log debug details")
def cli(verbose: bool) -> None:
    """model-catalog - sync and validate static AI-model metadata."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Import and register subcommands
from model_catalog.cli.sync import sync  # noqa: E402
from model_catalog.cli.validate import validate  # noqa: E402

cli.add_command(sync)
cli.add_command(validate)
