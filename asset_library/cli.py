"""Asset cache CLI.

Provides commands to pre-warm, load and inspect the compiled asset cache.
"""

import asyncio
import logging
import sys

import click

from .config.loader import load_config
from .errors import AssetError
from .errors import TransformError
from .pipeline import AssetPipeline

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def make_pipeline() -> AssetPipeline:
    settings = load_config()
    configure_logging(settings.log_level)
    return AssetPipeline.from_settings(settings)


def fail(e: Exception) -> None:
    if isinstance(e, TransformError):
        logger.error(f"Refusing to produce a broken bundle: {e}")
    else:
        logger.error(str(e))
    click.echo(f"Error: {e}", err=True)
    sys.exit(1)


@click.group()
def cli():
    """Assets - compile and cache the client bundles."""
    pass


@cli.command()
def build():
    """Refresh the on-disk cache if any source changed."""
    try:
        pipeline = make_pipeline()
        asyncio.run(pipeline.build())
        click.echo(f"Cache ready: {pipeline.cache_path}")
    except AssetError as e:
        fail(e)


@cli.command()
@click.option("--dev", is_flag=True, help="Compile unminified without touching the cache file")
def load(dev: bool):
    """Load the compiled cache and summarize its entries."""
    try:
        pipeline = make_pipeline()
        cache = asyncio.run(pipeline.load(dev=dev))
    except AssetError as e:
        fail(e)
        return

    click.echo(f"Compiled cache (version {cache.meta.version}):")
    click.echo("-" * 40)
    for group, entries in cache.groups().items():
        size = sum(len(entry.data) for entry in entries.values())
        click.echo(f"{group:<10} {len(entries):>4} entries {size:>10} bytes")


@cli.command()
def status():
    """Report whether the persisted cache is fresh."""
    try:
        pipeline = make_pipeline()
        fresh = asyncio.run(pipeline.is_fresh())
    except AssetError as e:
        fail(e)
        return

    click.echo(f"Cache:  {pipeline.cache_path}")
    click.echo(f"Status: {'✓ Fresh' if fresh else '✗ Stale'}")


if __name__ == "__main__":
    cli()
