"""CLI command: cssguard bundles -- list the bundles of a distribution."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from cssguard.bundles import BundleDataError, DistBundleSource


@click.command()
@click.option(
    "--bundle-dir",
    required=True,
    type=click.Path(exists=True, file_okay=False),
    help="Directory holding meta.json and stats/<bundle>.json",
)
def bundles(bundle_dir: str) -> None:
    """List available bundles and how many selectors each defines."""
    source = DistBundleSource(Path(bundle_dir))
    try:
        names = sorted(source.available_bundles())
        counts = {name: len(source.selectors(name)) for name in names}
    except BundleDataError as exc:
        click.echo(f"Bundle data error: {exc}", err=True)
        sys.exit(2)

    if not names:
        click.echo("No bundles found.")
        return
    width = max(len(name) for name in names)
    for name in names:
        click.echo(f"  {name.ljust(width)}  {counts[name]} selector(s)")
