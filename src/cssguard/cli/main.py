"""cssguard CLI entry point: Click group with subcommands."""

import click

from cssguard import __version__


@click.group()
@click.version_option(version=__version__, prog_name="cssguard")
def cli() -> None:
    """cssguard - keep stylesheets from overriding shared bundle selectors."""


# Import and register subcommands
from cssguard.cli.bundles import bundles  # noqa: E402
from cssguard.cli.check import check  # noqa: E402

cli.add_command(check)
cli.add_command(bundles)
