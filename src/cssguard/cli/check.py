"""CLI command: cssguard check -- lint stylesheets for overridden selectors."""

from __future__ import annotations

import logging
import sys
from dataclasses import replace
from pathlib import Path

import click

from cssguard.bundles import BundleDataError, DistBundleSource
from cssguard.config import ConfigError, NoOverrideOptions, load_config, parse_ignore_pattern
from cssguard.stylesheet import ParseError, parse_file
from cssguard.validation import NoOverrideRule


def _load_options(
    config: str | None, bundle: tuple[str, ...], ignore: tuple[str, ...]
) -> NoOverrideOptions:
    options = load_config(Path(config)) if config else NoOverrideOptions()
    # The check is always on when asked for explicitly.
    options = replace(options, enabled=True)
    if bundle:
        options = replace(options, bundles=bundle)
    if ignore:
        options = replace(
            options, ignore_selectors=tuple(parse_ignore_pattern(p) for p in ignore)
        )
    return options


@click.command()
@click.argument("files", nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--bundle-dir",
    required=True,
    type=click.Path(exists=True, file_okay=False),
    help="Directory holding meta.json and stats/<bundle>.json",
)
@click.option("--bundle", "bundle", multiple=True, help="Immutable bundle (repeatable)")
@click.option(
    "--ignore",
    "ignore",
    multiple=True,
    help="Selector substring or /regex/ to ignore (repeatable)",
)
@click.option(
    "--config",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="JSON options file; its \"enabled\" key is ignored, the check always runs",
)
@click.option("--verbose", "-v", is_flag=True, help="Log index and per-file details")
def check(
    files: tuple[str, ...],
    bundle_dir: str,
    bundle: tuple[str, ...],
    ignore: tuple[str, ...],
    config: str | None,
    verbose: bool,
) -> None:
    """Check stylesheets for rules that override immutable bundle selectors.

    Exits with code 1 if any rule is rejected, 2 if input or configuration
    cannot be read, and 0 otherwise.
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        options = _load_options(config, bundle, ignore)
        rule = NoOverrideRule(options, DistBundleSource(Path(bundle_dir)))
    except ConfigError as exc:
        click.echo(f"Config error: {exc}", err=True)
        sys.exit(2)
    except BundleDataError as exc:
        click.echo(f"Bundle data error: {exc}", err=True)
        sys.exit(2)

    if rule.option_warning is not None:
        click.echo(f"Warning: {rule.option_warning.message}", err=True)

    total = 0
    for name in files:
        try:
            stylesheet = parse_file(Path(name))
        except ParseError as exc:
            where = f":{exc.line}:{exc.column}" if exc.line is not None else ""
            click.echo(f"Parse error in {name}{where}: {exc}", err=True)
            sys.exit(2)
        result = rule.run(stylesheet)
        for diag in result.diagnostics:
            click.echo(str(diag))
        total += len(result.diagnostics)

    click.echo()
    click.echo(f"Summary: {total} violation(s) in {len(files)} file(s)")
    sys.exit(1 if total else 0)

