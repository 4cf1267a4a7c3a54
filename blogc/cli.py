"""Command-line interface for blogc.

This module defines the CLI using the Click framework:

    blogc CONFIG

CONFIG is the path to a JSON job file. Called without exactly one argument
the command prints its usage and exits successfully without reading or
writing anything. Any build failure is reported on stderr and the process
exits with status 1.

Beyond CONFIG the command only takes Click's own --version and --help.
"""

from __future__ import annotations

import click

from . import __version__
from .errors import BuildError

USAGE_MESSAGE = "Give me my config file!"


@click.command()
@click.version_option(version=__version__, prog_name="blogc")
@click.argument("config_paths", metavar="CONFIG", nargs=-1)
@click.pass_context
def cli(ctx: click.Context, config_paths: tuple[str, ...]):
    """Compile the Markdown articles listed in CONFIG into HTML pages."""
    if len(config_paths) != 1:
        click.echo(USAGE_MESSAGE)
        click.echo(ctx.get_usage())
        return

    config_path = config_paths[0]
    from .build import compile_blog
    from .config import load_config

    click.echo(f"Loading config file from {config_path}", err=True)
    try:
        config = load_config(config_path)
        result = compile_blog(config)
    except BuildError as exc:
        source = exc.source_path if exc.source_path is not None else "<none>"
        click.echo(click.style("Build failed:", fg="red", bold=True), err=True)
        click.echo(click.style(f"  Kind: {exc.kind.value}", fg="yellow"), err=True)
        click.echo(click.style(f"  File: {source}", fg="yellow"), err=True)
        click.echo(click.style(f"  Error: {exc.message}", fg="white"), err=True)
        raise SystemExit(1) from None
    click.echo(f"Compiled {len(result.outputs)} articles")


def main():
    """Entry point for the CLI application."""
    cli()
