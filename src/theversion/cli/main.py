# SPDX-License-Identifier: MIT
"""CLI entry point for theversion command."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import click

from .config import VersionConfig, load_config


class Context:
    """CLI context object passed to commands."""

    def __init__(self) -> None:
        self.config: Optional[VersionConfig] = None
        self.verbose: bool = False
        self.project_dir: Optional[Path] = None

    def load_config(self) -> VersionConfig:
        """Load configuration, caching the result."""
        if self.config is None:
            self.config = load_config(self.project_dir)
        return self.config


pass_context = click.make_pass_decorator(Context, ensure=True)


def echo_error(message: str) -> None:
    """Print an error message to stderr."""
    click.secho(f"Error: {message}", fg="red", err=True)


def echo_success(message: str) -> None:
    """Print a success message."""
    click.secho(message, fg="green")


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(message)


def echo_warning(message: str) -> None:
    """Print a warning message."""
    click.secho(f"Warning: {message}", fg="yellow", err=True)


@click.group()
@click.version_option(package_name="theversion")
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable verbose output.",
)
@click.option(
    "-C",
    "--directory",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Use this directory as the project root.",
)
@pass_context
def cli(ctx: Context, verbose: bool, directory: Optional[Path]) -> None:
    """Parse, compare and bump version strings.

    \b
    Examples:
        theversion parse 1.0.0-beta1
        theversion compare 1.1alpha 1.1
        theversion sort 2.0 1.9.9 1.10
        theversion latest --stable-only 1.0 1.1 1.2-rc1
        theversion bump patch --write
    """
    ctx.verbose = verbose
    ctx.project_dir = directory


# Import and register commands
from .commands import parse, compare, sort, latest, bump

cli.add_command(parse.parse)
cli.add_command(compare.compare)
cli.add_command(sort.sort)
cli.add_command(latest.latest)
cli.add_command(bump.bump)


def main() -> None:
    """Main entry point for the CLI.

    Commands report expected errors themselves and exit with status 1; this
    only catches what escapes them.
    """
    try:
        cli()
    except Exception as e:
        echo_error(f"Unexpected error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
