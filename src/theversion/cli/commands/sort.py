# SPDX-License-Identifier: MIT
"""Sort versions."""

from __future__ import annotations

import click

from theversion import sort_versions

from ..main import echo_info, echo_warning, pass_context, Context


@click.command()
@click.argument("versions", nargs=-1, required=True)
@click.option(
    "--reverse",
    "-r",
    is_flag=True,
    help="Print the highest version first.",
)
@click.option(
    "--skip-invalid",
    is_flag=True,
    help="Leave out versions that do not parse.",
)
@pass_context
def sort(ctx: Context, versions: tuple[str, ...], reverse: bool, skip_invalid: bool) -> None:
    """Print VERSIONS in ascending order, one per line.

    \b
    Examples:
        theversion sort 1.10 1.9 1.9.1
        theversion sort -r 1.0 1.1alpha 1.1
    """
    for version in sort_versions(versions, reverse=reverse):
        if not version.is_valid:
            if skip_invalid:
                if ctx.verbose:
                    echo_warning(f"Skipping invalid version {version.raw!r}")
                continue
        echo_info(version.raw)
