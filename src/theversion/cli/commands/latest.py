# SPDX-License-Identifier: MIT
"""Pick the latest version from a list."""

from __future__ import annotations

import click

from theversion import is_valid_version, latest_version

from ..main import echo_error, echo_info, echo_warning, pass_context, Context


@click.command()
@click.argument("versions", nargs=-1, required=True)
@click.option(
    "--stable-only",
    is_flag=True,
    help="Ignore versions with a suffix such as -beta1 or rc2.",
)
@pass_context
def latest(ctx: Context, versions: tuple[str, ...], stable_only: bool) -> None:
    """Print the highest valid version among VERSIONS.

    Exits with status 1 if no version qualifies.

    \b
    Examples:
        theversion latest 1.0 1.2 1.1
        theversion latest --stable-only 1.0 1.1-rc1
    """
    if ctx.verbose:
        for text in versions:
            if not is_valid_version(text):
                echo_warning(f"Ignoring invalid version {text!r}")

    result = latest_version(versions, include_unstable=not stable_only)
    if result is None:
        kind = "stable " if stable_only else ""
        echo_error(f"No valid {kind}version among {len(versions)} candidate(s)")
        raise SystemExit(1)

    echo_info(result.raw)
