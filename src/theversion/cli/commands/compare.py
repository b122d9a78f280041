# SPDX-License-Identifier: MIT
"""Compare two versions."""

from __future__ import annotations

import click

from theversion import parse_version
from theversion.compare import compare as compare_parsed

from ..main import echo_info, echo_warning, pass_context, Context

_SYMBOLS = {-1: "<", 0: "==", 1: ">"}


@click.command()
@click.argument("version1")
@click.argument("version2")
@click.option(
    "--numeric",
    is_flag=True,
    help="Print -1, 0 or 1 instead of a comparison expression.",
)
@pass_context
def compare(ctx: Context, version1: str, version2: str, numeric: bool) -> None:
    """Compare VERSION1 with VERSION2.

    Invalid versions sort below every valid version.

    \b
    Examples:
        theversion compare 1.1alpha 1.1      # 1.1alpha < 1.1
        theversion compare 1.1 1.1.0         # 1.1 == 1.1.0
        theversion compare --numeric 2.0 1.9.9
    """
    lhs = parse_version(version1)
    rhs = parse_version(version2)

    if ctx.verbose:
        for parsed in (lhs, rhs):
            if not parsed.is_valid:
                echo_warning(f"{parsed.raw!r} is not a valid version")

    result = compare_parsed(lhs, rhs)
    if numeric:
        echo_info(str(result))
    else:
        echo_info(f"{lhs.raw} {_SYMBOLS[result]} {rhs.raw}")
