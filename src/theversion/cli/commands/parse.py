# SPDX-License-Identifier: MIT
"""Show how a version string is parsed."""

from __future__ import annotations

import json
from typing import Any

import click

from theversion import Version, parse_version

from ..main import echo_error, echo_info, pass_context, Context


def version_to_dict(version: Version) -> dict[str, Any]:
    """Return the parsed fields of a version as a JSON-serializable dict."""
    return {
        "raw": version.raw,
        "valid": version.is_valid,
        "major": version.major,
        "minor": version.minor if version.has_minor else None,
        "patch": version.patch if version.has_patch else None,
        "build": version.build if version.has_build else None,
        "special": version.special,
        "unstable": version.is_unstable,
        "alpha": version.is_alpha,
        "beta": version.is_beta,
    }


@click.command()
@click.argument("version")
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    help="Print the parsed fields as JSON.",
)
@pass_context
def parse(ctx: Context, version: str, as_json: bool) -> None:
    """Parse VERSION and print its segments.

    Exits with status 1 if VERSION does not start with a number.

    \b
    Examples:
        theversion parse 1.2.3
        theversion parse 1.0.0-beta1 --json
    """
    parsed = parse_version(version)
    fields = version_to_dict(parsed)

    if as_json:
        echo_info(json.dumps(fields, indent=2))
    else:
        for key, value in fields.items():
            if value is None and not ctx.verbose:
                continue
            echo_info(f"{key}: {value}")

    if not parsed.is_valid:
        echo_error(f"Invalid version: {version!r}")
        raise SystemExit(1)
