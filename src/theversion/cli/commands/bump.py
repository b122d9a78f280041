# SPDX-License-Identifier: MIT
"""Bump a version or the project version."""

from __future__ import annotations

from typing import Optional

import click

from theversion import InvalidVersionError, parse_version

from ..config import BUMP_PARTS, ConfigError, write_version
from ..main import echo_error, echo_info, echo_success, echo_warning, pass_context, Context


@click.command()
@click.argument("part", required=False, type=click.Choice(BUMP_PARTS))
@click.option(
    "--set",
    "new_value",
    type=click.IntRange(min=0),
    help="Set PART to this value instead of incrementing it.",
)
@click.option(
    "--version",
    "-V",
    "version_text",
    help="Bump this version instead of the project version.",
)
@click.option(
    "--write",
    is_flag=True,
    help="Write the new version to pyproject.toml and configured files.",
)
@pass_context
def bump(
    ctx: Context,
    part: Optional[str],
    new_value: Optional[int],
    version_text: Optional[str],
    write: bool,
) -> None:
    """Derive the next version by bumping or setting PART.

    PART is one of major, minor, patch, build or last. Lower segments that
    were present are reset to zero and any suffix is kept. Without --version
    the current version is read from pyproject.toml, and PART defaults to
    default-part in [tool.theversion].

    \b
    Examples:
        theversion bump patch --version 1.2.3       # 1.2.4
        theversion bump major --version 1.0.0-rc1   # 2.0.0-rc1
        theversion bump minor --set 5 --version 1.2.3
        theversion bump --write                     # bump project version
    """
    if write and version_text is not None:
        echo_error("--write cannot be combined with --version")
        raise SystemExit(1)

    config = None
    if version_text is None:
        try:
            config = ctx.load_config()
        except (ConfigError, FileNotFoundError) as e:
            echo_error(str(e))
            raise SystemExit(1)
    elif part is None:
        # Only the default part is wanted; a missing project is fine
        try:
            config = ctx.load_config()
        except (ConfigError, FileNotFoundError) as e:
            if ctx.verbose:
                echo_warning(f"No project configuration: {e}")

    if part is None:
        part = config.default_part if config is not None else "last"

    try:
        if version_text is not None:
            current = parse_version(version_text, strict=True)
        else:
            current = config.version()
    except (InvalidVersionError, ConfigError) as e:
        echo_error(str(e))
        raise SystemExit(1)

    if new_value is not None:
        if part == "last":
            echo_error("--set needs an explicit part (major, minor, patch or build)")
            raise SystemExit(1)
        new_version = current.set(part, new_value)
    else:
        new_version = current.bump(part)

    if ctx.verbose:
        echo_info(f"Bumping {part}: {current.raw} -> {new_version.raw}")

    if not write:
        echo_info(new_version.raw)
        return

    try:
        written = write_version(config, new_version)
    except ConfigError as e:
        echo_error(str(e))
        raise SystemExit(1)

    if ctx.verbose:
        for path in written:
            echo_info(f"  Updated: {path}")
    echo_success(f"Bumped {config.name or 'project'} {current.raw} -> {new_version.raw}")
