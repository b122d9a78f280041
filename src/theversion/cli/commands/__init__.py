# SPDX-License-Identifier: MIT
"""CLI command implementations."""

from . import parse, compare, sort, latest, bump

__all__ = ["parse", "compare", "sort", "latest", "bump"]
