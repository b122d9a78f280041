# SPDX-License-Identifier: MIT
"""Loose version parsing, comparison and bumping.

This package parses version strings of up to four numeric segments with an
optional free-form suffix, orders them, and derives new versions while keeping
the shape of the original.

Example:
    >>> from theversion import parse_version, compare_versions
    >>>
    >>> version = parse_version("1.0.0-beta1")
    >>> version.patch
    0
    >>> version.is_beta
    True
    >>> str(version.bump_patch())
    '1.0.1-beta1'
    >>>
    >>> compare_versions("1.1alpha", "1.1")
    -1
"""

__version__ = "0.1.0"

from .version import (
    Version,
    parse_version,
    try_parse_version,
    is_valid_version,
    InvalidVersionError,
    EMPTY_VERSION,
    VERSION_PARTS,
    VERSION_PATTERN,
)
from .compare import (
    compare,
    compare_versions,
    greater_than,
    latest_version,
    sort_versions,
    version_key,
    versions_equal,
)

__all__ = [
    # Version parsing
    "Version",
    "parse_version",
    "try_parse_version",
    "is_valid_version",
    "InvalidVersionError",
    "EMPTY_VERSION",
    "VERSION_PARTS",
    "VERSION_PATTERN",
    # Version comparison
    "compare",
    "compare_versions",
    "greater_than",
    "latest_version",
    "sort_versions",
    "version_key",
    "versions_equal",
]
