# SPDX-License-Identifier: MIT
"""Version ordering and equality.

Ordering runs in two phases:

1. Numeric: the segments both versions actually have are compared as integers.
2. Positional: all four segment slots are compared as text, with the suffix
   glued onto the last segment that was present. A slot that is only digits
   sorts above the same number carrying a suffix, so ``1.1alpha < 1.1``.

Every operator on Version is derived from ``greater_than`` and
``versions_equal`` through ``compare``.
"""

from __future__ import annotations

import re
from functools import cmp_to_key
from typing import TYPE_CHECKING, Any, Iterable, Optional, Union

if TYPE_CHECKING:
    from .version import Version

_LEADING_DIGITS = re.compile(r"[0-9]*")


def versions_equal(lhs: Version, rhs: Version) -> bool:
    """Return True if two versions have the same text or the same values.

    Numeric segments are compared regardless of whether they were present,
    so "1.1" equals "1.1.0". A valid version never equals an invalid one.
    """
    if lhs.raw == rhs.raw:
        return True
    if lhs.is_valid != rhs.is_valid:
        return False
    return (
        lhs.major == rhs.major
        and lhs.minor == rhs.minor
        and lhs.patch == rhs.patch
        and lhs.build == rhs.build
        and lhs.special == rhs.special
    )


def greater_than(lhs: Version, rhs: Version) -> bool:
    """Return True if lhs orders strictly above rhs.

    Invalid versions are never greater than anything, and valid versions are
    always greater than invalid ones.
    """
    if lhs.raw == rhs.raw:
        return False
    if not lhs.is_valid:
        return False
    if not rhs.is_valid:
        return True

    lhs_parts = lhs.parts
    rhs_parts = rhs.parts
    for i in range(min(lhs.part_count, rhs.part_count)):
        if lhs_parts[i] != rhs_parts[i]:
            return lhs_parts[i] > rhs_parts[i]

    for lhs_slot, rhs_slot in zip(_slots(lhs), _slots(rhs)):
        result = _compare_slot(lhs_slot, rhs_slot)
        if result != 0:
            return result > 0

    return False


def compare(lhs: Version, rhs: Version) -> int:
    """Compare two parsed versions.

    Returns:
        0 if the versions are equal, 1 if lhs is greater, -1 otherwise
    """
    if versions_equal(lhs, rhs):
        return 0
    if greater_than(lhs, rhs):
        return 1
    return -1


def _slots(version: Version) -> list[str]:
    """Return the four segment slots as text, suffix on the last present one."""
    slots = [str(part) for part in version.parts]
    if version.special is not None:
        slots[max(version.part_count, 1) - 1] += version.special
    return slots


def _split_slot(slot: str) -> tuple[int, int]:
    """Split a slot into its leading number and the position of its first non-digit.

    The number is -1 when the slot has no leading digits; the position is -1
    when the slot is all digits.
    """
    digits = _LEADING_DIGITS.match(slot).group()
    number = int(digits) if digits else -1
    non_digit_pos = len(digits) if len(digits) < len(slot) else -1
    return number, non_digit_pos


def _compare_slot(lhs: str, rhs: str) -> int:
    lhs_number, lhs_pos = _split_slot(lhs)
    rhs_number, rhs_pos = _split_slot(rhs)

    if lhs_number != rhs_number:
        return -1 if lhs_number < rhs_number else 1

    if lhs_pos < 0 and rhs_pos < 0:
        return 0

    # A bare number ranks above the same number with a suffix
    if lhs_pos < 0:
        return 1
    if rhs_pos < 0:
        return -1

    lhs_suffix = lhs[lhs_pos:]
    rhs_suffix = rhs[rhs_pos:]
    return (lhs_suffix > rhs_suffix) - (lhs_suffix < rhs_suffix)


def _coerce(version: Union[str, Version, None]) -> Version:
    if version is None or isinstance(version, str):
        from .version import parse_version

        return parse_version(version)
    return version


def compare_versions(
    version1: Union[str, Version, None], version2: Union[str, Version, None]
) -> int:
    """Compare two versions given as strings or Version objects.

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Examples:
        >>> compare_versions("1.0", "2.0")
        -1
        >>> compare_versions("1.1", "1.1.0")
        0
        >>> compare_versions("1.1", "1.1alpha")
        1
    """
    return compare(_coerce(version1), _coerce(version2))


_compare_key = cmp_to_key(compare)


def version_key(version: Union[str, Version, None]) -> Any:
    """Return a sort key for a version string or Version object.

    The ordering is not transitive for every input. "1alpha" equals
    "1.0alpha", yet the first sorts below "1.0a" and the second above it. A
    sort over such values can depend on input order.

    Examples:
        >>> sorted(["1.1", "1.0", "1.1alpha"], key=version_key)
        ['1.0', '1.1alpha', '1.1']
    """
    return _compare_key(_coerce(version))


def sort_versions(
    versions: Iterable[Union[str, Version]], reverse: bool = False
) -> list[Version]:
    """Parse and sort versions, lowest first unless reverse is set.

    Uses the same ordering as version_key, so versions that are equal by value
    but carry their suffix on different segments may come out in input order
    relative to a third version.
    """
    return sorted((_coerce(v) for v in versions), key=_compare_key, reverse=reverse)


def latest_version(
    versions: Iterable[Union[str, Version]], include_unstable: bool = True
) -> Optional[Version]:
    """Return the greatest valid version, or None if nothing qualifies.

    Args:
        versions: Candidate versions
        include_unstable: Consider versions carrying a suffix
    """
    latest: Optional[Version] = None
    for candidate in map(_coerce, versions):
        if not candidate.is_valid:
            continue
        if candidate.is_unstable and not include_unstable:
            continue
        if latest is None or compare(candidate, latest) == 1:
            latest = candidate
    return latest
