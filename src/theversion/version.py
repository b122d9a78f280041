# SPDX-License-Identifier: MIT
"""Version string parsing and derivation.

Accepts loosely formatted versions of up to four numeric segments followed by
an optional free-form suffix:

- ``1``, ``1.2``, ``1.2.3``, ``1.2.3.4``
- ``1.2.3-beta1``, ``1.2alpha``, ``2.0.0.rc1``

Parsing never raises for string input. Text that does not start with a digit
produces a version with ``is_valid`` set to ``False``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from .compare import compare, versions_equal

# Dots between groups are optional, so "1.2.3" and "123" both match with
# greedy digit runs deciding where a group ends.
VERSION_PATTERN = re.compile(
    r"^(?P<major>[0-9]+)"
    r"(?:\.?(?P<minor>[0-9]+))?"
    r"(?:\.?(?P<patch>[0-9]+))?"
    r"(?:\.?(?P<build>[0-9]+))?"
    r"(?:\.?(?P<special>.+))?",
    re.DOTALL,
)

VERSION_PARTS = ("major", "minor", "patch", "build")


class InvalidVersionError(Exception):
    """Raised by strict parsing when a version string does not match the grammar."""

    def __init__(self, version: str, message: str = ""):
        self.version = version
        self.message = message or f"Invalid version: {version!r}"
        super().__init__(self.message)


@dataclass(frozen=True, slots=True, eq=False)
class Version:
    """Represents a parsed version.

    Attributes:
        major: Major version number
        minor: Minor version number (0 when absent)
        patch: Patch version number (0 when absent)
        build: Build version number (0 when absent)
        has_minor: Whether a minor segment was present in the text
        has_patch: Whether a patch segment was present in the text
        has_build: Whether a build segment was present in the text
        special: Trailing suffix after the numeric segments (e.g. "-rc1", "alpha2")
        is_valid: Whether the text matched the version grammar
        raw: The trimmed input text, kept verbatim for display
    """

    major: int = 0
    minor: int = 0
    patch: int = 0
    build: int = 0
    has_minor: bool = False
    has_patch: bool = False
    has_build: bool = False
    special: Optional[str] = None
    is_valid: bool = True
    raw: str = ""

    def __str__(self) -> str:
        """Return the original text of the version."""
        return self.raw

    def __hash__(self) -> int:
        return hash((self.major, self.minor, self.patch, self.build, self.special))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return versions_equal(self, other)

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return not versions_equal(self, other)

    def __gt__(self, other: Version) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare(self, other) == 1

    def __lt__(self, other: Version) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare(self, other) == -1

    def __ge__(self, other: Version) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare(self, other) != -1

    def __le__(self, other: Version) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare(self, other) != 1

    @property
    def is_unstable(self) -> bool:
        """Return True if the version carries a suffix."""
        return self.special is not None

    @property
    def is_alpha(self) -> bool:
        return self.special is not None and "alpha" in self.special

    @property
    def is_beta(self) -> bool:
        return self.special is not None and "beta" in self.special

    @property
    def part_count(self) -> int:
        """Return the number of numeric segments present, major included."""
        if not self.is_valid:
            return 0
        return 1 + self.has_minor + self.has_patch + self.has_build

    @property
    def parts(self) -> tuple[int, int, int, int]:
        return (self.major, self.minor, self.patch, self.build)

    @property
    def base_version(self) -> str:
        """Return the numeric segments that were present, without the suffix."""
        return ".".join(str(part) for part in self.parts[: max(self.part_count, 1)])

    def bump_major(self) -> Version:
        return self._reset_from_minor(f"{self.major + 1}")

    def bump_minor(self) -> Version:
        return self._reset_from_patch(f"{self.major}.{self.minor + 1}")

    def bump_patch(self) -> Version:
        return self._reset_from_build(f"{self.major}.{self.minor}.{self.patch + 1}")

    def bump_build(self) -> Version:
        return self._reset_from_special(
            f"{self.major}.{self.minor}.{self.patch}.{self.build + 1}"
        )

    def bump_last_part(self) -> Version:
        """Bump the deepest segment present in the original text."""
        if self.has_build:
            return self.bump_build()
        if self.has_patch:
            return self.bump_patch()
        if self.has_minor:
            return self.bump_minor()
        return self.bump_major()

    def set_major(self, value: int) -> Version:
        return self._reset_from_minor(f"{_check_segment(value)}")

    def set_minor(self, value: int) -> Version:
        return self._reset_from_patch(f"{self.major}.{_check_segment(value)}")

    def set_patch(self, value: int) -> Version:
        return self._reset_from_build(
            f"{self.major}.{self.minor}.{_check_segment(value)}"
        )

    def set_build(self, value: int) -> Version:
        return self._reset_from_special(
            f"{self.major}.{self.minor}.{self.patch}.{_check_segment(value)}"
        )

    def bump(self, part: str) -> Version:
        """Bump a segment by name.

        Args:
            part: One of "major", "minor", "patch", "build" or "last"

        Raises:
            ValueError: If the part name is unknown
        """
        if part == "last":
            return self.bump_last_part()
        _check_part(part)
        return getattr(self, f"bump_{part}")()

    def set(self, part: str, value: int) -> Version:
        """Overwrite a segment by name.

        Raises:
            ValueError: If the part name is unknown or the value is negative
        """
        _check_part(part)
        return getattr(self, f"set_{part}")(value)

    # Each reset step appends ".0" only for segments the original text had,
    # so derived versions keep the shape of their source.

    def _reset_from_minor(self, text: str) -> Version:
        if self.has_minor:
            text += ".0"
        return self._reset_from_patch(text)

    def _reset_from_patch(self, text: str) -> Version:
        if self.has_patch:
            text += ".0"
        return self._reset_from_build(text)

    def _reset_from_build(self, text: str) -> Version:
        if self.has_build:
            text += ".0"
        return self._reset_from_special(text)

    def _reset_from_special(self, text: str) -> Version:
        if self.is_unstable:
            text += self.special
        return parse_version(text)


def _check_part(part: str) -> None:
    if part not in VERSION_PARTS:
        raise ValueError(
            f"Unknown version part {part!r}, expected one of: {', '.join(VERSION_PARTS)}"
        )


def _check_segment(value: int) -> int:
    if value < 0:
        raise ValueError(f"Version segments must be non-negative, got {value}")
    return value


EMPTY_VERSION = Version()


def parse_version(version_string: Optional[str], strict: bool = False) -> Version:
    """Parse a version string into a Version object.

    Args:
        version_string: Text to parse. None and blank strings give EMPTY_VERSION.
        strict: Raise InvalidVersionError instead of returning an invalid version

    Returns:
        A Version object. Unmatched text yields a Version with is_valid False.

    Raises:
        TypeError: If version_string is neither a string nor None
        InvalidVersionError: In strict mode, if the text does not match

    Examples:
        >>> parse_version("1.2.3").patch
        3

        >>> parse_version("1.0.0-beta1").special
        '-beta1'

        >>> parse_version("abc").is_valid
        False
    """
    if version_string is None:
        return EMPTY_VERSION
    if not isinstance(version_string, str):
        raise TypeError(
            f"Version must be a string, got {type(version_string).__name__}"
        )

    version_string = version_string.strip()
    if not version_string:
        return EMPTY_VERSION

    match = VERSION_PATTERN.match(version_string)
    if not match:
        if strict:
            raise InvalidVersionError(version_string)
        return Version(is_valid=False, raw=version_string)

    minor, patch, build = match.group("minor", "patch", "build")
    return Version(
        major=int(match.group("major")),
        minor=int(minor) if minor is not None else 0,
        patch=int(patch) if patch is not None else 0,
        build=int(build) if build is not None else 0,
        has_minor=minor is not None,
        has_patch=patch is not None,
        has_build=build is not None,
        special=match.group("special"),
        raw=version_string,
    )


def try_parse_version(version_string: Optional[str]) -> Optional[Version]:
    """Parse a version string, returning None if it is not valid.

    Examples:
        >>> try_parse_version("1.2").minor
        2
        >>> try_parse_version("v1.2") is None
        True
    """
    version = parse_version(version_string)
    return version if version.is_valid else None


def is_valid_version(version_string: Optional[str]) -> bool:
    """Check if a string parses as a valid version.

    Unlike parse_version, non-string input is reported as False rather than
    raising TypeError.
    """
    if version_string is not None and not isinstance(version_string, str):
        return False
    return parse_version(version_string).is_valid
