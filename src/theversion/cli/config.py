# SPDX-License-Identifier: MIT
"""CLI configuration loading from pyproject.toml."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from theversion import InvalidVersionError, Version, VERSION_PARTS, parse_version

BUMP_PARTS = VERSION_PARTS + ("last",)

# Where the current version is read from and written back to
SOURCE_PROJECT = "project"
SOURCE_TOOL = "tool"

_TABLE_HEADER = re.compile(r"^\s*\[")


class ConfigError(Exception):
    """Raised when configuration loading fails."""

    pass


@dataclass
class VersionConfig:
    """Version settings loaded from pyproject.toml.

    Attributes:
        project_dir: Directory containing pyproject.toml
        name: Project name
        current_version: Version text as written in pyproject.toml
        version_source: SOURCE_PROJECT for [project].version, SOURCE_TOOL for
            [tool.theversion].current-version
        default_part: Part bumped when none is given on the command line
        files: Extra files whose version text is rewritten on bump
    """

    project_dir: Path
    name: str = ""
    current_version: str = ""
    version_source: str = SOURCE_PROJECT
    default_part: str = "last"
    files: list[Path] = field(default_factory=list)

    @classmethod
    def from_pyproject(cls, project_dir: str | Path) -> "VersionConfig":
        """Load configuration from pyproject.toml.

        Args:
            project_dir: Directory containing pyproject.toml

        Returns:
            VersionConfig instance

        Raises:
            ConfigError: If the file is invalid or has bad [tool.theversion] values
            FileNotFoundError: If pyproject.toml doesn't exist
        """
        project_path = Path(project_dir)
        pyproject_path = project_path / "pyproject.toml"

        if not pyproject_path.exists():
            raise FileNotFoundError(f"pyproject.toml not found in {project_path}")

        try:
            with open(pyproject_path, "rb") as f:
                pyproject = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML syntax: {e}") from e

        return cls.from_pyproject_dict(pyproject, project_path)

    @classmethod
    def from_pyproject_dict(
        cls,
        pyproject: dict[str, Any],
        project_dir: Path,
    ) -> "VersionConfig":
        """Create VersionConfig from a parsed pyproject.toml dictionary.

        Raises:
            ConfigError: If [tool.theversion] holds values of the wrong shape
        """
        project = pyproject.get("project", {})
        tool_config = pyproject.get("tool", {}).get("theversion", {})

        if "current-version" in tool_config:
            current_version = tool_config["current-version"]
            version_source = SOURCE_TOOL
        else:
            current_version = project.get("version", "")
            version_source = SOURCE_PROJECT
        if not isinstance(current_version, str):
            raise ConfigError(f"Version must be a string, got {current_version!r}")

        default_part = tool_config.get("default-part", "last")
        if default_part not in BUMP_PARTS:
            raise ConfigError(
                f"Invalid default-part {default_part!r}, expected one of: "
                f"{', '.join(BUMP_PARTS)}"
            )

        files = tool_config.get("files", [])
        if not isinstance(files, list) or not all(isinstance(f, str) for f in files):
            raise ConfigError("[tool.theversion] files must be a list of paths")

        return cls(
            project_dir=project_dir,
            name=project.get("name", ""),
            current_version=current_version,
            version_source=version_source,
            default_part=default_part,
            files=[project_dir / f for f in files],
        )

    @property
    def pyproject_path(self) -> Path:
        return self.project_dir / "pyproject.toml"

    def version(self) -> Version:
        """Return the current version, parsed strictly.

        Raises:
            ConfigError: If no version is configured or it does not parse
        """
        if not self.current_version.strip():
            if self.version_source == SOURCE_PROJECT:
                raise ConfigError(
                    "No [project].version in pyproject.toml. For a dynamic version, "
                    "set current-version in [tool.theversion]."
                )
            raise ConfigError("[tool.theversion] current-version is empty")
        try:
            return parse_version(self.current_version, strict=True)
        except InvalidVersionError as e:
            raise ConfigError(f"Configured version is not valid: {e}") from e


def find_project_root(start_dir: Optional[str | Path] = None) -> Path:
    """Find the project root by looking for pyproject.toml.

    Args:
        start_dir: Directory to start searching from (defaults to cwd)

    Returns:
        Path to the project root directory

    Raises:
        ConfigError: If no project root is found
    """
    current = Path(start_dir) if start_dir else Path.cwd()
    current = current.resolve()

    while current != current.parent:
        if (current / "pyproject.toml").exists():
            return current
        current = current.parent

    raise ConfigError("Could not find project root (no pyproject.toml found)")


def load_config(project_dir: Optional[str | Path] = None) -> VersionConfig:
    """Load version configuration from the project directory.

    Args:
        project_dir: Project directory (defaults to finding project root)

    Raises:
        ConfigError: If configuration cannot be loaded
        FileNotFoundError: If pyproject.toml doesn't exist
    """
    if project_dir is None:
        project_dir = find_project_root()

    return VersionConfig.from_pyproject(project_dir)


def _replace_table_key(text: str, table: str, key: str, old: str, new: str) -> str:
    """Replace ``key = "old"`` inside a TOML table, keeping the quote style."""
    lines = text.splitlines(keepends=True)
    header = re.compile(rf"^\s*\[\s*{re.escape(table)}\s*\]\s*(#.*)?$")
    assignment = re.compile(
        rf"^(?P<prefix>\s*[\"']?{re.escape(key)}[\"']?\s*=\s*)"
        rf"(?P<quote>[\"'])(?P<value>{re.escape(old)})(?P=quote)"
    )

    in_table = False
    for i, line in enumerate(lines):
        if header.match(line):
            in_table = True
            continue
        if in_table and _TABLE_HEADER.match(line):
            break
        if in_table:
            match = assignment.match(line)
            if match:
                lines[i] = (
                    match.group("prefix")
                    + match.group("quote")
                    + new
                    + match.group("quote")
                    + line[match.end() :]
                )
                return "".join(lines)

    raise ConfigError(f"Could not find {key} = {old!r} in [{table}] of pyproject.toml")


def write_version(config: VersionConfig, new_version: Version) -> list[Path]:
    """Write a new version to pyproject.toml and the configured extra files.

    In extra files every quoted string equal to the old version, such as
    ``__version__ = "1.2.3"``, is rewritten. Versions embedded in longer
    strings are left alone. Every file is checked before anything is written,
    so a missing version in any file leaves the project untouched.

    Args:
        config: Loaded configuration; current_version is the text to replace
        new_version: Version to write

    Returns:
        Paths of the files that were rewritten

    Raises:
        ConfigError: If the current version cannot be located in a file
    """
    old = config.current_version
    new = str(new_version)

    if config.version_source == SOURCE_TOOL:
        table, key = "tool.theversion", "current-version"
    else:
        table, key = "project", "version"

    pending: dict[Path, str] = {
        config.pyproject_path: _replace_table_key(
            config.pyproject_path.read_text(encoding="utf-8"), table, key, old, new
        )
    }

    # Only a quoted string holding exactly the old version is replaced, so
    # pins such as "lib>=1.2.7" survive a bump from 1.2
    quoted = re.compile(rf"(?P<quote>[\"']){re.escape(old)}(?P=quote)")

    for path in config.files:
        if not path.exists():
            raise ConfigError(f"Version file not found: {path}")
        content = pending.get(path, path.read_text(encoding="utf-8"))
        content, count = quoted.subn(
            lambda m: m.group("quote") + new + m.group("quote"), content
        )
        if not count:
            raise ConfigError(f"Quoted version {old!r} not found in {path}")
        pending[path] = content

    for path, content in pending.items():
        path.write_text(content, encoding="utf-8")

    return list(pending)
