# SPDX-License-Identifier: MIT
"""Pytest configuration and fixtures for theversion tests."""

from __future__ import annotations

from pathlib import Path
from typing import Generator

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def temp_project(tmp_path: Path) -> Generator[Path, None, None]:
    """Create a temporary project directory with pyproject.toml and a version file."""
    project_dir = tmp_path / "test_project"
    project_dir.mkdir()

    pyproject = project_dir / "pyproject.toml"
    pyproject.write_text(
        """[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "test-package"
version = "1.2.3"
description = "Test package"
dependencies = ["requests>=1.2.3"]

[tool.theversion]
default-part = "minor"
files = ["src/test_package/__init__.py"]

[tool.other]
version = "1.2.3"
"""
    )

    src_dir = project_dir / "src" / "test_package"
    src_dir.mkdir(parents=True)
    (src_dir / "__init__.py").write_text('"""Test package."""\n\n__version__ = "1.2.3"\n')

    yield project_dir
