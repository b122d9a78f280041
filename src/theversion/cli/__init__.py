# SPDX-License-Identifier: MIT
"""Command-line interface for theversion."""

from .main import cli, main

__all__ = ["cli", "main"]
