"""Command-line interface for pathgeom.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Compile a JSON path script or the built-in level
- Per-shape summary table
- Verbose/quiet output modes
- JSON geometry output
"""

from pathgeom.cli.app import cli, main

__all__ = ["cli", "main"]
