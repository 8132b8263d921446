"""Utility functions for pathgeom.

This module provides utility functions including:

- Logging setup and configuration
- Per-shape compile logging and statistics
"""

from pathgeom.utils.logging import (
    CompileLogger,
    CompileStats,
    configure_logging,
)

__all__ = [
    "CompileLogger",
    "CompileStats",
    "configure_logging",
]
