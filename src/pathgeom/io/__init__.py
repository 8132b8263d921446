"""File I/O layer for pathgeom.

This module reads path scripts and writes compiled geometry, keeping JSON
handling out of the core compiler.

Key classes:
- PathScriptReader: Load a JSON path script and build its paths
- GeometryWriter: Save compiled shapes as JSON
"""

from pathgeom.io.reader import PathScript, PathScriptReader, ShapeScript
from pathgeom.io.writer import GeometryWriter

__all__ = [
    "GeometryWriter",
    "PathScript",
    "PathScriptReader",
    "ShapeScript",
]
