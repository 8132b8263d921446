"""Geometry writer for compiled shapes.

Writes the fill mesh, wireframe and collider of every compiled shape to a
JSON document for tools that consume the geometry outside Python.
"""

import json
from collections.abc import Sequence
from pathlib import Path as FilePath
from typing import Any

from pathgeom import __version__
from pathgeom.config import ExportConfig
from pathgeom.core.compiler import CompiledShape
from pathgeom.exceptions import GeometrySaveError


class GeometryWriter:
    """Writes compiled shapes as JSON.

    Example:
        writer = GeometryWriter(FilePath("level-geometry.json"))
        writer.save(result.shapes)
    """

    def __init__(self, output_path: FilePath, config: ExportConfig | None = None) -> None:
        """Initialize the geometry writer.

        Args:
            output_path: Path where the JSON document will be saved
            config: Export configuration (z component, indentation)
        """
        self._output_path = output_path
        self._config = config or ExportConfig()

    def to_document(self, shapes: Sequence[CompiledShape]) -> dict[str, Any]:
        """Build the JSON-ready document for the shapes."""
        return {
            "generator": f"pathgeom {__version__}",
            "shapes": [shape.to_dict(include_z=self._config.include_z) for shape in shapes],
        }

    def save(self, shapes: Sequence[CompiledShape]) -> None:
        """Write the shapes to the output path.

        Raises:
            GeometrySaveError: If the file cannot be written
        """
        document = self.to_document(shapes)
        try:
            with self._output_path.open("w", encoding="utf-8") as f:
                json.dump(document, f, indent=self._config.indent)
                f.write("\n")
        except OSError as e:
            raise GeometrySaveError(str(self._output_path), str(e)) from e

    @staticmethod
    def get_geometry_path(script_path: FilePath) -> FilePath:
        """Generate the default output path for a script.

        Converts: level.json -> level-geometry.json

        Args:
            script_path: Path script file path

        Returns:
            Path with -geometry suffix before the extension
        """
        return script_path.parent / f"{script_path.stem}-geometry.json"
