"""Compilation orchestration for named shapes.

This module runs the full pipeline (triangulate, export meshes, export the
collider) over a set of named closed paths, the way level-construction code
compiles every wall of a level.

Key components:
- CompiledShape: A shape name with its compiled geometry
- CompileResult: Compiled shapes plus run statistics
- PathCompiler: Main orchestrator class
"""

import math
import time
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from pathgeom.config import PathGeomSettings
from pathgeom.core.arc import ArcTessellator
from pathgeom.core.builder import PathBuilder
from pathgeom.core.exporter import GeometryExporter
from pathgeom.core.geometry import triangles_area
from pathgeom.core.triangulator import Triangulator
from pathgeom.domain import ColliderKind, CompiledGeometry, Path
from pathgeom.exceptions import ShapeCompileError, TriangulationError
from pathgeom.utils import CompileLogger, CompileStats, configure_logging


@dataclass(frozen=True)
class CompiledShape:
    """A named shape and its compiled geometry."""

    name: str
    geometry: CompiledGeometry

    def to_dict(self, include_z: bool = False) -> dict[str, Any]:
        return {"name": self.name, **self.geometry.to_dict(include_z=include_z)}


@dataclass
class CompileResult:
    """Outcome of compiling a set of shapes.

    Attributes:
        shapes: Successfully compiled shapes, in input order
        stats: Counters, timings and failures of the run
    """

    shapes: list[CompiledShape] = field(default_factory=list)
    stats: CompileStats = field(default_factory=CompileStats)

    @property
    def ok(self) -> bool:
        return self.stats.failed_count == 0

    def get(self, name: str) -> CompiledShape | None:
        """Look up a compiled shape by name."""
        for shape in self.shapes:
            if shape.name == name:
                return shape
        return None


class PathCompiler:
    """Compiles named paths into meshes and colliders.

    A shape that fails to triangulate is logged and skipped; the other
    shapes still compile.

    Example:
        settings = PathGeomSettings()
        compiler = PathCompiler(settings)
        result = compiler.compile({"left_wall": left, "right_wall": right})
    """

    def __init__(self, config: PathGeomSettings | None = None, quiet: bool = False) -> None:
        """Initialize the compiler.

        Args:
            config: Application settings (defaults if None)
            quiet: Suppress console log output except errors
        """
        self.config = config or PathGeomSettings()
        self.tessellator = ArcTessellator(self.config.geometry)
        self.triangulator = Triangulator(self.config.geometry)

        self.logger = configure_logging(
            log_file=self.config.logging.log_file,
            console_level=self.config.logging.log_level,
            file_level=self.config.logging.file_log_level,
            quiet=quiet,
        )

    def new_builder(self) -> PathBuilder:
        """Create a path builder that tessellates arcs with this compiler's settings."""
        return PathBuilder(self.tessellator)

    def compile_shape(
        self,
        name: str,
        path: Path,
        collider: ColliderKind | None = None,
    ) -> CompiledShape:
        """Compile one closed path.

        Args:
            name: Shape name for logs and output
            path: Closed path to compile
            collider: Collider flavour (default from settings)

        Returns:
            The compiled shape

        Raises:
            ShapeCompileError: If the path cannot be triangulated
        """
        kind = collider or self.config.export.collider
        exporter = GeometryExporter(path, self.triangulator)
        try:
            geometry = exporter.compile(kind)
        except TriangulationError as e:
            raise ShapeCompileError(name, e.reason) from e
        return CompiledShape(name=name, geometry=geometry)

    def compile(
        self,
        shapes: Mapping[str, Path],
        collider: ColliderKind | None = None,
    ) -> CompileResult:
        """Compile every shape, skipping the ones that fail.

        Args:
            shapes: Closed paths keyed by shape name
            collider: Collider flavour (default from settings)

        Returns:
            CompileResult with the compiled shapes and statistics
        """
        compile_logger = CompileLogger(self.logger)
        stats = compile_logger.stats
        stats.start_time = time.time()
        result = CompileResult(stats=stats)

        self.logger.info("Starting compilation", shape_count=len(shapes))

        for name, path in shapes.items():
            compile_logger.log_shape_start(name, len(path))
            start = time.perf_counter()
            try:
                compiled = self.compile_shape(name, path, collider)
            except ShapeCompileError as e:
                compile_logger.log_shape_error(name, e)
                continue
            duration_ms = (time.perf_counter() - start) * 1000

            path_area = path.signed_area()
            fill_area = triangles_area(path.vertices, compiled.geometry.triangles)
            if not math.isclose(path_area, fill_area, rel_tol=1e-9, abs_tol=1e-9):
                compile_logger.log_area_mismatch(name, path_area, fill_area)

            compile_logger.log_shape_complete(
                name,
                vertex_count=len(path),
                triangle_count=len(compiled.geometry.triangles),
                duration_ms=duration_ms,
            )
            result.shapes.append(compiled)

        stats.end_time = time.time()
        self.logger.info(
            "Compilation complete",
            compiled=stats.compiled_count,
            failed=stats.failed_count,
            triangles=stats.triangle_count,
        )
        return result
