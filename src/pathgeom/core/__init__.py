"""Core processing algorithms for pathgeom.

This module contains the core algorithms for:

- Path building (move/line/arc/close commands, winding reversal)
- Arc tessellation in either rotational direction
- Ear-clipping triangulation of closed paths
- Mesh and collider export
- Compilation of named shapes

All geometry services are designed to be:
- Stateless between calls (safe to reuse across shapes)
- Pure (no side effects beyond logging)

Key functions:
- signed_area: Calculate polygon area using shoelace formula
- orientation: Twice the signed area of a triangle
- point_in_triangle: Three edge-sign containment test
- sweep_angle: Arc sweep in a requested direction
- triangulate: Ear-clip a closed path

Key classes:
- PathBuilder: Builds closed paths from drawing commands
- ArcTessellator: Samples arcs into line segments
- Triangulator: Ear-clipping triangulation
- GeometryExporter: Builds meshes and colliders
- PathCompiler: Compiles named shapes with logging and statistics
"""

from pathgeom.core.arc import ArcTessellator, sweep_angle
from pathgeom.core.builder import PathBuilder, PathState
from pathgeom.core.compiler import CompiledShape, CompileResult, PathCompiler
from pathgeom.core.exporter import GeometryExporter
from pathgeom.core.geometry import (
    is_convex_corner,
    orientation,
    point_in_triangle,
    signed_area,
    triangle_signed_area,
    triangles_area,
)
from pathgeom.core.triangulator import Triangulator, triangulate

__all__ = [
    # Arc classes
    "ArcTessellator",
    # Compiler classes
    "CompileResult",
    "CompiledShape",
    # Exporter classes
    "GeometryExporter",
    # Builder classes
    "PathBuilder",
    "PathCompiler",
    "PathState",
    # Triangulator classes
    "Triangulator",
    # Geometry functions
    "is_convex_corner",
    "orientation",
    "point_in_triangle",
    "signed_area",
    "sweep_angle",
    "triangle_signed_area",
    "triangles_area",
    "triangulate",
]
