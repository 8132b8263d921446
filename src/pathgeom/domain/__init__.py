"""Domain models for pathgeom.

This module contains the core domain models representing points, paths,
triangles, meshes and collider descriptors. All models are designed to be:

- Immutable (using frozen dataclasses)
- Serializable to plain dictionaries for JSON output
- Independent of any renderer or physics engine

Key classes:
- Point: A 2D point with vector helpers
- Path: A closed polygon boundary (vertices plus directed edges)
- Triangle: Three counter-clockwise vertex indices
- Mesh: A flat position buffer with a primitive topology
- PolylineCollider / TrimeshCollider: Physics collision shapes
- CompiledGeometry: All outputs exported from one path
"""

from pathgeom.domain.mesh import (
    Collider,
    ColliderKind,
    CompiledGeometry,
    Mesh,
    PolylineCollider,
    PrimitiveTopology,
    Triangle,
    TrimeshCollider,
)
from pathgeom.domain.path import Edge, Path, Point, WindingDirection

__all__: list[str] = [
    # Enums
    "WindingDirection",
    "PrimitiveTopology",
    "ColliderKind",
    # Core types
    "Point",
    "Edge",
    "Path",
    "Triangle",
    "Mesh",
    "PolylineCollider",
    "TrimeshCollider",
    "Collider",
    "CompiledGeometry",
]
