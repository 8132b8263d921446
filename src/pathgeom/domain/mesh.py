"""Render mesh and collider types produced from a closed path.

Meshes are flat position buffers with no index buffer and no color/UV
attributes. Colliders are read-only views over a path's vertex array.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Any

from pathgeom.domain.path import Edge, Path, Point


class PrimitiveTopology(str, Enum):
    """How consecutive mesh positions are grouped into primitives."""

    # Positions 0 1 2 3 make the two lines 0-1 and 2-3
    LINE_LIST = "line_list"
    # Positions 0 1 2 3 4 5 make the two triangles 0-1-2 and 3-4-5
    TRIANGLE_LIST = "triangle_list"

    @property
    def vertices_per_primitive(self) -> int:
        return 2 if self is PrimitiveTopology.LINE_LIST else 3


class ColliderKind(str, Enum):
    """Collision shape flavour handed to the physics engine."""

    POLYLINE = "polyline"
    TRIMESH = "trimesh"


@dataclass(frozen=True, slots=True)
class Triangle:
    """Three vertex indices in counter-clockwise order.

    Attributes:
        a: First corner index
        b: Second corner index (the clipped ear)
        c: Third corner index
    """

    a: int
    b: int
    c: int

    def __iter__(self) -> Iterator[int]:
        return iter((self.a, self.b, self.c))

    def to_tuple(self) -> tuple[int, int, int]:
        return (self.a, self.b, self.c)

    def corners(self, vertices: tuple[Point, ...]) -> tuple[Point, Point, Point]:
        """Look up the corner positions in a vertex array."""
        return (vertices[self.a], vertices[self.b], vertices[self.c])


@dataclass(frozen=True)
class Mesh:
    """A flat list of positions grouped by a primitive topology.

    Attributes:
        topology: Primitive grouping of the positions
        positions: Vertex positions, repeated per primitive
    """

    topology: PrimitiveTopology
    positions: tuple[Point, ...]

    @property
    def primitive_count(self) -> int:
        return len(self.positions) // self.topology.vertices_per_primitive

    def primitives(self) -> Iterator[tuple[Point, ...]]:
        """Iterate over positions grouped into lines or triangles."""
        step = self.topology.vertices_per_primitive
        for i in range(0, len(self.positions), step):
            yield self.positions[i : i + step]

    def to_vec3(self) -> list[tuple[float, float, float]]:
        """Widen positions to (x, y, 0.0) for renderers with 3D position attributes."""
        return [(p.x, p.y, 0.0) for p in self.positions]

    def to_dict(self, include_z: bool = False) -> dict[str, Any]:
        """Serialize to dictionary.

        Args:
            include_z: Emit [x, y, 0.0] triples instead of [x, y] pairs

        Returns:
            Dictionary with topology and flat position list
        """
        if include_z:
            positions = [list(p) for p in self.to_vec3()]
        else:
            positions = [list(p.to_tuple()) for p in self.positions]
        return {"topology": self.topology.value, "positions": positions}


@dataclass(frozen=True)
class PolylineCollider:
    """Concave boundary collision shape: vertices plus closed edge pairs."""

    vertices: tuple[Point, ...]
    indices: tuple[Edge, ...]

    kind = ColliderKind.POLYLINE

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "vertices": [list(p.to_tuple()) for p in self.vertices],
            "indices": [list(edge) for edge in self.indices],
        }


@dataclass(frozen=True)
class TrimeshCollider:
    """Solid-fill collision shape: vertices plus triangle index triples."""

    vertices: tuple[Point, ...]
    indices: tuple[tuple[int, int, int], ...]

    kind = ColliderKind.TRIMESH

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "vertices": [list(p.to_tuple()) for p in self.vertices],
            "indices": [list(tri) for tri in self.indices],
        }


Collider = PolylineCollider | TrimeshCollider


@dataclass(frozen=True)
class CompiledGeometry:
    """Everything exported from one closed path.

    Attributes:
        path: The source path
        triangles: Ear-clipping result the fill mesh was built from
        fill: Triangle-list mesh covering the interior
        wireframe: Line-list mesh of the boundary edges
        collider: Physics collision shape
    """

    path: Path
    triangles: tuple[Triangle, ...]
    fill: Mesh
    wireframe: Mesh
    collider: Collider

    def to_dict(self, include_z: bool = False) -> dict[str, Any]:
        """Serialize to dictionary.

        Args:
            include_z: Emit 3-component mesh positions

        Returns:
            Dictionary with path, triangles, meshes and collider
        """
        return {
            "path": self.path.to_dict(),
            "triangles": [list(t) for t in self.triangles],
            "fill": self.fill.to_dict(include_z=include_z),
            "wireframe": self.wireframe.to_dict(include_z=include_z),
            "collider": self.collider.to_dict(),
        }
