"""Export of closed paths into render meshes and collider descriptors.

This module converts a closed path into:
- A wireframe LINE_LIST mesh (two positions per boundary edge)
- A fill TRIANGLE_LIST mesh (three positions per triangle)
- A polyline or trimesh collider for a physics engine

Meshes carry no index buffer; every primitive repeats its positions.
"""

import logging

from pathgeom.core.triangulator import Triangulator
from pathgeom.domain import (
    Collider,
    ColliderKind,
    CompiledGeometry,
    Mesh,
    Path,
    PolylineCollider,
    PrimitiveTopology,
    Triangle,
    TrimeshCollider,
)

logger = logging.getLogger(__name__)


class GeometryExporter:
    """Builds meshes and colliders from one closed path.

    Each export that needs triangles runs the triangulator once; the
    exporter hands back plain data and keeps nothing.

    Example:
        exporter = GeometryExporter(path)
        fill = exporter.build_triangle_mesh()
        wireframe = exporter.build_polyline_mesh()
        collider = exporter.build_collider(ColliderKind.TRIMESH)
    """

    def __init__(self, path: Path, triangulator: Triangulator | None = None) -> None:
        """Initialize the exporter.

        Args:
            path: Closed path to export
            triangulator: Triangulator to use (default settings if None)
        """
        self.path = path
        self.triangulator = triangulator or Triangulator()

    def triangulate(self) -> list[Triangle]:
        """Run the triangulator on the path.

        Raises:
            TriangulationError: If the path cannot be triangulated
        """
        return self.triangulator.triangulate(self.path)

    def build_polyline_mesh(self) -> Mesh:
        """Build a line-list mesh with both end points of every boundary edge."""
        vertices = self.path.vertices
        positions = tuple(vertices[i] for edge in self.path.edges for i in edge)
        return Mesh(topology=PrimitiveTopology.LINE_LIST, positions=positions)

    def build_triangle_mesh(self, triangles: list[Triangle] | None = None) -> Mesh:
        """Build a triangle-list mesh covering the path interior.

        Args:
            triangles: Precomputed triangulation of this path (computed if None)

        Raises:
            TriangulationError: If the path cannot be triangulated
        """
        if triangles is None:
            triangles = self.triangulate()
        vertices = self.path.vertices
        positions = tuple(vertices[i] for tri in triangles for i in tri)
        return Mesh(topology=PrimitiveTopology.TRIANGLE_LIST, positions=positions)

    def build_collider(
        self,
        kind: ColliderKind = ColliderKind.POLYLINE,
        triangles: list[Triangle] | None = None,
    ) -> Collider:
        """Build a collision shape descriptor.

        Args:
            kind: POLYLINE for a boundary shape, TRIMESH for a solid triangle soup
            triangles: Precomputed triangulation, used by TRIMESH (computed if None)

        Returns:
            PolylineCollider or TrimeshCollider over the path's vertex array

        Raises:
            TriangulationError: If a trimesh is requested for an invalid path
        """
        if kind is ColliderKind.POLYLINE:
            return PolylineCollider(vertices=self.path.vertices, indices=self.path.edges)

        if triangles is None:
            triangles = self.triangulate()
        return TrimeshCollider(
            vertices=self.path.vertices,
            indices=tuple(tri.to_tuple() for tri in triangles),
        )

    def compile(self, collider: ColliderKind = ColliderKind.POLYLINE) -> CompiledGeometry:
        """Build the fill mesh, wireframe and collider in one pass.

        The path is triangulated once and the triangles are shared by the
        fill mesh and a trimesh collider.

        Args:
            collider: Collision shape flavour

        Returns:
            CompiledGeometry bundling all outputs

        Raises:
            TriangulationError: If the path cannot be triangulated
        """
        triangles = self.triangulate()
        logger.debug(
            "Exporting path: %d edges, %d triangles, %s collider",
            len(self.path.edges),
            len(triangles),
            collider.value,
        )
        return CompiledGeometry(
            path=self.path,
            triangles=tuple(triangles),
            fill=self.build_triangle_mesh(triangles),
            wireframe=self.build_polyline_mesh(),
            collider=self.build_collider(collider, triangles),
        )
