"""Ear-clipping triangulation of closed paths.

A closed, counter-clockwise, simple polygon with n vertices is cut into n-2
triangles by repeatedly clipping an ear: a convex corner whose triangle
contains no other remaining boundary vertex.

The search is O(n^2) per clipped ear in the worst case, O(n^3) overall.
Paths are level-authoring sized (tens of vertices) and triangulated once per
shape, so no reflex-vertex bookkeeping is done.
"""

import logging

from pathgeom.config import GeometryConfig
from pathgeom.core.geometry import is_convex_corner, point_in_triangle, signed_area
from pathgeom.domain import Path, Point, Triangle
from pathgeom.exceptions import TriangulationError

logger = logging.getLogger(__name__)


class Triangulator:
    """Triangulates closed paths by ear clipping.

    The triangulator holds no state between calls: triangulating the same
    path twice gives the same triangles.

    Example:
        triangulator = Triangulator()
        triangles = triangulator.triangulate(path)
    """

    def __init__(self, config: GeometryConfig | None = None) -> None:
        """Initialize the triangulator.

        Args:
            config: Geometry configuration (orientation epsilon)
        """
        self.config = config or GeometryConfig()

    def triangulate(self, path: Path) -> list[Triangle]:
        """Triangulate the interior of a closed path.

        Args:
            path: Closed path whose boundary winds counter-clockwise

        Returns:
            n-2 counter-clockwise triangles indexing path.vertices

        Raises:
            TriangulationError: If the boundary has fewer than 3 vertices,
                does not wind counter-clockwise, or no ear can be found
        """
        remaining = path.boundary_indices()
        if len(remaining) < 3:
            raise TriangulationError(
                f"need at least 3 boundary vertices, got {len(remaining)}", remaining
            )

        area = signed_area(path.boundary_points())
        if area <= 0.0:
            winding = "clockwise" if area < 0.0 else "zero-area"
            raise TriangulationError(
                f"boundary is {winding} (signed area {area:.6g}); "
                "reverse the winding order of clockwise paths",
                remaining,
            )

        vertices = path.vertices
        triangles: list[Triangle] = []

        while len(remaining) >= 3:
            ear = self._find_ear(vertices, remaining)
            if ear is None:
                logger.debug("No ear among remaining vertices %s", remaining)
                raise TriangulationError(
                    f"no ear found with {len(remaining)} vertices remaining; "
                    "the path is self-intersecting or degenerate",
                    remaining,
                )

            count = len(remaining)
            prev_idx = remaining[(ear - 1) % count]
            next_idx = remaining[(ear + 1) % count]
            triangles.append(Triangle(prev_idx, remaining[ear], next_idx))
            del remaining[ear]

        logger.debug(
            "Triangulated %d vertices into %d triangles", len(path.edges), len(triangles)
        )
        return triangles

    def _find_ear(self, vertices: tuple[Point, ...], remaining: list[int]) -> int | None:
        """Position in remaining of the first ear, scanning left to right."""
        count = len(remaining)
        for i in range(count):
            prev_idx = remaining[(i - 1) % count]
            ear_idx = remaining[i]
            next_idx = remaining[(i + 1) % count]
            if self._is_ear(vertices, remaining, prev_idx, ear_idx, next_idx):
                return i
        return None

    def _is_ear(
        self,
        vertices: tuple[Point, ...],
        remaining: list[int],
        prev_idx: int,
        ear_idx: int,
        next_idx: int,
    ) -> bool:
        """Check the orientation and containment tests for one corner."""
        prev_pos = vertices[prev_idx]
        ear_pos = vertices[ear_idx]
        next_pos = vertices[next_idx]

        # Reflex and collinear corners are never ears
        if not is_convex_corner(prev_pos, ear_pos, next_pos, self.config.orientation_epsilon):
            return False

        for idx in remaining:
            if idx in (prev_idx, ear_idx, next_idx):
                continue
            if point_in_triangle(vertices[idx], prev_pos, ear_pos, next_pos):
                return False

        return True


def triangulate(path: Path, config: GeometryConfig | None = None) -> list[Triangle]:
    """Triangulate a closed path with a default Triangulator.

    Args:
        path: Closed path whose boundary winds counter-clockwise
        config: Optional geometry configuration

    Returns:
        Counter-clockwise triangles indexing path.vertices
    """
    return Triangulator(config).triangulate(path)
