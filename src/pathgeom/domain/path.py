"""Core geometric types for path representation.

This module defines the fundamental geometric types used throughout pathgeom:
- Point: A 2D point with vector helpers
- Edge: A directed boundary segment between two vertex indices
- Path: A closed polygon boundary built from drawing commands
- WindingDirection: Enum for rotational direction
"""

import math
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any

Edge = tuple[int, int]


class WindingDirection(Enum):
    """Rotational direction.

    Used both for the sweep of an arc command and for classifying a closed
    path by the sign of its area:
    - Counter-clockwise paths have positive signed area (front-facing)
    - Clockwise paths have negative signed area
    """

    CLOCKWISE = auto()
    COUNTER_CLOCKWISE = auto()

    def reversed(self) -> "WindingDirection":
        """Return the opposite direction."""
        if self is WindingDirection.CLOCKWISE:
            return WindingDirection.COUNTER_CLOCKWISE
        return WindingDirection.CLOCKWISE


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D world space.

    Immutable and hashable, so points can be shared freely between paths.

    Attributes:
        x: X coordinate in world units
        y: Y coordinate in world units
    """

    x: float
    y: float

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def scaled(self, factor: float) -> "Point":
        """Multiply both coordinates by a factor."""
        return Point(self.x * factor, self.y * factor)

    def length(self) -> float:
        """Euclidean length of the point treated as a vector."""
        return math.hypot(self.x, self.y)

    def angle(self) -> float:
        """Angle of the vector in radians, as returned by atan2."""
        return math.atan2(self.y, self.x)

    @classmethod
    def from_polar(cls, radius: float, angle: float) -> "Point":
        """Create a point at the given distance and angle from the origin."""
        return cls(math.cos(angle) * radius, math.sin(angle) * radius)

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with x and y fields
        """
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with x and y fields

        Returns:
            Point instance
        """
        return cls(x=float(data["x"]), y=float(data["y"]))


@dataclass(frozen=True)
class Path:
    """A closed polygon boundary.

    Vertices are stored once; edges refer to them by index. The edge list of
    a closed path forms a single cycle visiting every vertex exactly once.
    Callers guarantee this invariant, it is not checked.

    Attributes:
        vertices: Vertex positions, indexed 0..n-1
        edges: Directed boundary segments as (start, end) vertex indices
    """

    vertices: tuple[Point, ...]
    edges: tuple[Edge, ...]

    def __len__(self) -> int:
        return len(self.vertices)

    def reverse_winding_order(self) -> "Path":
        """Reverse the direction and order of the edges.

        The vertex array is left untouched so indices stay stable. Applying
        this twice returns the original edge list.

        Returns:
            New path with the opposite winding order
        """
        return Path(
            vertices=self.vertices,
            edges=tuple((b, a) for a, b in reversed(self.edges)),
        )

    def boundary_indices(self) -> list[int]:
        """Vertex indices in boundary order, one per edge."""
        return [a for a, _ in self.edges]

    def boundary_points(self) -> list[Point]:
        """Vertex positions in boundary order."""
        return [self.vertices[i] for i in self.boundary_indices()]

    def signed_area(self) -> float:
        """Calculate signed area of the boundary using the shoelace formula.

        Returns:
            Positive for counter-clockwise boundaries, negative for clockwise
        """
        points = self.boundary_points()
        n = len(points)
        if n < 3:
            return 0.0

        area = 0.0
        for i in range(n):
            j = (i + 1) % n
            area += points[i].x * points[j].y
            area -= points[j].x * points[i].y
        return area / 2.0

    def winding_direction(self) -> WindingDirection | None:
        """Classify the boundary winding, None for zero-area boundaries."""
        area = self.signed_area()
        if area > 0:
            return WindingDirection.COUNTER_CLOCKWISE
        if area < 0:
            return WindingDirection.CLOCKWISE
        return None

    def bounding_box(self) -> tuple[float, float, float, float]:
        """Calculate bounding box of the vertices.

        Returns:
            Tuple of (min_x, min_y, max_x, max_y)
        """
        if not self.vertices:
            return (0.0, 0.0, 0.0, 0.0)
        xs = [p.x for p in self.vertices]
        ys = [p.y for p in self.vertices]
        return (min(xs), min(ys), max(xs), max(ys))

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with vertices and edges
        """
        return {
            "vertices": [p.to_dict() for p in self.vertices],
            "edges": [list(edge) for edge in self.edges],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Path":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of a path

        Returns:
            Path instance
        """
        return cls(
            vertices=tuple(Point.from_dict(p) for p in data["vertices"]),
            edges=tuple((int(a), int(b)) for a, b in data["edges"]),
        )
