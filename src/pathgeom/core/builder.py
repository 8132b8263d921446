"""Path builder turning drawing commands into a closed path.

The builder moves through three phases:

    EMPTY --move_to--> OPEN --close--> CLOSED

Commands issued in the wrong phase raise PathStateError, so a path can never
be extended after it has been closed or drawn before it has a start point.
"""

import logging
from enum import Enum

from pathgeom.core.arc import ArcTessellator
from pathgeom.domain import Edge, Path, Point, WindingDirection
from pathgeom.exceptions import PathStateError

logger = logging.getLogger(__name__)


class PathState(str, Enum):
    """Builder phase."""

    EMPTY = "empty"
    OPEN = "open"
    CLOSED = "closed"


class PathBuilder:
    """Accumulates vertices and edges from move/line/arc/close commands.

    Example:
        builder = PathBuilder()
        builder.move_to(Point(0.0, 0.0))
        builder.line_to(Point(1.0, 0.0))
        builder.line_to(Point(1.0, 1.0))
        builder.line_to(Point(0.0, 1.0))
        path = builder.close()
    """

    def __init__(self, tessellator: ArcTessellator | None = None) -> None:
        """Initialize an empty builder.

        Args:
            tessellator: Arc tessellator used by arc_to (default settings if None)
        """
        self._tessellator = tessellator or ArcTessellator()
        self._vertices: list[Point] = []
        self._edges: list[Edge] = []
        self._state = PathState.EMPTY

    @property
    def state(self) -> PathState:
        return self._state

    @property
    def vertices(self) -> tuple[Point, ...]:
        return tuple(self._vertices)

    @property
    def edges(self) -> tuple[Edge, ...]:
        return tuple(self._edges)

    @property
    def current_point(self) -> Point:
        """Last vertex appended to the path."""
        self._require(PathState.OPEN, "read the current point")
        return self._vertices[-1]

    @property
    def path(self) -> Path:
        """The closed path in its current winding order."""
        self._require(PathState.CLOSED, "read the closed path")
        return Path(vertices=tuple(self._vertices), edges=tuple(self._edges))

    def _require(self, state: PathState, operation: str) -> None:
        if self._state is not state:
            raise PathStateError(operation, self._state.value)

    def move_to(self, pos: Point) -> None:
        """Start the path at pos (vertex 0).

        Raises:
            PathStateError: If the path already has a start point
        """
        self._require(PathState.EMPTY, "move_to")
        self._vertices.append(pos)
        self._state = PathState.OPEN

    def line_to(self, pos: Point) -> None:
        """Append pos as a new vertex joined to the previous one.

        Raises:
            PathStateError: If the path has no start point or is closed
        """
        self._require(PathState.OPEN, "line_to")
        index = len(self._vertices)
        self._vertices.append(pos)
        self._edges.append((index - 1, index))

    def arc_to(
        self,
        end_pos: Point,
        arc_center: Point,
        num_segments: int | None = None,
        direction: WindingDirection = WindingDirection.COUNTER_CLOCKWISE,
    ) -> None:
        """Append a circular arc from the current point to end_pos.

        Exactly num_segments vertices and edges are appended. end_pos should
        be as far from arc_center as the current point is; see
        ArcTessellator.tessellate.

        Args:
            end_pos: Where the arc ends
            arc_center: Center of the circle
            num_segments: Number of line segments (default from config)
            direction: Rotational direction of travel

        Raises:
            PathStateError: If the path has no start point or is closed
        """
        self._require(PathState.OPEN, "arc_to")
        points = self._tessellator.tessellate(
            start=self._vertices[-1],
            end=end_pos,
            center=arc_center,
            num_segments=num_segments,
            direction=direction,
        )
        for point in points:
            self.line_to(point)

    def close(self) -> Path:
        """Connect the last vertex back to the first.

        Returns:
            The closed path

        Raises:
            PathStateError: If the path is empty or already closed
        """
        self._require(PathState.OPEN, "close")
        self._edges.append((len(self._vertices) - 1, 0))
        self._state = PathState.CLOSED
        logger.debug("Path closed with %d vertices", len(self._vertices))
        return self.path

    def reverse_winding_order(self) -> Path:
        """Reverse the direction and order of the edges (i.e. the winding order).

        Used on one of two mirrored shapes so that both end up with a
        counter-clockwise interior. Applying it twice restores the original
        edges.

        Returns:
            The closed path with its new winding order

        Raises:
            PathStateError: If the path is not closed yet
        """
        self._require(PathState.CLOSED, "reverse the winding order")
        self._edges.reverse()
        self._edges = [(b, a) for a, b in self._edges]
        return self.path
