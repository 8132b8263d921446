"""Built-in level shapes.

The left and right walls are mirror images of each other. The left wall is
authored counter-clockwise. The right wall is authored with the same steps
mirrored in x, which makes it clockwise, so it is reversed after closing.
The right wall also rounds the top of its bin divider and the floor of its
bin with arcs.
"""

from collections.abc import Callable

from pathgeom.core.arc import ArcTessellator
from pathgeom.core.builder import PathBuilder
from pathgeom.domain import Path, Point, WindingDirection
from pathgeom.levels.dimensions import LevelDimensions

DEFAULT_ARC_SEGMENTS = 10


def build_left_wall(dims: LevelDimensions | None = None) -> Path:
    """Build the left wall: floor, bin divider, bin, outer wall and ceiling.

    Args:
        dims: Level dimensions (defaults if None)

    Returns:
        Closed counter-clockwise path
    """
    d = dims or LevelDimensions()
    half_playfield = d.playfield_width / 2.0
    divider_outer = half_playfield + d.playfield_wall_thickness

    path = PathBuilder()
    path.move_to(Point(d.left, d.bottom))
    path.line_to(Point(-d.drain_width / 2.0, d.bottom))
    path.line_to(Point(-d.drain_width / 2.0, d.bottom + d.outer_wall_thickness))
    path.line_to(Point(-half_playfield, d.bottom + d.floor_rise))
    path.line_to(Point(-half_playfield, d.bin_top))
    path.line_to(Point(-divider_outer, d.bin_top))
    path.line_to(Point(-divider_outer, d.bin_bottom))
    path.line_to(Point(d.left + d.outer_wall_thickness, d.bin_bottom))
    path.line_to(Point(d.left + d.outer_wall_thickness, d.top - d.shoulder_drop))
    path.line_to(Point(-d.inlet_width / 2.0, d.top - d.outer_wall_thickness))
    path.line_to(Point(-d.inlet_width / 2.0, d.top))
    path.line_to(Point(d.left, d.top))
    return path.close()


def build_right_wall(
    dims: LevelDimensions | None = None,
    segments: int = DEFAULT_ARC_SEGMENTS,
    tessellator: ArcTessellator | None = None,
) -> Path:
    """Build the right wall with a rounded divider cap and a rounded bin floor.

    Args:
        dims: Level dimensions (defaults if None)
        segments: Line segments per arc
        tessellator: Arc tessellator (defaults if None)

    Returns:
        Closed counter-clockwise path
    """
    d = dims or LevelDimensions()
    half_playfield = d.playfield_width / 2.0
    wall = d.playfield_wall_thickness
    divider_outer = half_playfield + wall
    cap_y = d.bin_top - wall / 2.0
    bin_mid_y = d.bin_bottom + d.bin_width / 2.0

    path = PathBuilder(tessellator)
    path.move_to(Point(d.right, d.bottom))
    path.line_to(Point(d.drain_width / 2.0, d.bottom))
    path.line_to(Point(d.drain_width / 2.0, d.bottom + d.outer_wall_thickness))
    path.line_to(Point(half_playfield, d.bottom + d.floor_rise))
    path.line_to(Point(half_playfield, cap_y))
    path.arc_to(
        Point(divider_outer, cap_y),
        Point(half_playfield + wall / 2.0, cap_y),
        segments,
        WindingDirection.CLOCKWISE,
    )
    path.line_to(Point(divider_outer, bin_mid_y))
    path.arc_to(
        Point(d.right - d.outer_wall_thickness, bin_mid_y),
        Point(divider_outer + d.bin_width / 2.0, bin_mid_y),
        segments,
        WindingDirection.COUNTER_CLOCKWISE,
    )
    path.line_to(Point(d.right - d.outer_wall_thickness, d.top - d.shoulder_drop))
    path.line_to(Point(d.inlet_width / 2.0, d.top - d.outer_wall_thickness))
    path.line_to(Point(d.inlet_width / 2.0, d.top))
    path.line_to(Point(d.right, d.top))
    path.close()
    return path.reverse_winding_order()


def build_test_shape(
    segments: int = DEFAULT_ARC_SEGMENTS,
    tessellator: ArcTessellator | None = None,
) -> Path:
    """Build a unit tile with a convex rounded corner and a concave bite.

    Args:
        segments: Line segments per arc
        tessellator: Arc tessellator (defaults if None)

    Returns:
        Closed counter-clockwise path
    """
    path = PathBuilder(tessellator)
    path.move_to(Point(0.0, 0.0))
    path.line_to(Point(0.0, 1.0))
    path.line_to(Point(0.5, 1.0))
    path.arc_to(Point(1.0, 0.5), Point(0.5, 0.5), segments, WindingDirection.CLOCKWISE)
    path.arc_to(
        Point(0.5, 0.0), Point(1.0, 0.0), segments, WindingDirection.COUNTER_CLOCKWISE
    )
    path.close()
    return path.reverse_winding_order()


LEVEL_SHAPES: dict[str, Callable[[LevelDimensions, int, ArcTessellator | None], Path]] = {
    "left_wall": lambda dims, _segments, _tessellator: build_left_wall(dims),
    "right_wall": lambda dims, segments, tessellator: build_right_wall(
        dims, segments, tessellator
    ),
    "test_shape": lambda _dims, segments, tessellator: build_test_shape(segments, tessellator),
}


def build_level(
    dims: LevelDimensions | None = None,
    segments: int = DEFAULT_ARC_SEGMENTS,
    tessellator: ArcTessellator | None = None,
) -> dict[str, Path]:
    """Build every built-in shape of the level.

    Args:
        dims: Level dimensions (defaults if None)
        segments: Line segments per arc
        tessellator: Arc tessellator (defaults if None)

    Returns:
        Closed paths keyed by shape name
    """
    d = dims or LevelDimensions()
    return {name: factory(d, segments, tessellator) for name, factory in LEVEL_SHAPES.items()}
