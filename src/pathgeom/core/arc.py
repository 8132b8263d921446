"""Circular arc tessellation.

This module expands an arc command into the points that a path builder
appends with line_to. The arc starts at the current end of the path and is
sampled at a fixed number of evenly spaced angles.

Callers are responsible for passing an end point that lies on the circle
through the start point. A mismatched radius is logged, not corrected: the
last sample lands on the start point's circle at the end point's angle.
"""

import logging
import math

from pathgeom.config import GeometryConfig
from pathgeom.domain import Point, WindingDirection

logger = logging.getLogger(__name__)

TAU = 2.0 * math.pi


def sweep_angle(start_angle: float, end_angle: float, direction: WindingDirection) -> float:
    """Angle to travel from start_angle to end_angle in the given direction.

    Clockwise sweeps are never positive and counter-clockwise sweeps are
    never negative. The result stays within one turn, and equal start and
    end angles give zero rather than a full circle.

    Args:
        start_angle: Starting angle in radians
        end_angle: Ending angle in radians
        direction: Rotational direction of travel

    Returns:
        Signed sweep in radians, in (-2pi, 0] or [0, 2pi)

    Examples:
        >>> sweep_angle(math.pi, 0.0, WindingDirection.CLOCKWISE) == -math.pi
        True
        >>> sweep_angle(math.pi, 0.0, WindingDirection.COUNTER_CLOCKWISE) == math.pi
        True
    """
    sweep = end_angle - start_angle
    if direction is WindingDirection.CLOCKWISE:
        if sweep > 0.0:
            sweep -= TAU
    elif sweep < 0.0:
        sweep += TAU
    return sweep


class ArcTessellator:
    """Samples circular arcs into line segment end points.

    Example:
        tessellator = ArcTessellator()
        points = tessellator.tessellate(
            start=Point(0.0, 1.0),
            end=Point(1.0, 0.0),
            center=Point(0.0, 0.0),
            num_segments=8,
            direction=WindingDirection.CLOCKWISE,
        )
    """

    def __init__(self, config: GeometryConfig | None = None) -> None:
        """Initialize the arc tessellator.

        Args:
            config: Geometry configuration (default segment count, radius tolerance)
        """
        self.config = config or GeometryConfig()

    def tessellate(
        self,
        start: Point,
        end: Point,
        center: Point,
        num_segments: int | None = None,
        direction: WindingDirection = WindingDirection.COUNTER_CLOCKWISE,
    ) -> list[Point]:
        """Sample an arc from start to end around center.

        Args:
            start: Current end of the path, the first point on the arc
            end: Target point, expected to lie on the same circle
            center: Arc center
            num_segments: Number of segments (default from config)
            direction: Rotational direction of travel

        Returns:
            num_segments points after start, the last one at the end angle

        Raises:
            ValueError: If num_segments is less than 1
        """
        segments = self.config.arc_segments if num_segments is None else num_segments
        if segments < 1:
            raise ValueError(f"Arc needs at least 1 segment, got {segments}")

        radius = (start - center).length()
        end_radius = (end - center).length()
        if abs(end_radius - radius) > self.config.radius_tolerance:
            logger.warning(
                "Arc end point is off the start circle: start radius %.6f, end radius %.6f",
                radius,
                end_radius,
            )

        start_angle = (start - center).angle()
        end_angle = (end - center).angle()
        step = sweep_angle(start_angle, end_angle, direction) / segments

        logger.debug(
            "Tessellating arc: center=%s radius=%.4f sweep=%.4f segments=%d",
            center.to_tuple(),
            radius,
            step * segments,
            segments,
        )

        return [
            center + Point.from_polar(radius, start_angle + i * step)
            for i in range(1, segments + 1)
        ]
