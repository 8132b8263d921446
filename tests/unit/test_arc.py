"""Unit tests for arc tessellation.

Tests cover:
- Sweep angle in both rotational directions
- Segment counts and end point placement
- Complementary arcs for opposite directions
- Radius mismatch reporting
"""

import logging
import math

import pytest

from pathgeom.config import GeometryConfig
from pathgeom.core.arc import ArcTessellator, sweep_angle
from pathgeom.core.geometry import orientation
from pathgeom.domain import Point, WindingDirection

CW = WindingDirection.CLOCKWISE
CCW = WindingDirection.COUNTER_CLOCKWISE


@pytest.fixture
def tessellator() -> ArcTessellator:
    return ArcTessellator()


class TestSweepAngle:
    """Tests for direction-aware sweep computation."""

    def test_half_turn_both_directions(self):
        assert sweep_angle(math.pi, 0.0, CW) == pytest.approx(-math.pi)
        assert sweep_angle(math.pi, 0.0, CCW) == pytest.approx(math.pi)

    def test_quarter_turn(self):
        assert sweep_angle(0.0, math.pi / 2, CCW) == pytest.approx(math.pi / 2)
        assert sweep_angle(0.0, math.pi / 2, CW) == pytest.approx(-3 * math.pi / 2)

    def test_atan2_branch_cut(self):
        """Start at -pi behaves like start at pi."""
        assert sweep_angle(-math.pi, 0.0, CW) == pytest.approx(-math.pi)
        assert sweep_angle(-math.pi, 0.0, CCW) == pytest.approx(math.pi)

    def test_equal_angles_sweep_nothing(self):
        assert sweep_angle(1.0, 1.0, CW) == 0.0
        assert sweep_angle(1.0, 1.0, CCW) == 0.0

    @pytest.mark.parametrize(
        "start,end",
        [(0.0, 1.0), (2.5, -2.5), (-0.3, 0.2), (3.0, -3.0)],
    )
    def test_directions_are_complementary(self, start, end):
        """Clockwise and counter-clockwise sweeps add up to a full turn."""
        total = abs(sweep_angle(start, end, CW)) + abs(sweep_angle(start, end, CCW))
        assert total == pytest.approx(2 * math.pi)


class TestTessellate:
    """Tests for ArcTessellator.tessellate."""

    def test_segment_count(self, tessellator):
        points = tessellator.tessellate(
            Point(1.0, 0.0), Point(0.0, 1.0), Point(0.0, 0.0), 7, CCW
        )
        assert len(points) == 7

    def test_lands_on_end_point(self, tessellator):
        points = tessellator.tessellate(
            Point(1.0, 0.0), Point(0.0, 1.0), Point(0.0, 0.0), 4, CCW
        )
        assert points[-1].x == pytest.approx(0.0, abs=1e-12)
        assert points[-1].y == pytest.approx(1.0)

    def test_points_lie_on_circle(self, tessellator):
        center = Point(2.0, -1.0)
        points = tessellator.tessellate(Point(3.5, -1.0), Point(0.5, -1.0), center, 12, CW)
        for p in points:
            assert (p - center).length() == pytest.approx(1.5)

    def test_clockwise_half_circle_goes_over_top(self, tessellator):
        """Left to right clockwise passes above the center."""
        points = tessellator.tessellate(
            Point(-1.0, 0.0), Point(1.0, 0.0), Point(0.0, 0.0), 10, CW
        )
        assert points[4].y == pytest.approx(1.0)
        assert all(p.y >= -1e-12 for p in points)

    def test_counter_clockwise_half_circle_goes_under(self, tessellator):
        """Left to right counter-clockwise passes below the center."""
        points = tessellator.tessellate(
            Point(-1.0, 0.0), Point(1.0, 0.0), Point(0.0, 0.0), 10, CCW
        )
        assert points[4].y == pytest.approx(-1.0)
        assert all(p.y <= 1e-12 for p in points)

    def test_opposite_directions_on_opposite_sides_of_chord(self, tessellator):
        start, end, center = Point(1.0, 0.0), Point(0.0, 1.0), Point(0.0, 0.0)
        cw_points = tessellator.tessellate(start, end, center, 8, CW)
        ccw_points = tessellator.tessellate(start, end, center, 8, CCW)

        # Interior samples only; the last sample sits on the chord end point
        cw_sides = [orientation(start, end, p) for p in cw_points[:-1]]
        ccw_sides = [orientation(start, end, p) for p in ccw_points[:-1]]
        # The clockwise arc takes the long way round, left of start->end
        assert all(side > 0 for side in cw_sides)
        assert all(side < 0 for side in ccw_sides)

    def test_default_segments_from_config(self):
        tessellator = ArcTessellator(GeometryConfig(arc_segments=5))
        points = tessellator.tessellate(Point(1.0, 0.0), Point(-1.0, 0.0), Point(0.0, 0.0))
        assert len(points) == 5

    def test_zero_segments_rejected(self, tessellator):
        with pytest.raises(ValueError, match="at least 1 segment"):
            tessellator.tessellate(Point(1.0, 0.0), Point(0.0, 1.0), Point(0.0, 0.0), 0)

    def test_radius_mismatch_is_logged_not_fixed(self, tessellator, caplog):
        """The arc keeps the start radius and ends at the end point's angle."""
        with caplog.at_level(logging.WARNING, logger="pathgeom.core.arc"):
            points = tessellator.tessellate(
                Point(1.0, 0.0), Point(0.0, 2.0), Point(0.0, 0.0), 4, CCW
            )
        assert "off the start circle" in caplog.text
        assert points[-1].x == pytest.approx(0.0, abs=1e-12)
        assert points[-1].y == pytest.approx(1.0)

    def test_matching_radius_is_quiet(self, tessellator, caplog):
        with caplog.at_level(logging.WARNING, logger="pathgeom.core.arc"):
            tessellator.tessellate(Point(1.0, 0.0), Point(0.0, 1.0), Point(0.0, 0.0), 4, CCW)
        assert "off the start circle" not in caplog.text
