"""Built-in level geometry.

The walls of the sorting level, expressed as path commands in world units:
- LevelDimensions: Playfield and wall sizes
- build_left_wall / build_right_wall: Mirrored wall outlines
- build_test_shape: Small tile exercising both arc directions
- build_level: All walls keyed by name
"""

from pathgeom.levels.dimensions import LevelDimensions
from pathgeom.levels.walls import (
    DEFAULT_ARC_SEGMENTS,
    LEVEL_SHAPES,
    build_left_wall,
    build_level,
    build_right_wall,
    build_test_shape,
)

__all__ = [
    "DEFAULT_ARC_SEGMENTS",
    "LEVEL_SHAPES",
    "LevelDimensions",
    "build_left_wall",
    "build_level",
    "build_right_wall",
    "build_test_shape",
]
