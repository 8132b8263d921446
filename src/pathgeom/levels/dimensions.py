"""Playfield dimensions for the built-in level walls."""

from pydantic import BaseModel, Field


class LevelDimensions(BaseModel):
    """Sizes of the playfield and its walls, in world units (meters).

    The playfield is centered on the origin. Left and right walls each hold a
    bin next to the playfield, a drain opens in the middle of the floor and
    an inlet opens in the middle of the ceiling.
    """

    width: float = Field(default=16.0, gt=0.0, description="Total level width")
    height: float = Field(default=9.0, gt=0.0, description="Total level height")
    outer_wall_thickness: float = Field(default=0.25, gt=0.0)
    playfield_wall_thickness: float = Field(default=0.4, gt=0.0)
    bin_width: float = Field(default=1.35, gt=0.0)
    bin_floor_height: float = Field(
        default=0.4,
        ge=0.0,
        description="Height of the bin floor above the level bottom",
    )
    bin_top: float = Field(default=0.0, description="Y of the top of the bin dividers")
    drain_width: float = Field(default=2.0, gt=0.0)
    inlet_width: float = Field(default=8.0, gt=0.0)
    floor_rise: float = Field(
        default=1.0,
        ge=0.0,
        description="How far the sloped floor rises from the drain to the bin divider",
    )
    shoulder_drop: float = Field(
        default=3.0,
        ge=0.0,
        description="How far below the top the outer wall starts sloping toward the inlet",
    )

    @property
    def left(self) -> float:
        return -self.width / 2.0

    @property
    def right(self) -> float:
        return self.width / 2.0

    @property
    def bottom(self) -> float:
        return -self.height / 2.0

    @property
    def top(self) -> float:
        return self.height / 2.0

    @property
    def bin_bottom(self) -> float:
        return self.bottom + self.bin_floor_height

    @property
    def playfield_width(self) -> float:
        """Width between the two bin dividers."""
        return self.width - (
            self.outer_wall_thickness + self.playfield_wall_thickness + self.bin_width
        ) * 2.0
