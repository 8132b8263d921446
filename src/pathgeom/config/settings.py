"""Configuration settings for Pathgeom."""

from pathlib import Path

from pydantic import BaseModel, Field

from pathgeom.domain import ColliderKind


class GeometryConfig(BaseModel):
    """Configuration for arc tessellation and triangulation."""

    arc_segments: int = Field(
        default=10,
        ge=1,
        le=720,
        description="Line segments per arc when a command does not specify a count",
    )
    orientation_epsilon: float = Field(
        default=0.0,
        ge=0.0,
        le=1e-3,
        description="Twice-area threshold an ear corner must exceed to count as convex",
    )
    radius_tolerance: float = Field(
        default=1e-4,
        ge=0.0,
        description="Allowed start/end radius mismatch before an arc is reported",
    )


class ExportConfig(BaseModel):
    """Configuration for mesh and collider export."""

    collider: ColliderKind = Field(
        default=ColliderKind.POLYLINE,
        description="Collision shape flavour (polyline boundary or trimesh)",
    )
    include_z: bool = Field(
        default=False,
        description="Write mesh positions as (x, y, 0) triples",
    )
    indent: int | None = Field(
        default=2,
        ge=0,
        description="JSON indentation for written geometry (None = compact)",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class PathGeomSettings(BaseModel):
    """Main application settings."""

    geometry: GeometryConfig = Field(default_factory=GeometryConfig)
    export: ExportConfig = Field(default_factory=ExportConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> PathGeomSettings:
    """Get default application settings."""
    return PathGeomSettings()
